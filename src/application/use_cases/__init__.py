"""Application use cases package."""

from .build_report_data import BuildReportDataUseCase
from .export_report import ExportReportUseCase, build_export_filename
from .manage_reports import (
    GenerateReportUseCase,
    ListReportsUseCase,
    ResolveOwnerUseCase,
)
from .open_report import OpenReportUseCase
from .report_session import RequestToken, ReportSession

__all__ = [
    "BuildReportDataUseCase",
    "ExportReportUseCase",
    "build_export_filename",
    "GenerateReportUseCase",
    "ListReportsUseCase",
    "ResolveOwnerUseCase",
    "OpenReportUseCase",
    "RequestToken",
    "ReportSession",
]
