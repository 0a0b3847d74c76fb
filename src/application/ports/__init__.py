"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .records_repository import FinancialRecordsRepositoryPort
from .report_exporter import ExportContext, ExportPayload, ReportExporterPort
from .report_records_repository import ReportRecordsRepositoryPort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "ExportContext",
    "ExportPayload",
    "FinancialRecordsRepositoryPort",
    "ReportExporterPort",
    "ReportRecordsRepositoryPort",
]
