"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import (
    FinancialRecordsRepositoryPort,
)
from src.application.ports.report_exporter import ReportExporterPort
from src.application.ports.report_records_repository import (
    ReportRecordsRepositoryPort,
)
from src.application.use_cases.build_report_data import (
    BuildReportDataUseCase,
)
from src.application.use_cases.export_report import ExportReportUseCase
from src.application.use_cases.manage_reports import (
    GenerateReportUseCase,
    ListReportsUseCase,
    ResolveOwnerUseCase,
)
from src.application.use_cases.open_report import OpenReportUseCase
from src.infrastructure.clock import SystemClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.exporters import (
    CsvReportExporter,
    ExcelReportExporter,
    PdfReportExporter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.records_repository import (
    SqlAlchemyFinancialRecordsRepository,
)
from src.infrastructure.report_records_repository import (
    SqlAlchemyReportRecordsRepository,
)
from src.infrastructure.settings import ReportSettings


@dataclass(frozen=True)
class ReportUseCases:
    """Use cases needed by the reports page."""

    build_report_data: BuildReportDataUseCase
    export_report: ExportReportUseCase
    open_report: OpenReportUseCase
    generate_report: GenerateReportUseCase
    list_reports: ListReportsUseCase
    resolve_owner: ResolveOwnerUseCase


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FinancialRecordsRepositoryPort:
    """Return the cash movement and ledger entry repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinancialRecordsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_report_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ReportRecordsRepositoryPort:
    """Return the report label repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyReportRecordsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_clock(settings: ReportSettings | None = None) -> ClockPort:
    """Return the wall clock in the configured timezone."""
    resolved = settings or ReportSettings.from_env()
    return SystemClock(resolved.timezone)


def build_exporters() -> list[ReportExporterPort]:
    """Return one exporter per supported format."""
    return [
        PdfReportExporter(),
        ExcelReportExporter(),
        CsvReportExporter(),
    ]


def build_report_use_cases(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
    clock: ClockPort | None = None,
) -> ReportUseCases:
    """Wire every reports use case against shared adapters."""
    resolved_settings = settings or ReportSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    resolved_clock = clock or build_clock(resolved_settings)
    logger = get_app_logger()

    records_repository = build_records_repository(resolved_db)
    report_records_repository = build_report_records_repository(resolved_db)

    build_report_data = BuildReportDataUseCase(
        records_repository,
        resolved_clock,
        logger=logger,
    )
    export_report = ExportReportUseCase(
        build_exporters(),
        resolved_clock,
        currency_code=resolved_settings.currency_code,
        logger=logger,
    )
    return ReportUseCases(
        build_report_data=build_report_data,
        export_report=export_report,
        open_report=OpenReportUseCase(build_report_data, export_report),
        generate_report=GenerateReportUseCase(
            report_records_repository,
            logger=logger,
        ),
        list_reports=ListReportsUseCase(
            report_records_repository,
            logger=logger,
        ),
        resolve_owner=ResolveOwnerUseCase(report_records_repository),
    )


__all__ = [
    "ReportUseCases",
    "build_database_adapter",
    "build_records_repository",
    "build_report_records_repository",
    "build_clock",
    "build_exporters",
    "build_report_use_cases",
]
