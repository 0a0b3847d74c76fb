"""SQLAlchemy-backed repository for report labels."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.report_records_repository import (
    ReportRecordsRepositoryPort,
)
from src.domain.errors import FetchFailedError, PersistFailedError
from src.domain.models import (
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportType,
)
from src.infrastructure.logging.logger import get_app_logger

# Store codes written by the original screens, mapped to domain enums.
REPORT_TYPE_CODES = {
    "financeiro": ReportType.FINANCIAL,
    "fluxo_caixa": ReportType.CASH_FLOW,
    "categorias": ReportType.CATEGORIES,
    "impostos": ReportType.TAXES,
    "dividas": ReportType.DEBTS,
}
REPORT_PERIOD_CODES = {
    "mes_atual": ReportPeriod.CURRENT_MONTH,
    "trimestre": ReportPeriod.QUARTER,
    "semestre": ReportPeriod.SEMESTER,
    "ano_atual": ReportPeriod.CURRENT_YEAR,
    "personalizado": ReportPeriod.CUSTOM,
}
REPORT_FORMAT_CODES = {
    "pdf": ReportFormat.PDF,
    "excel": ReportFormat.EXCEL,
    "csv": ReportFormat.CSV,
}

SELECT_REPORTS_SQL = text(
    """
    SELECT id_relatorio AS id,
           tipo AS type,
           periodo AS period,
           formato AS format,
           id_usuario AS owner_id
    FROM relatorio
    WHERE id_usuario = :owner_id
    ORDER BY id_relatorio DESC
    """
)

INSERT_REPORT_SQL = text(
    """
    INSERT INTO relatorio (tipo, periodo, formato, id_usuario)
    VALUES (:type, :period, :format, :owner_id)
    RETURNING id_relatorio
    """
)

SELECT_OWNER_SQL = text(
    """
    SELECT id_usuario
    FROM usuario
    WHERE auth_id = :auth_id
    LIMIT 1
    """
)


def _code_for(mapping: dict, value) -> str:
    for code, member in mapping.items():
        if member == value:
            return code
    raise ValueError(f"No store code for {value!r}")


def _parse_code(mapping: dict, raw: str | None):
    if raw is None:
        return None
    cleaned = raw.strip().lower()
    if cleaned in mapping:
        return mapping[cleaned]
    for member in mapping.values():
        if member.value == cleaned:
            return member
    return None


class SqlAlchemyReportRecordsRepository(ReportRecordsRepositoryPort):
    """Repository storing report labels in the ``relatorio`` table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_report_records(self, owner_id: int) -> list[ReportRecord]:
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_REPORTS_SQL,
                    {"owner_id": owner_id},
                ).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read report labels: {exc}")
            raise FetchFailedError("Could not load report history") from exc

        records = []
        for row in rows:
            report_type = _parse_code(REPORT_TYPE_CODES, row.type)
            period = _parse_code(REPORT_PERIOD_CODES, row.period)
            report_format = _parse_code(REPORT_FORMAT_CODES, row.format)
            if report_type is None or period is None or report_format is None:
                self._logger.warning(
                    f"Skipping report id={row.id} with incomplete label "
                    f"(type={row.type!r}, period={row.period!r}, "
                    f"format={row.format!r})"
                )
                continue
            records.append(
                ReportRecord(
                    id=row.id,
                    type=report_type,
                    period=period,
                    format=report_format,
                    owner_id=row.owner_id,
                )
            )
        return records

    def insert_report_record(
        self,
        report_type: ReportType,
        period: ReportPeriod,
        report_format: ReportFormat,
        owner_id: int,
    ) -> ReportRecord:
        params = {
            "type": _code_for(REPORT_TYPE_CODES, report_type),
            "period": _code_for(REPORT_PERIOD_CODES, period),
            "format": _code_for(REPORT_FORMAT_CODES, report_format),
            "owner_id": owner_id,
        }
        try:
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                report_id = conn.execute(INSERT_REPORT_SQL, params).scalar_one()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to persist report label: {exc}")
            raise PersistFailedError("Could not save the report") from exc
        return ReportRecord(
            id=report_id,
            type=report_type,
            period=period,
            format=report_format,
            owner_id=owner_id,
        )

    def fetch_owner_id(self, auth_id: str) -> int | None:
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_OWNER_SQL,
                    {"auth_id": auth_id},
                ).first()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to resolve report owner: {exc}")
            raise FetchFailedError("Could not load the current user") from exc
        if not row:
            return None
        return row.id_usuario


__all__ = [
    "REPORT_TYPE_CODES",
    "REPORT_PERIOD_CODES",
    "REPORT_FORMAT_CODES",
    "SqlAlchemyReportRecordsRepository",
]
