"""Tests for the report label repository."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.domain.errors import FetchFailedError, PersistFailedError
from src.domain.models import ReportFormat, ReportPeriod, ReportType
from src.infrastructure.report_records_repository import (
    SqlAlchemyReportRecordsRepository,
)


def _build_engine():
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    engine.begin.return_value = context
    return engine, conn


def _repository(engine, logger=None) -> SqlAlchemyReportRecordsRepository:
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return SqlAlchemyReportRecordsRepository(
        db_port,
        logger=logger or MagicMock(),
    )


def test_fetch_report_records_parses_store_codes() -> None:
    """Portuguese store codes should map onto domain enums."""
    engine, conn = _build_engine()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            id=9,
            type="fluxo_caixa",
            period="trimestre",
            format="excel",
            owner_id=3,
        ),
        SimpleNamespace(
            id=8,
            type="financial",
            period="current_month",
            format="pdf",
            owner_id=3,
        ),
    ]
    repository = _repository(engine)

    records = repository.fetch_report_records(3)

    assert [r.id for r in records] == [9, 8]
    assert records[0].type is ReportType.CASH_FLOW
    assert records[0].period is ReportPeriod.QUARTER
    assert records[0].format is ReportFormat.EXCEL
    assert records[1].type is ReportType.FINANCIAL
    _, params = conn.execute.call_args.args
    assert params == {"owner_id": 3}


def test_fetch_report_records_skips_incomplete_labels() -> None:
    engine, conn = _build_engine()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            id=1,
            type="financeiro",
            period=None,
            format="csv",
            owner_id=3,
        )
    ]
    logger = MagicMock()
    repository = _repository(engine, logger)

    assert repository.fetch_report_records(3) == []
    logger.warning.assert_called_once()


def test_insert_report_record_writes_store_codes() -> None:
    """Inserts should use a transaction and the store's codes."""
    engine, conn = _build_engine()
    conn.execute.return_value.scalar_one.return_value = 15
    repository = _repository(engine)

    record = repository.insert_report_record(
        ReportType.TAXES,
        ReportPeriod.SEMESTER,
        ReportFormat.CSV,
        4,
    )

    assert record.id == 15
    assert record.owner_id == 4
    engine.begin.assert_called_once()
    _, params = conn.execute.call_args.args
    assert params == {
        "type": "impostos",
        "period": "semestre",
        "format": "csv",
        "owner_id": 4,
    }


def test_insert_failures_become_persist_failed() -> None:
    engine, conn = _build_engine()
    conn.execute.side_effect = IntegrityError("INSERT", {}, Exception("fk"))
    repository = _repository(engine)

    with pytest.raises(PersistFailedError):
        repository.insert_report_record(
            ReportType.DEBTS,
            ReportPeriod.CUSTOM,
            ReportFormat.PDF,
            4,
        )


def test_fetch_owner_id() -> None:
    engine, conn = _build_engine()
    conn.execute.return_value.first.side_effect = [
        SimpleNamespace(id_usuario=7),
        None,
    ]
    repository = _repository(engine)

    assert repository.fetch_owner_id("auth-7") == 7
    assert repository.fetch_owner_id("missing") is None


def test_owner_lookup_errors_become_fetch_failed() -> None:
    engine, _ = _build_engine()
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception())
    repository = _repository(engine)

    with pytest.raises(FetchFailedError):
        repository.fetch_owner_id("auth-7")
