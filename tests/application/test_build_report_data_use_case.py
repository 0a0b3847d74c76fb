"""Tests for the BuildReportDataUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.build_report_data import (
    BuildReportDataUseCase,
)
from src.domain.errors import FetchFailedError, UnknownPeriodError
from src.domain.models import CashMovement, LedgerEntry, MovementType
from src.infrastructure.clock import FixedClock

NOW = datetime(2025, 1, 20, 10, 0)


def _build_repository(movements, entries) -> MagicMock:
    repository = MagicMock()
    repository.fetch_cash_movements.return_value = movements
    repository.fetch_ledger_entries.return_value = entries
    return repository


def test_execute_aggregates_with_injected_clock() -> None:
    """The clock should decide which month is current."""
    movements = [
        CashMovement(
            id=1,
            date=date(2025, 1, 10),
            type=MovementType.INCOME,
            category="Vendas",
            description=None,
            amount=Decimal("1000"),
        ),
        CashMovement(
            id=2,
            date=date(2024, 12, 10),
            type=MovementType.INCOME,
            category="Vendas",
            description=None,
            amount=Decimal("50"),
        ),
    ]
    entries = [
        LedgerEntry(
            id=1,
            date=date(2025, 1, 5),
            type="ICMS",
            category=None,
            description=None,
            amount=Decimal("150"),
        )
    ]
    repository = _build_repository(movements, entries)
    use_case = BuildReportDataUseCase(
        repository,
        FixedClock(NOW),
        logger=MagicMock(),
    )

    report = use_case.execute("current_month")

    assert report.total_income == Decimal("1000")
    assert report.total_ledger_debt == Decimal("150")
    assert report.monthly_trend[-1].month_label == "jan/2025"
    assert report.monthly_trend[-2].income == Decimal("50")


def test_execute_reads_store_on_every_call() -> None:
    """Nothing should be cached between calls."""
    repository = _build_repository([], [])
    use_case = BuildReportDataUseCase(
        repository,
        FixedClock(NOW),
        logger=MagicMock(),
    )

    use_case.execute("all")
    use_case.execute("all")

    assert repository.fetch_cash_movements.call_count == 2
    assert repository.fetch_ledger_entries.call_count == 2


def test_unknown_period_fails_before_fetching() -> None:
    """An invalid selector should not hit the record store."""
    repository = _build_repository([], [])
    use_case = BuildReportDataUseCase(
        repository,
        FixedClock(NOW),
        logger=MagicMock(),
    )

    with pytest.raises(UnknownPeriodError):
        use_case.execute("fortnight")

    repository.fetch_cash_movements.assert_not_called()


def test_fetch_failures_propagate() -> None:
    """Repository failures should be terminal for the request."""
    repository = _build_repository([], [])
    repository.fetch_ledger_entries.side_effect = FetchFailedError("down")
    use_case = BuildReportDataUseCase(
        repository,
        FixedClock(NOW),
        logger=MagicMock(),
    )

    with pytest.raises(FetchFailedError):
        use_case.execute("current_year")


def test_custom_period_uses_range() -> None:
    movements = [
        CashMovement(
            id=index,
            date=date(2025, 1, day),
            type=MovementType.EXPENSE,
            category="Aluguel",
            description=None,
            amount=Decimal("10"),
        )
        for index, day in enumerate((1, 5, 9), start=1)
    ]
    use_case = BuildReportDataUseCase(
        _build_repository(movements, []),
        FixedClock(NOW),
        logger=MagicMock(),
    )

    report = use_case.execute("custom", date(2025, 1, 2), date(2025, 1, 9))

    assert report.total_cash_expense == Decimal("20")
