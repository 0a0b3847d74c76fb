"""Domain service aggregating cash movements and ledger entries."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from src.domain.constants import MONTH_ABBREVIATIONS, TREND_MONTHS
from src.domain.models import (
    CashMovement,
    LedgerEntry,
    MovementType,
    ReportData,
    TrendBucket,
)
from src.domain.services.periods import DatePredicate, trailing_months
from src.utils.decimal_utils import coerce_decimal


def aggregate(
    cash_movements: Iterable[CashMovement],
    ledger_entries: Iterable[LedgerEntry],
    predicate: DatePredicate,
    *,
    today: date,
) -> ReportData:
    """Compute report totals, breakdowns and the monthly trend.

    Each collection is scanned once. Period totals and group sums only use
    records accepted by ``predicate``; the trend buckets use every record
    so the trailing months stay visible whatever the selected period.

    Args:
        cash_movements: Unfiltered cash movements.
        ledger_entries: Unfiltered ledger entries.
        predicate: Period inclusion test applied to each record date.
        today: Reference day anchoring the trend window.

    Returns:
        ReportData: Aggregated report figures.
    """
    months = trailing_months(today, TREND_MONTHS)
    bucket_index = {key: index for index, key in enumerate(months)}
    trend_income = [Decimal("0")] * TREND_MONTHS
    trend_expense = [Decimal("0")] * TREND_MONTHS
    trend_debt = [Decimal("0")] * TREND_MONTHS

    total_income = Decimal("0")
    total_cash_expense = Decimal("0")
    by_category: dict[str, Decimal] = {}
    filtered_movements: list[CashMovement] = []
    for movement in cash_movements:
        amount = coerce_decimal(movement.amount)
        index = bucket_index.get((movement.date.year, movement.date.month))
        if index is not None:
            if movement.type is MovementType.INCOME:
                trend_income[index] += amount
            else:
                trend_expense[index] += amount
        if not predicate(movement.date):
            continue
        filtered_movements.append(movement)
        if movement.type is MovementType.INCOME:
            total_income += amount
        else:
            total_cash_expense += amount
        by_category[movement.category] = (
            by_category.get(movement.category, Decimal("0")) + amount
        )

    total_ledger_debt = Decimal("0")
    by_ledger_type: dict[str, Decimal] = {}
    filtered_entries: list[LedgerEntry] = []
    for entry in ledger_entries:
        amount = coerce_decimal(entry.amount)
        index = bucket_index.get((entry.date.year, entry.date.month))
        if index is not None:
            trend_debt[index] += amount
        if not predicate(entry.date):
            continue
        filtered_entries.append(entry)
        total_ledger_debt += amount
        by_ledger_type[entry.type] = (
            by_ledger_type.get(entry.type, Decimal("0")) + amount
        )

    monthly_trend = tuple(
        TrendBucket(
            month_label=month_label(year, month),
            year=year,
            month=month,
            income=trend_income[index],
            cash_expense=trend_expense[index],
            ledger_debt=trend_debt[index],
        )
        for index, (year, month) in enumerate(months)
    )

    return ReportData(
        total_income=total_income,
        total_cash_expense=total_cash_expense,
        total_ledger_debt=total_ledger_debt,
        net_balance=total_income - total_cash_expense,
        by_category=MappingProxyType(by_category),
        by_ledger_type=MappingProxyType(by_ledger_type),
        monthly_trend=monthly_trend,
        cash_movements=tuple(filtered_movements),
        ledger_entries=tuple(filtered_entries),
    )


def month_label(year: int, month: int) -> str:
    """Return the short pt-BR label for a calendar month."""
    return f"{MONTH_ABBREVIATIONS[month - 1]}/{year}"


__all__ = ["aggregate", "month_label"]
