"""Domain models for report aggregates and report labels."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.domain.models.records import CashMovement, LedgerEntry


class ReportType(str, Enum):
    """Kind of report requested by the user."""

    FINANCIAL = "financial"
    CASH_FLOW = "cash_flow"
    CATEGORIES = "categories"
    TAXES = "taxes"
    DEBTS = "debts"

    @property
    def title(self) -> str:
        """Return the document title used in exports."""
        return _REPORT_TITLES[self]


_REPORT_TITLES = {
    ReportType.FINANCIAL: "Relatório Financeiro",
    ReportType.CASH_FLOW: "Fluxo de Caixa",
    ReportType.CATEGORIES: "Relatório por Categorias",
    ReportType.TAXES: "Relatório de Impostos",
    ReportType.DEBTS: "Relatório de Dívidas",
}


class ReportPeriod(str, Enum):
    """Period stored on a report label."""

    CURRENT_MONTH = "current_month"
    QUARTER = "quarter"
    SEMESTER = "semester"
    CURRENT_YEAR = "current_year"
    CUSTOM = "custom"


class ReportFormat(str, Enum):
    """Export format stored on a report label."""

    PDF = "pdf"
    EXCEL = "excel"
    CSV = "csv"


@dataclass(frozen=True)
class TrendBucket:
    """Totals for one calendar month of the trailing trend."""

    month_label: str
    year: int
    month: int
    income: Decimal
    cash_expense: Decimal
    ledger_debt: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus cash expense and ledger debt."""
        return self.income - self.cash_expense - self.ledger_debt


@dataclass(frozen=True)
class ReportData:
    """Aggregated report figures for one period.

    Attributes:
        total_income: Sum of income cash movements in the period.
        total_cash_expense: Sum of expense cash movements in the period.
        total_ledger_debt: Sum of every ledger entry in the period.
        net_balance: Income minus cash expense (ledger debt excluded).
        by_category: Cash movement sums keyed by category (read-only).
        by_ledger_type: Ledger entry sums keyed by type (read-only).
        monthly_trend: Six trailing months, oldest first, unfiltered.
        cash_movements: Period-filtered cash movements.
        ledger_entries: Period-filtered ledger entries.
    """

    total_income: Decimal
    total_cash_expense: Decimal
    total_ledger_debt: Decimal
    net_balance: Decimal
    by_category: Mapping[str, Decimal]
    by_ledger_type: Mapping[str, Decimal]
    monthly_trend: tuple[TrendBucket, ...]
    cash_movements: tuple[CashMovement, ...] = field(default_factory=tuple)
    ledger_entries: tuple[LedgerEntry, ...] = field(default_factory=tuple)

    @property
    def total_expense(self) -> Decimal:
        """Return cash expense plus ledger debt."""
        return self.total_cash_expense + self.total_ledger_debt

    def top_categories(
        self,
        limit: int | None = None,
    ) -> list[tuple[str, Decimal]]:
        """Return category sums sorted by value, largest first.

        Args:
            limit: Optional maximum number of categories.

        Returns:
            list[tuple[str, Decimal]]: ``(category, amount)`` pairs.
        """
        ordered = _sorted_desc(self.by_category)
        return ordered if limit is None else ordered[:limit]

    def sorted_ledger_types(self) -> list[tuple[str, Decimal]]:
        """Return ledger type sums sorted by value, largest first."""
        return _sorted_desc(self.by_ledger_type)


def _sorted_desc(totals: Mapping[str, Decimal]) -> list[tuple[str, Decimal]]:
    return sorted(totals.items(), key=lambda item: (-item[1], item[0]))


@dataclass(frozen=True)
class ReportRequest:
    """Parameters submitted when generating a report."""

    type: ReportType
    period: ReportPeriod
    format: ReportFormat


@dataclass(frozen=True)
class ReportRecord:
    """Persisted report label; never carries computed data."""

    id: int | None
    type: ReportType
    period: ReportPeriod
    format: ReportFormat
    owner_id: int


__all__ = [
    "ReportType",
    "ReportPeriod",
    "ReportFormat",
    "TrendBucket",
    "ReportData",
    "ReportRequest",
    "ReportRecord",
]
