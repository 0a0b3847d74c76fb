"""Tests for report domain models and decimal helpers."""

from decimal import Decimal

from src.domain.models import ReportData, ReportType
from src.utils.decimal_utils import format_amount, format_currency


def _report(by_category, by_ledger_type) -> ReportData:
    return ReportData(
        total_income=Decimal("0"),
        total_cash_expense=Decimal("0"),
        total_ledger_debt=Decimal("0"),
        net_balance=Decimal("0"),
        by_category=by_category,
        by_ledger_type=by_ledger_type,
        monthly_trend=(),
    )


def test_top_categories_sorted_by_value_then_name() -> None:
    """Ties should be broken alphabetically for stable output."""
    report = _report(
        {"B": Decimal("5"), "A": Decimal("5"), "C": Decimal("9")},
        {},
    )

    assert report.top_categories() == [
        ("C", Decimal("9")),
        ("A", Decimal("5")),
        ("B", Decimal("5")),
    ]
    assert report.top_categories(limit=1) == [("C", Decimal("9"))]


def test_sorted_ledger_types_desc() -> None:
    report = _report({}, {"ICMS": Decimal("1"), "IPVA": Decimal("2")})

    assert [key for key, _ in report.sorted_ledger_types()] == [
        "IPVA",
        "ICMS",
    ]


def test_report_type_titles() -> None:
    assert ReportType.FINANCIAL.title == "Relatório Financeiro"
    assert ReportType.DEBTS.title == "Relatório de Dívidas"


def test_format_amount_rounds_half_up() -> None:
    """Amounts should render with two decimals, half-up, no grouping."""
    assert format_amount(Decimal("1000")) == "1000.00"
    assert format_amount(Decimal("2.005")) == "2.01"
    assert format_amount(Decimal("-12.5")) == "-12.50"


def test_format_currency_uses_brazilian_separators() -> None:
    assert format_currency(Decimal("1234567.891")) == "R$ 1.234.567,89"
    assert format_currency(Decimal("5"), "USD") == "USD 5,00"
