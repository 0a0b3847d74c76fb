"""Labels and row builders shared by every export format."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import MovementType, ReportData

DETAIL_HEADERS = ("Data", "Tipo", "Categoria", "Descrição", "Valor")
CATEGORY_SECTION = "Transações por Categoria"
LEDGER_TYPE_SECTION = "Dívidas por Tipo"
SUMMARY_SECTION = "Resumo Financeiro"
MISSING_VALUE = "N/A"

FORMULA_TRIGGERS = ("=", "+", "-", "@", "\t", "\r")

MOVEMENT_TYPE_LABELS = {
    MovementType.INCOME: "Receita",
    MovementType.EXPENSE: "Despesa",
}


def summary_rows(report: ReportData) -> list[tuple[str, Decimal]]:
    """Return the summary block as ``(label, amount)`` pairs."""
    return [
        ("Receitas", report.total_income),
        ("Despesas (Caixa)", report.total_cash_expense),
        ("Dívidas (Lançamentos)", report.total_ledger_debt),
        ("Total de Despesas", report.total_expense),
        ("Saldo", report.net_balance),
    ]


def format_report_date(value: datetime) -> str:
    """Format the generation date as shown in report headers."""
    return value.strftime("%d/%m/%Y")


def sanitize_cell_text(value: str | None) -> str:
    """Neutralize CSV text that spreadsheet tools would run as formulas.

    Args:
        value: Free text from a record (category, type, description).

    Returns:
        str: Text prefixed with a quote when it starts with a formula
        trigger, ``""`` for empty values.
    """
    if not value:
        return ""
    if value.startswith(FORMULA_TRIGGERS):
        return "'" + value
    return value


__all__ = [
    "DETAIL_HEADERS",
    "CATEGORY_SECTION",
    "LEDGER_TYPE_SECTION",
    "SUMMARY_SECTION",
    "MISSING_VALUE",
    "MOVEMENT_TYPE_LABELS",
    "summary_rows",
    "format_report_date",
    "sanitize_cell_text",
]
