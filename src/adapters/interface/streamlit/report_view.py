"""Report presentation logic for the Streamlit UI.

Pure transformations from ``ReportData`` and ``ReportRecord`` values to the
rows and chart payloads the reports page renders. No Streamlit calls and no
IO happen here so every helper can be unit-tested.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models import (
    ReportData,
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportType,
    TrendBucket,
)
from src.utils.decimal_utils import format_currency

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


PERIOD_OPTIONS = {
    "current_month": "Mês Atual",
    "current_year": "Ano Atual",
    "all": "Todos",
}

REPORT_TYPE_LABELS = {
    ReportType.FINANCIAL: "Relatório Financeiro",
    ReportType.CASH_FLOW: "Fluxo de Caixa",
    ReportType.CATEGORIES: "Por Categorias",
    ReportType.TAXES: "Relatório de Impostos",
    ReportType.DEBTS: "Relatório de Dívidas",
}

REPORT_PERIOD_LABELS = {
    ReportPeriod.CURRENT_MONTH: "Mês Atual",
    ReportPeriod.QUARTER: "Trimestre",
    ReportPeriod.SEMESTER: "Semestre",
    ReportPeriod.CURRENT_YEAR: "Ano Atual",
    ReportPeriod.CUSTOM: "Personalizado",
}

REPORT_FORMAT_LABELS = {
    ReportFormat.PDF: "PDF",
    ReportFormat.EXCEL: "Excel",
    ReportFormat.CSV: "CSV",
}

OTHER_SLICE_LABEL = "Outras"


def share_percent(value: Decimal, total: Decimal) -> Decimal:
    """Return ``value`` as a percentage of ``total`` (0 when total is 0)."""
    if total == 0:
        return Decimal("0")
    return (value / total) * Decimal("100")


def build_summary_metrics(
    report: ReportData,
    currency_code: str = "BRL",
) -> list[dict[str, str]]:
    """Return the four headline figures for ``st.metric``."""
    return [
        {
            "label": "Receitas",
            "value": format_currency(report.total_income, currency_code),
            "help": "Total de entradas no período",
        },
        {
            "label": "Despesas (Caixa)",
            "value": format_currency(report.total_cash_expense, currency_code),
            "help": "Total de saídas do caixa",
        },
        {
            "label": "Dívidas",
            "value": format_currency(report.total_ledger_debt, currency_code),
            "help": "Total de lançamentos",
        },
        {
            "label": "Saldo",
            "value": format_currency(report.net_balance, currency_code),
            "help": "Resultado do período",
        },
    ]


def prepare_category_chart_data(
    report: ReportData,
    max_categories: int = 8,
    currency_code: str = "BRL",
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Shares are computed against income plus cash expense, the sum every
    category partitions.

    Args:
        report: Aggregated report data.
        max_categories: Categories kept before grouping into Other.
        currency_code: Currency used for labels.

    Returns:
        Altair-ready chart rows.
    """
    ordered = report.top_categories()
    top_items = ordered[:max_categories]
    other_amount = sum(
        (amount for _, amount in ordered[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, (OTHER_SLICE_LABEL, other_amount)]

    total = report.total_income + report.total_cash_expense
    return [
        {
            "category": category,
            "amount": float(amount),
            "amount_label": format_currency(amount, currency_code),
            "share_label": f"{share_percent(amount, total):.1f}%",
        }
        for category, amount in top_items
    ]


def build_ledger_type_rows(
    report: ReportData,
    currency_code: str = "BRL",
) -> list[dict[str, str]]:
    """Return ledger type rows sorted by amount with their debt share."""
    return [
        {
            "Tipo": ledger_type,
            "Valor": format_currency(amount, currency_code),
            "Participação": (
                f"{share_percent(amount, report.total_ledger_debt):.1f}%"
            ),
        }
        for ledger_type, amount in report.sorted_ledger_types()
    ]


def build_trend_rows(
    trend: tuple[TrendBucket, ...],
    currency_code: str = "BRL",
) -> list[dict[str, str]]:
    """Return one table row per trend month, oldest first."""
    return [
        {
            "Mês": bucket.month_label,
            "Receitas": format_currency(bucket.income, currency_code),
            "Despesas": format_currency(bucket.cash_expense, currency_code),
            "Dívidas": format_currency(bucket.ledger_debt, currency_code),
            "Saldo": format_currency(bucket.balance, currency_code),
        }
        for bucket in trend
    ]


def build_trend_figure(trend: tuple[TrendBucket, ...]) -> "go.Figure":
    """Build a grouped bar chart of the six-month trend.

    Args:
        trend: Trend buckets, oldest first.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    labels = [bucket.month_label for bucket in trend]
    fig = go.Figure(
        data=[
            go.Bar(
                name="Receitas",
                x=labels,
                y=[float(bucket.income) for bucket in trend],
                marker_color="#2e7d32",
            ),
            go.Bar(
                name="Despesas",
                x=labels,
                y=[float(bucket.cash_expense) for bucket in trend],
                marker_color="#e76f51",
            ),
            go.Bar(
                name="Dívidas",
                x=labels,
                y=[float(bucket.ledger_debt) for bucket in trend],
                marker_color="#f4a261",
            ),
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        legend=dict(orientation="h"),
    )
    return fig


def build_detail_rows(report: ReportData) -> tuple[list[dict], list[dict]]:
    """Return cash movement and ledger entry rows for detail tables."""
    movements = [
        {
            "Data": movement.date.strftime("%d/%m/%Y"),
            "Tipo": movement.type.value,
            "Categoria": movement.category,
            "Descrição": movement.description or "—",
            "Valor": format_currency(movement.amount),
        }
        for movement in report.cash_movements
    ]
    entries = [
        {
            "Data": entry.date.strftime("%d/%m/%Y"),
            "Tipo": entry.type,
            "Categoria": entry.category or "—",
            "Descrição": entry.description or "—",
            "Valor": format_currency(entry.amount),
        }
        for entry in report.ledger_entries
    ]
    return movements, entries


def describe_record(record: ReportRecord) -> str:
    """Return the history line for a report label."""
    return (
        f"{REPORT_TYPE_LABELS[record.type]} · "
        f"{REPORT_PERIOD_LABELS[record.period]} · "
        f"{REPORT_FORMAT_LABELS[record.format]}"
    )


__all__ = [
    "PERIOD_OPTIONS",
    "REPORT_TYPE_LABELS",
    "REPORT_PERIOD_LABELS",
    "REPORT_FORMAT_LABELS",
    "OTHER_SLICE_LABEL",
    "share_percent",
    "build_summary_metrics",
    "prepare_category_chart_data",
    "build_ledger_type_rows",
    "build_trend_rows",
    "build_trend_figure",
    "build_detail_rows",
    "describe_record",
]
