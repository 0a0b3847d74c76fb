"""Streamlit reports page entry point."""

import sys
from collections.abc import Sequence

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.report_view import (
    PERIOD_OPTIONS,
    REPORT_FORMAT_LABELS,
    REPORT_PERIOD_LABELS,
    REPORT_TYPE_LABELS,
    build_detail_rows,
    build_ledger_type_rows,
    build_summary_metrics,
    build_trend_figure,
    build_trend_rows,
    describe_record,
    prepare_category_chart_data,
)
from src.application.use_cases.report_session import ReportSession
from src.domain.errors import ReportError
from src.domain.models import (
    ReportData,
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportRequest,
    ReportType,
)
from src.infrastructure.container import (
    ReportUseCases,
    build_report_use_cases,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import ReportSettings

SESSION_KEY = "report_session"


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy/pandas look usable for Altair rendering."""
    numpy_module = sys.modules.get("numpy")
    if numpy_module is not None and not hasattr(numpy_module, "ndarray"):
        return False, (
            "numpy is partially initialized (missing ndarray); "
            "charts are disabled."
        )
    pandas_module = sys.modules.get("pandas")
    if pandas_module is not None and not hasattr(pandas_module, "Timestamp"):
        return False, (
            "pandas is partially initialized (missing Timestamp); "
            "charts are disabled."
        )
    return True, None


@st.cache_resource(show_spinner=False)
def _get_settings() -> ReportSettings:
    """Load settings once per server process."""
    return ReportSettings.from_env()


@st.cache_resource(show_spinner=False)
def _get_use_cases() -> ReportUseCases:
    """Wire use cases once per server process.

    Only the wiring is cached. Report data is recomputed on every request.
    """
    return build_report_use_cases(settings=_get_settings())


def _get_session() -> ReportSession:
    """Return the report session bound to this browser session."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = ReportSession()
    return st.session_state[SESSION_KEY]


def _load_report(
    use_cases: ReportUseCases,
    session: ReportSession,
    period: str,
) -> ReportData | None:
    """Aggregate the selected period and publish it into the session."""
    token = session.begin(period)
    try:
        report = use_cases.build_report_data.execute(period)
    except ReportError as exc:
        session.fail(token, exc)
        return None
    session.complete(token, report)
    return session.report


def _render_summary(report: ReportData, currency_code: str) -> None:
    """Render the headline metrics."""
    columns = st.columns(4)
    for column, metric in zip(
        columns,
        build_summary_metrics(report, currency_code),
    ):
        column.metric(metric["label"], metric["value"], help=metric["help"])


def _render_category_chart(
    report: ReportData,
    title: str,
    currency_code: str,
    max_categories: int = 8,
    chart_size: int = 340,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of amounts by category.

    Args:
        report: Aggregated report data.
        title: Chart title to display above the donut.
        currency_code: Currency used for labels.
        max_categories: Maximum categories before grouping into Other.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.
    """
    st.subheader(title)
    if not report.by_category:
        st.info("Nenhuma transação no período.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = prepare_category_chart_data(
        report,
        max_categories=max_categories,
        currency_code=currency_code,
    )
    palette_scale = list(
        palette
        or [
            "#1b9aaa",
            "#2e7d32",
            "#f4a261",
            "#e76f51",
            "#457b9d",
            "#f6c453",
            "#6c8ead",
            "#a0c4ff",
            "#9d8189",
        ]
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=2,
                labelLimit=180,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_ledger_types(report: ReportData, currency_code: str) -> None:
    """Render debts grouped by ledger type."""
    st.subheader("Dívidas por Tipo")
    rows = build_ledger_type_rows(report, currency_code)
    if not rows:
        st.info("Nenhuma dívida no período.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def _render_trend(report: ReportData, currency_code: str) -> None:
    """Render the trailing six-month trend as a chart plus table."""
    st.subheader("Tendência (6 meses)")
    st.plotly_chart(build_trend_figure(report.monthly_trend), width="stretch")
    st.dataframe(
        build_trend_rows(report.monthly_trend, currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_report(
    report: ReportData,
    currency_code: str,
    key_prefix: str = "current",
) -> None:
    """Render every section of a report."""
    _render_summary(report, currency_code)
    chart_col, ledger_col = st.columns(2)
    with chart_col:
        _render_category_chart(
            report,
            "Transações por Categoria",
            currency_code,
        )
    with ledger_col:
        _render_ledger_types(report, currency_code)
    _render_trend(report, currency_code)
    movements, entries = build_detail_rows(report)
    with st.expander(f"Movimentações ({len(movements)})"):
        st.dataframe(
            movements,
            width="stretch",
            hide_index=True,
            key=f"{key_prefix}_movements",
        )
    with st.expander(f"Lançamentos ({len(entries)})"):
        st.dataframe(
            entries,
            width="stretch",
            hide_index=True,
            key=f"{key_prefix}_entries",
        )


def _render_export(
    use_cases: ReportUseCases,
    session: ReportSession,
    period: str,
) -> None:
    """Offer a download of the report currently on screen."""
    usage_logger = get_usage_logger()
    formats = use_cases.export_report.formats
    selected = st.selectbox(
        "Formato",
        formats,
        format_func=lambda value: REPORT_FORMAT_LABELS[value],
        key="export_format",
    )
    if not st.button("Preparar exportação", key="export_prepare"):
        return
    try:
        report = session.require(period)
        payload = use_cases.export_report.execute(report, selected, period)
    except ReportError as exc:
        st.error(f"Não foi possível exportar: {exc}")
        return
    usage_logger.info(f"Export prepared: {payload.filename}")
    st.download_button(
        "Baixar arquivo",
        data=payload.content,
        file_name=payload.filename,
        mime=payload.media_type,
        key="export_download",
    )


def _render_generate_form(
    use_cases: ReportUseCases,
    owner_id: int | None,
) -> None:
    """Render the form that saves a new report label."""
    usage_logger = get_usage_logger()
    with st.form("generate_report"):
        report_type = st.selectbox(
            "Tipo",
            list(ReportType),
            format_func=lambda value: REPORT_TYPE_LABELS[value],
        )
        report_period = st.selectbox(
            "Período",
            list(ReportPeriod),
            format_func=lambda value: REPORT_PERIOD_LABELS[value],
        )
        report_format = st.selectbox(
            "Formato",
            list(ReportFormat),
            format_func=lambda value: REPORT_FORMAT_LABELS[value],
        )
        submitted = st.form_submit_button("Gerar relatório")
    if not submitted:
        return
    request = ReportRequest(
        type=report_type,
        period=report_period,
        format=report_format,
    )
    try:
        record = use_cases.generate_report.execute(request, owner_id)
    except ReportError as exc:
        st.error(f"Não foi possível gerar o relatório: {exc}")
        return
    usage_logger.info(f"Report label generated: id={record.id}")
    st.success("Relatório gerado com sucesso.")


def _custom_range(record: ReportRecord):
    """Ask for the date range of a custom label."""
    if record.period is not ReportPeriod.CUSTOM:
        return None, None
    selected = st.date_input(
        "Intervalo",
        value=(),
        key=f"range_{record.id}",
    )
    if isinstance(selected, (list, tuple)) and len(selected) == 2:
        return selected[0], selected[1]
    return None, None


def _render_history(
    use_cases: ReportUseCases,
    owner_id: int | None,
    currency_code: str,
) -> None:
    """Render saved report labels with view and download actions."""
    usage_logger = get_usage_logger()
    st.subheader("Relatórios Gerados")
    try:
        records = use_cases.list_reports.execute(owner_id)
    except ReportError as exc:
        st.error(f"Não foi possível carregar os relatórios: {exc}")
        return
    if not records:
        st.info("Nenhum relatório gerado ainda.")
        return
    st.caption(f"{len(records)} relatórios")
    for record in records:
        with st.expander(describe_record(record)):
            start_date, end_date = _custom_range(record)
            view_col, download_col = st.columns(2)
            view_clicked = view_col.button(
                "Visualizar",
                key=f"view_{record.id}",
            )
            download_clicked = download_col.button(
                "Preparar download",
                key=f"download_{record.id}",
            )
            try:
                if view_clicked:
                    usage_logger.info(f"Report viewed: id={record.id}")
                    report = use_cases.open_report.view(
                        record,
                        start_date,
                        end_date,
                    )
                    _render_report(
                        report,
                        currency_code,
                        key_prefix=f"record_{record.id}",
                    )
                if download_clicked:
                    usage_logger.info(f"Report downloaded: id={record.id}")
                    payload = use_cases.open_report.download(
                        record,
                        start_date,
                        end_date,
                    )
                    download_col.download_button(
                        "Baixar",
                        data=payload.content,
                        file_name=payload.filename,
                        mime=payload.media_type,
                        key=f"file_{record.id}",
                    )
            except ReportError as exc:
                st.error(f"Não foi possível abrir o relatório: {exc}")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Relatórios Financeiros", layout="wide")
    st.title("Relatórios Financeiros")

    settings = _get_settings()
    use_cases = _get_use_cases()
    session = _get_session()
    usage_logger = get_usage_logger()

    page = st.sidebar.selectbox("Página", ["Visão Geral", "Histórico"])
    usage_logger.info(f"Page opened: {page}")

    if page == "Visão Geral":
        period = st.sidebar.selectbox(
            "Período",
            list(PERIOD_OPTIONS),
            format_func=lambda value: PERIOD_OPTIONS[value],
        )
        report = _load_report(use_cases, session, period)
        if report is None:
            st.error(
                f"Não foi possível carregar os dados: {session.error}"
            )
            return
        _render_report(report, settings.currency_code)
        st.divider()
        _render_export(use_cases, session, period)
    else:
        try:
            owner_id = use_cases.resolve_owner.execute(
                settings.owner_auth_id
            )
        except ReportError as exc:
            st.error(f"Não foi possível identificar o usuário: {exc}")
            return
        if owner_id is None:
            st.warning(
                "Usuário não identificado. Defina REPORTS_OWNER_AUTH_ID."
            )
        _render_generate_form(use_cases, owner_id)
        _render_history(use_cases, owner_id, settings.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
