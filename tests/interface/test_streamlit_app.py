"""Tests for the Streamlit app module."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.ports.report_exporter import ExportPayload
from src.application.use_cases.report_session import ReportSession
from src.domain.errors import FetchFailedError, PersistFailedError
from src.domain.models import (
    ReportData,
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportType,
)
from src.infrastructure.settings import ReportSettings


class _FakeStreamlit:
    """Minimal stand-in recording the calls made by the page."""

    def __init__(self, selections=None, clicked=None) -> None:
        self.selections = selections or {}
        self.clicked = clicked or set()
        self.session_state: dict = {}
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.successes: list[str] = []
        self.downloads: list[dict] = []
        self.titles: list[str] = []
        self.sidebar = SimpleNamespace(selectbox=self.selectbox)
        self.submit = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.titles.append(text)

    def selectbox(self, label, options, format_func=None, key=None):
        return self.selections.get(label, list(options)[0])

    def button(self, label, key=None):
        return key in self.clicked

    def download_button(self, label, data, file_name, mime, key=None):
        self.downloads.append(
            {"data": data, "file_name": file_name, "mime": mime}
        )

    def columns(self, spec):
        return [self] * (spec if isinstance(spec, int) else len(spec))

    def expander(self, label):
        return self

    def form(self, key):
        return self

    def form_submit_button(self, label):
        return self.submit

    def date_input(self, label, value=None, key=None):
        return value

    def error(self, text: str):
        self.errors.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def info(self, text: str):
        pass

    def caption(self, text: str):
        pass

    def subheader(self, text: str):
        pass

    def divider(self):
        pass


def _report() -> ReportData:
    return ReportData(
        total_income=Decimal("1"),
        total_cash_expense=Decimal("0"),
        total_ledger_debt=Decimal("0"),
        net_balance=Decimal("1"),
        by_category={},
        by_ledger_type={},
        monthly_trend=(),
    )


def _record(record_id: int = 1) -> ReportRecord:
    return ReportRecord(
        id=record_id,
        type=ReportType.FINANCIAL,
        period=ReportPeriod.CURRENT_MONTH,
        format=ReportFormat.CSV,
        owner_id=3,
    )


def _install(monkeypatch, fake_st, use_cases, settings=None) -> None:
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(app, "_get_use_cases", lambda: use_cases)
    monkeypatch.setattr(
        app,
        "_get_settings",
        lambda: settings or ReportSettings(owner_auth_id="auth-3"),
    )


def test_load_report_publishes_into_session() -> None:
    use_cases = MagicMock()
    report = _report()
    use_cases.build_report_data.execute.return_value = report
    session = ReportSession(logger=MagicMock())

    result = app._load_report(use_cases, session, "current_month")

    assert result is report
    assert session.require("current_month") is report


def test_load_report_records_failure() -> None:
    """Fetch failures should be kept on the session, not raised."""
    use_cases = MagicMock()
    use_cases.build_report_data.execute.side_effect = FetchFailedError("x")
    session = ReportSession(logger=MagicMock())

    assert app._load_report(use_cases, session, "all") is None
    assert isinstance(session.error, FetchFailedError)


def test_main_overview_renders_selected_period(monkeypatch) -> None:
    fake_st = _FakeStreamlit(selections={"Período": "current_year"})
    use_cases = MagicMock()
    use_cases.build_report_data.execute.return_value = _report()
    _install(monkeypatch, fake_st, use_cases)
    rendered = []
    monkeypatch.setattr(
        app,
        "_render_report",
        lambda report, currency, key_prefix="current": rendered.append(
            (report, currency)
        ),
    )
    monkeypatch.setattr(app, "_render_export", lambda *args: None)

    app.main()

    use_cases.build_report_data.execute.assert_called_once_with(
        "current_year"
    )
    assert rendered[0][1] == "BRL"
    assert isinstance(fake_st.session_state[app.SESSION_KEY], ReportSession)
    assert fake_st.errors == []


def test_main_overview_reports_fetch_errors(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    use_cases = MagicMock()
    use_cases.build_report_data.execute.side_effect = FetchFailedError(
        "down"
    )
    _install(monkeypatch, fake_st, use_cases)

    app.main()

    assert len(fake_st.errors) == 1
    assert "down" in fake_st.errors[0]


def test_render_export_requires_matching_data(monkeypatch) -> None:
    """Exporting before aggregation should show an error, not a file."""
    fake_st = _FakeStreamlit(clicked={"export_prepare"})
    use_cases = MagicMock()
    use_cases.export_report.formats = [ReportFormat.CSV]
    _install(monkeypatch, fake_st, use_cases)
    session = ReportSession(logger=MagicMock())

    app._render_export(use_cases, session, "current_month")

    assert fake_st.downloads == []
    assert len(fake_st.errors) == 1
    use_cases.export_report.execute.assert_not_called()


def test_render_export_offers_download(monkeypatch) -> None:
    fake_st = _FakeStreamlit(clicked={"export_prepare"})
    use_cases = MagicMock()
    use_cases.export_report.formats = [ReportFormat.CSV]
    use_cases.export_report.execute.return_value = ExportPayload(
        filename="relatorio-current_month-1.csv",
        content=b"x",
        media_type="text/csv",
    )
    _install(monkeypatch, fake_st, use_cases)
    session = ReportSession(logger=MagicMock())
    report = _report()
    session.complete(session.begin("current_month"), report)

    app._render_export(use_cases, session, "current_month")

    use_cases.export_report.execute.assert_called_once_with(
        report,
        ReportFormat.CSV,
        "current_month",
    )
    assert fake_st.downloads[0]["file_name"] == (
        "relatorio-current_month-1.csv"
    )


def test_history_download_recomputes_record(monkeypatch) -> None:
    """Clicking download should route the label through OpenReport."""
    fake_st = _FakeStreamlit(clicked={"download_7"})
    use_cases = MagicMock()
    use_cases.list_reports.execute.return_value = [_record(7)]
    use_cases.open_report.download.return_value = ExportPayload(
        filename="relatorio-current_month-2.csv",
        content=b"y",
        media_type="text/csv",
    )
    _install(monkeypatch, fake_st, use_cases)

    app._render_history(use_cases, 3, "BRL")

    use_cases.open_report.download.assert_called_once_with(
        _record(7),
        None,
        None,
    )
    use_cases.open_report.view.assert_not_called()
    assert fake_st.downloads[0]["data"] == b"y"


def test_generate_form_reports_persist_failure(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    fake_st.submit = True
    use_cases = MagicMock()
    use_cases.generate_report.execute.side_effect = PersistFailedError("no")
    _install(monkeypatch, fake_st, use_cases)

    app._render_generate_form(use_cases, None)

    assert len(fake_st.errors) == 1
    assert fake_st.successes == []


def test_main_history_warns_without_owner(monkeypatch) -> None:
    fake_st = _FakeStreamlit(selections={"Página": "Histórico"})
    use_cases = MagicMock()
    use_cases.resolve_owner.execute.return_value = None
    use_cases.list_reports.execute.return_value = []
    _install(monkeypatch, fake_st, use_cases, ReportSettings())

    app.main()

    use_cases.resolve_owner.execute.assert_called_once_with(None)
    use_cases.list_reports.execute.assert_called_once_with(None)
    assert len(fake_st.warnings) == 1
