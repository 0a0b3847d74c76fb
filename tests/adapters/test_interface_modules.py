"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in (
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ):
        assert import_module(name).__all__ == []


def test_report_view_exports_are_defined() -> None:
    """Every name listed in report_view.__all__ should exist."""
    module = import_module("src.adapters.interface.streamlit.report_view")

    missing = [name for name in module.__all__ if not hasattr(module, name)]

    assert missing == []
    assert "build_trend_figure" in module.__all__
