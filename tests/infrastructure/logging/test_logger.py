"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_into_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place files under logs/<subdir>/."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250120"),
    )

    builder = logger_module.LoggerBuilder()
    exports_logger = (
        builder.name("reports.test.exports")
        .subdir("exports")
        .prefix("export_logs")
        .console(True)
        .level(logging.WARNING)
        .build()
    )

    assert exports_logger.name == "reports.test.exports"
    assert exports_logger.level == logging.WARNING
    assert exports_logger.propagate is False
    file_handlers = [
        h
        for h in exports_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "exports" / "20250120_export_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert len(exports_logger.handlers) == 2
    # A second build must not stack handlers.
    assert builder.build() is exports_logger
    assert len(exports_logger.handlers) == 2

    for handler in list(exports_logger.handlers):
        handler.close()
        exports_logger.removeHandler(handler)


def test_builder_without_console_has_only_file_handler(tmp_path, monkeypatch):
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )

    built = (
        logger_module.LoggerBuilder()
        .name("reports.test.quiet")
        .subdir("usage")
        .console(False)
        .build()
    )

    assert [type(h) for h in built.handlers] == [logging.FileHandler]
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "reports.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("reports")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")
    logger.exception("boom")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    fake_logger.exception.assert_called_with("boom")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should not share instances."""
    built: list[MagicMock] = []

    def _fake_build(self):
        fake = MagicMock()
        fake.subdir = self._subdir
        built.append(fake)
        return fake

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert app_logger.logger.subdir == "app"
    assert usage_logger.logger.subdir == "usage"
    assert len(built) == 2
