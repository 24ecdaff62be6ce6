"""Tests for the application and usage loggers."""

import logging
from unittest.mock import MagicMock

from networth_forecast.infrastructure.logging import logger as logger_module


def _isolate(monkeypatch, tmp_path, *names):
    """Point log files at tmp_path and start from handler-free loggers."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240615"),
    )
    for name in names:
        monkeypatch.setattr(logging.getLogger(name), "handlers", [])
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)


def _close_handlers(*loggers):
    for wrapper in loggers:
        for handler in wrapper.logger.handlers:
            handler.close()


def _file_paths(built: logging.Logger) -> list[str]:
    return [
        handler.baseFilename
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]


def test_app_and_usage_loggers_write_to_separate_dated_files(
    tmp_path,
    monkeypatch,
):
    """Forecast events and usage inputs land in their own log files."""
    _isolate(
        monkeypatch,
        tmp_path,
        "networth_forecast",
        "networth_forecast.usage",
    )

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()
    try:
        assert logger_module.get_app_logger() is app_logger
        assert logger_module.get_usage_logger() is usage_logger
        assert app_logger.logger.name == "networth_forecast"
        assert usage_logger.logger.name == "networth_forecast.usage"
        assert _file_paths(app_logger.logger) == [
            str(tmp_path / "logs" / "app" / "20240615_app_logs.log")
        ]
        assert _file_paths(usage_logger.logger) == [
            str(tmp_path / "logs" / "usage" / "20240615_usage_logs.log")
        ]
        assert app_logger.logger.propagate is False
    finally:
        _close_handlers(app_logger, usage_logger)


def test_builder_without_console_only_writes_to_file(tmp_path, monkeypatch):
    """Disabling the console keeps a single file handler."""
    _isolate(monkeypatch, tmp_path, "networth_forecast.cli")

    built = (
        logger_module.LoggerBuilder()
        .name("networth_forecast.cli")
        .subdir("cli")
        .prefix("forecast_cli")
        .console(False)
        .level(logging.WARNING)
        .build()
    )
    try:
        assert built.level == logging.WARNING
        assert len(built.handlers) == 1
        assert _file_paths(built) == [
            str(tmp_path / "logs" / "cli" / "20240615_forecast_cli.log")
        ]
        assert (tmp_path / "logs" / "cli").is_dir()
        # A second build reuses the configured logger.
        assert logger_module.LoggerBuilder().name(
            "networth_forecast.cli"
        ).build() is built
        assert len(built.handlers) == 1
    finally:
        for handler in built.handlers:
            handler.close()


def test_exception_records_active_traceback(tmp_path, monkeypatch):
    """exception() keeps the traceback raised by a failing forecast."""
    _isolate(monkeypatch, tmp_path, "networth_forecast")
    records: list[logging.LogRecord] = []
    capture = logging.Handler()
    capture.emit = records.append

    app_logger = logger_module.get_app_logger()
    app_logger.logger.addHandler(capture)
    try:
        try:
            raise ValueError("no history")
        except ValueError:
            app_logger.exception("Forecast failed, using defaults")
    finally:
        app_logger.logger.removeHandler(capture)
        _close_handlers(app_logger)

    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].getMessage() == "Forecast failed, using defaults"
    assert records[0].exc_info[0] is ValueError


def test_wrapper_delegates_each_level(monkeypatch):
    """Level methods forward to the built logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("Forecast page: family=fam")
    usage_logger.warning("unknown timeline")
    usage_logger.debug("dbg")

    fake_logger.info.assert_called_once_with("Forecast page: family=fam")
    fake_logger.warning.assert_called_once_with("unknown timeline")
    fake_logger.debug.assert_called_once_with("dbg")
