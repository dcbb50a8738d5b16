"""Tests for logging setup and performance timing."""

import logging

import pytest

from jiraclient.logging import (
    PerformanceTimer,
    configure_logging,
    get_logger,
    get_performance_logger,
)


@pytest.fixture
def clean_loggers(tmp_path, monkeypatch):
    """Restore the package loggers after a test adds handlers."""
    monkeypatch.setattr("jiraclient.config.SETTINGS_FILE", tmp_path / "settings.toml")
    monkeypatch.delenv("JIRACLIENT_LOG_LEVEL", raising=False)
    loggers = [get_logger(), get_performance_logger()]
    saved = [list(logger.handlers) for logger in loggers]
    yield
    for logger, handlers in zip(loggers, saved):
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers


def test_get_logger_is_namespaced():
    assert get_logger("dispatcher").name == "jiraclient.dispatcher"
    assert any(isinstance(h, logging.NullHandler) for h in get_logger().handlers)


def test_performance_timer_logs_metrics(caplog):
    perf_logger = get_performance_logger()
    perf_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger=perf_logger.name):
            with PerformanceTimer("dispatch", method="GET") as timer:
                timer.add_metric("status", 200)
    finally:
        perf_logger.removeHandler(caplog.handler)

    message = caplog.records[-1].getMessage()
    assert message.startswith("op=dispatch | duration_ms=")
    assert "method=GET" in message
    assert "status=200" in message


def test_performance_timer_records_error(caplog):
    perf_logger = get_performance_logger()
    perf_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger=perf_logger.name):
            with pytest.raises(RuntimeError):
                with PerformanceTimer("dispatch"):
                    raise RuntimeError("boom")
    finally:
        perf_logger.removeHandler(caplog.handler)

    assert "error=RuntimeError" in caplog.records[-1].getMessage()


def test_configure_logging_writes_files(tmp_path, clean_loggers):
    log_dir = tmp_path / "logs"

    configure_logging(verbose=True, log_dir=log_dir)
    get_logger("test").info("hello")
    with PerformanceTimer("dispatch", status=204):
        pass
    for handler in get_logger().handlers + get_performance_logger().handlers:
        handler.flush()

    assert "hello" in (log_dir / "jiraclient.log").read_text()
    assert "op=dispatch" in (log_dir / "performance.log").read_text()


def test_later_call_adds_file_handlers(tmp_path, clean_loggers):
    log_dir = tmp_path / "logs"

    configure_logging()
    configure_logging(log_dir=log_dir)
    get_logger("test").warning("after console-only setup")
    for handler in get_logger().handlers:
        handler.flush()

    assert "after console-only setup" in (log_dir / "jiraclient.log").read_text()


def test_log_level_from_environment(tmp_path, clean_loggers, monkeypatch):
    monkeypatch.setenv("JIRACLIENT_LOG_LEVEL", "error")
    log_dir = tmp_path / "logs"

    configure_logging(log_dir=log_dir)
    get_logger("test").warning("filtered out")
    get_logger("test").error("kept")
    for handler in get_logger().handlers:
        handler.flush()

    contents = (log_dir / "jiraclient.log").read_text()
    assert "kept" in contents
    assert "filtered out" not in contents
