"""Tests for the application logger."""

import logging
import logging.handlers

from tasktrack_cli.utils.logger import LOG_LEVEL_ENV, get_log_file, get_logger


def test_logger_is_singleton():
    assert get_logger() is get_logger()


def test_logger_writes_rotating_file(tmp_path):
    logger = get_logger()

    assert logger.name == "tasktrack_cli"
    assert logger.propagate is False
    handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(handlers) == 1

    logging.getLogger("tasktrack_cli.services.task_service").info("hello from a module")
    handlers[0].flush()

    log_file = tmp_path / "logs" / "tasktrack.log"
    content = log_file.read_text(encoding="utf-8")
    assert "hello from a module" in content
    assert "[tasktrack_cli.services.task_service]" in content


def test_default_level_is_info():
    assert get_logger().level == logging.INFO


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_logger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_logger().level == logging.INFO


def test_log_file_location(tmp_path):
    assert get_log_file() == tmp_path / "logs" / "tasktrack.log"
