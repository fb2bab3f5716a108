"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log
directories and from any task file in the working directory.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from tasktrack_cli.adapters.tsv import TsvTaskStore
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_service import TaskService, get_task_service


def _reset_app_logger() -> None:
    import tasktrack_cli.utils.logger as logger_mod

    logger_mod._logger = None
    app_logger = logging.getLogger("tasktrack_cli")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.propagate = True


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config and log directories at *tmp_path* and reset singletons."""
    monkeypatch.delenv("TASKTRACK_FILE", raising=False)
    monkeypatch.chdir(tmp_path)
    get_config_service.cache_clear()
    get_task_service.cache_clear()
    _reset_app_logger()

    with (
        patch(
            "tasktrack_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "tasktrack_cli.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    get_task_service.cache_clear()
    _reset_app_logger()


# ---------------------------------------------------------------------------
# Store / service
# ---------------------------------------------------------------------------


@pytest.fixture()
def task_file(tmp_path):
    """Path of a task file that does not exist yet."""
    return tmp_path / "data" / "tasks.tsv"


@pytest.fixture()
def store(task_file) -> TsvTaskStore:
    """An empty, loaded store backed by *task_file*."""
    store = TsvTaskStore(task_file)
    store.load()
    return store


@pytest.fixture()
def service(store) -> TaskService:
    """A task service over the *store* fixture."""
    return TaskService(store)
