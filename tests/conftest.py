"""Shared test fixtures and configuration.

Keeps every test away from the real platform config, data and log
directories.
"""

from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import patch

import pytest

from chatbot_cli.adapters.file_store import FileStore
from chatbot_cli.models.task import Deadline, Event, Todo
from chatbot_cli.models.task_list import TaskList
from chatbot_cli.services.session import SessionContext

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import chatbot_cli.utils.logger as logger_mod
    from chatbot_cli.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("chatbot_cli").handlers.clear()

    with patch(
        "chatbot_cli.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ), patch(
        "chatbot_cli.services.config_service.user_data_dir",
        return_value=str(data_dir),
    ), patch(
        "chatbot_cli.models.config_models.user_data_dir",
        return_value=str(data_dir),
    ), patch(
        "chatbot_cli.utils.logger.user_log_dir",
        return_value=str(log_dir),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    for handler in logging.getLogger("chatbot_cli").handlers:
        handler.close()
    logging.getLogger("chatbot_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fixed_now() -> datetime:
    """Reference instant used by free-time tests."""
    return datetime(2025, 12, 1, 9, 0)


@pytest.fixture()
def sample_tasks() -> list:
    """One task of each kind, the deadline already done."""
    deadline = Deadline(description="report", by=datetime(2025, 12, 2, 18, 0))
    deadline.mark_done()
    return [
        Todo(description="read book"),
        deadline,
        Event(
            description="project meeting",
            start=datetime(2025, 12, 2, 16, 0),
            end=datetime(2025, 12, 2, 18, 0),
        ),
    ]


@pytest.fixture()
def task_list(sample_tasks) -> TaskList:
    return TaskList(sample_tasks)


@pytest.fixture()
def store(tmp_path) -> FileStore:
    return FileStore(tmp_path / "data" / "tasks.txt")


@pytest.fixture()
def session(store, fixed_now) -> SessionContext:
    """An empty session persisted to a temporary file, with a frozen clock."""
    return SessionContext(TaskList(), store, lambda: fixed_now)
