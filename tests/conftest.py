"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/network state.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from taskfeed_cli.models import Task


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path):
    """Send the application log file into *tmp_path* for every test."""
    import taskfeed_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("taskfeed_cli").handlers.clear()
    with patch("taskfeed_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"
    logger_mod._logger = None
    app_logger = logging.getLogger("taskfeed_cli")
    for handler in app_logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
    app_logger.handlers.clear()


@pytest.fixture(autouse=True)
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Platform dirs are patched for the whole test and the lru_cache is
    cleared, so every get_config_service() call returns this instance.
    """
    from taskfeed_cli.services.config_service import get_config_service

    get_config_service.cache_clear()
    with patch(
        "taskfeed_cli.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        yield get_config_service()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


def make_task(id_: str, name: str | None = None, **fields) -> Task:
    """Build a Task with a fixed start date unless one is given."""
    fields.setdefault("start_date", date(2025, 1, 10))
    return Task(id=id_, name=name or f"Task {id_}", **fields)


@pytest.fixture()
def dependency_tasks() -> list[Task]:
    """A depends on B (open); C depends on A by name; D has no prerequisites."""
    return [
        make_task("1", "A", pre_requisites=["2"], deadline=date(2025, 1, 15)),
        make_task("2", "B", deadline=date(2025, 1, 12)),
        make_task("3", "C", pre_requisites=["A"]),
        make_task("4", "D", completed=True, deadline=date(2025, 1, 20)),
    ]


def make_feed_client(text: str | None = None, error: Exception | None = None) -> MagicMock:
    """Return a mock FeedClient whose fetch_text returns *text* or raises *error*."""
    client = MagicMock()
    if error is not None:
        client.fetch_text = AsyncMock(side_effect=error)
    else:
        client.fetch_text = AsyncMock(return_value=text or "")
    return client


def make_service(text: str | None = None, error: Exception | None = None, tasks=None):
    """Return a real TaskService over a mock feed client."""
    from taskfeed_cli.services.task_service import TaskService
    from taskfeed_cli.services.task_store import TaskStore

    return TaskService(
        TaskStore(tasks), make_feed_client(text, error), today=date(2025, 1, 1)
    )


FEED_CSV = (
    "Task,Overview,Sub-Team,Pre-Requisites,Start Date,Deadline,Person Responsible,Completed\n"
    "Design Bracket,Sketch the mount,Design,,2025-01-06,2025-01-10,Ana,yes\n"
    "Cut Bracket,,Fabrication,Design Bracket,2025-01-11,2025-01-14,Ben,no\n"
    "Mount Sensor,,Electrical,Cut Bracket,2025-01-15,2025-01-16,,no\n"
)
