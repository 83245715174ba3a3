"""Task service - loads the feed into the store and applies user actions.

This layer sits between the commands and the store: it turns a feed URL
into a task list, falls back to the sample tasks when the feed cannot be
used, and guards the completion toggle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from taskfeed_cli.data.sample_tasks import sample_tasks
from taskfeed_cli.models import FetchError, SourceFormatError, Task, TaskBlockedError
from taskfeed_cli.services.feed_client import FeedClient, get_feed_client
from taskfeed_cli.services.normalizer import normalize_feed
from taskfeed_cli.services.task_store import TaskStore
from taskfeed_cli.services.view_model import blocking_tasks
from taskfeed_cli.utils.logger import get_logger

LOAD_ERROR_MESSAGE = (
    "Failed to load tasks from the feed. Please check the URL and try again."
)


@dataclass
class LoadResult:
    """Outcome of one load."""

    tasks: list[Task]
    source: Literal["feed", "sample"]
    error: str | None = None
    detail: str | None = None
    applied: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None


class TaskService:
    """Service for loading tasks and toggling their completion.

    Args:
        store: Session state container the loaded tasks are written to
        feed_client: Client used to download the feed
        today: Date used for missing start dates (defaults to today)
    """

    def __init__(
        self,
        store: TaskStore,
        feed_client: FeedClient,
        *,
        today: date | None = None,
    ):
        self.store = store
        self.feed_client = feed_client
        self.today = today

    async def load(self, url: str | None) -> LoadResult:
        """Replace the store's tasks with the feed at *url*.

        Without a URL the sample tasks are used and no error is reported.
        A fetch or format failure is logged, the sample tasks are stored,
        and the result carries the user-facing error message. There is no
        automatic retry.
        """
        logger = get_logger("tasks")
        token = self.store.begin_load()

        if not url:
            logger.info("no feed configured, using sample tasks")
            result = LoadResult(tasks=sample_tasks(), source="sample")
        else:
            try:
                text = await self.feed_client.fetch_text(url)
                tasks = normalize_feed(text, today=self.today)
            except (FetchError, SourceFormatError) as e:
                logger.error("feed load failed: %s", e)
                result = LoadResult(
                    tasks=sample_tasks(),
                    source="sample",
                    error=LOAD_ERROR_MESSAGE,
                    detail=str(e),
                )
            else:
                logger.info("loaded %d tasks from feed", len(tasks))
                result = LoadResult(tasks=tasks, source="feed")

        result.applied = self.store.replace_all(result.tasks, token=token)
        if not result.applied:
            logger.info("discarded superseded load (token %d)", token)
        return result

    def toggle(self, task_id: str, *, force: bool = False) -> Task:
        """Flip a task's completed flag in memory.

        Raises:
            KeyError: If no loaded task has *task_id*
            TaskBlockedError: If the task has open prerequisites and
                *force* is not set
        """
        task = self.store.get(task_id)
        if task is None:
            raise KeyError(task_id)

        blockers = blocking_tasks(task, self.store.tasks)
        if blockers and not force:
            raise TaskBlockedError(task.id, [b.name for b in blockers])

        updated = self.store.toggle_completed(task_id)
        get_logger("tasks").info(
            "task %s marked %s", task_id, "completed" if updated.completed else "pending"
        )
        return updated


def get_task_service(store: TaskStore | None = None) -> TaskService:
    """Build a TaskService wired to the configured feed settings."""
    from taskfeed_cli.services.config_service import get_config_service

    feed_config = get_config_service().config.feed
    client = get_feed_client(feed_config.timeout, feed_config.cache_bust)
    return TaskService(store if store is not None else TaskStore(), client)
