"""In-memory task store shared by every view of one session.

The store owns the loaded task list. It is replaced wholesale on each
load; the completion toggle is the only mutation between loads and is
never written back to the feed.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskfeed_cli.models import Task


class TaskStore:
    """State container for the currently loaded tasks.

    Loads are sequenced: ``begin_load`` hands out increasing tokens and
    ``replace_all`` ignores a result whose token is older than the newest
    load started, so a slow earlier fetch cannot overwrite a later one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])
        self._issued = 0

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the current tasks in feed order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Return the task with *task_id*, or None."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def begin_load(self) -> int:
        """Issue a token for a load that is about to start."""
        self._issued += 1
        return self._issued

    def replace_all(self, tasks: Iterable[Task], *, token: int | None = None) -> bool:
        """Atomically replace the task list.

        Args:
            tasks: The freshly loaded tasks
            token: Token from ``begin_load``; None applies unconditionally

        Returns:
            False if the result was dropped as superseded, True otherwise
        """
        if token is not None and token < self._issued:
            return False
        self._tasks = list(tasks)
        return True

    def toggle_completed(self, task_id: str) -> Task:
        """Flip the completed flag of one task and return the updated task.

        Raises:
            KeyError: If no task has *task_id*
        """
        for position, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = task.model_copy(update={"completed": not task.completed})
                self._tasks[position] = updated
                return updated
        raise KeyError(task_id)
