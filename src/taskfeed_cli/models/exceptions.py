"""Custom exceptions for TaskFeed."""


class TaskFeedError(Exception):
    """Base exception for all TaskFeed errors."""


class SourceFormatError(TaskFeedError):
    """Raised when the feed text cannot be parsed as a table."""


class FetchError(TaskFeedError):
    """Raised when the feed cannot be retrieved (network, URL or permission)."""


class TaskBlockedError(TaskFeedError):
    """Raised when toggling a task that still has incomplete prerequisites."""

    def __init__(self, task_id: str, blockers: list[str]):
        self.task_id = task_id
        self.blockers = blockers
        super().__init__(
            f"Task {task_id} is blocked by: {', '.join(blockers)}"
        )
