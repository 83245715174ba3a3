"""Services module for TaskFeed CLI - feed loading and task derivations."""

from .config_service import ConfigService, get_config_service
from .feed_client import FeedClient
from .task_service import LoadResult, TaskService, get_task_service
from .task_store import TaskStore

__all__ = [
    "ConfigService",
    "get_config_service",
    "FeedClient",
    "LoadResult",
    "TaskService",
    "get_task_service",
    "TaskStore",
]
