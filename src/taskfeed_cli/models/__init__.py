"""TaskFeed CLI domain models.

Pydantic models for the normalized task record, timeline geometry and the
application configuration.
"""

from .config_models import AppConfig, FeedConfig, OutputConfig
from .exceptions import FetchError, SourceFormatError, TaskBlockedError, TaskFeedError
from .task import Task, TaskBar, TimelineRange

__all__ = [
    # Task models
    "Task",
    "TaskBar",
    "TimelineRange",
    # Config models
    "AppConfig",
    "FeedConfig",
    "OutputConfig",
    # Errors
    "TaskFeedError",
    "SourceFormatError",
    "FetchError",
    "TaskBlockedError",
]
