"""Task data models."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TASK_NAME = "Untitled Task"
DEFAULT_SUB_TEAM = "General"
DEFAULT_PERSON = "Unassigned"
DEFAULT_TOTAL_DAYS = 1
DEFAULT_SPOTS_NEEDED = 3


class Task(BaseModel):
    """Normalized task record loaded from a feed.

    Attributes:
        id: Row position in the loaded batch (1-based, as a string)
        name: Human title
        overview: Free-text description
        sub_team: Display-only category label
        pre_requisites: Ids or names of tasks this task depends on
        required_for: Ids or names of tasks depending on this one
        start_date: First day of work
        deadline: Due date, None when still to be decided
        total_days: Estimated working days
        person_responsible: Owner of the task
        completed: Whether the task is done
        spots_needed: Number of sign-up slots on the printed sheet
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str = DEFAULT_TASK_NAME
    overview: str = ""
    sub_team: str = DEFAULT_SUB_TEAM
    pre_requisites: list[str] = Field(default_factory=list)
    required_for: list[str] = Field(default_factory=list)
    start_date: date = Field(default_factory=date.today)
    deadline: date | None = None
    total_days: int = DEFAULT_TOTAL_DAYS
    person_responsible: str = DEFAULT_PERSON
    completed: bool = False
    spots_needed: int = DEFAULT_SPOTS_NEEDED

    @property
    def is_placeholder(self) -> bool:
        """True for rows carrying neither a title nor an overview."""
        return self.name == DEFAULT_TASK_NAME and not self.overview


class TimelineRange(BaseModel):
    """Padded date window used to lay out the timeline chart."""

    start: date
    end: date
    total_days: int = Field(ge=1)

    def days(self) -> Iterator[date]:
        """Yield every calendar day in the window, start and end included."""
        for offset in range(self.total_days):
            yield self.start + timedelta(days=offset)


class TaskBar(BaseModel):
    """Geometry of one task bar on the timeline chart."""

    task_id: str
    offset_days: int
    duration_days: int
    blocked: bool = False

    def covers(self, day_index: int) -> bool:
        """Return whether the bar spans the given column of the chart."""
        return self.offset_days <= day_index < self.offset_days + self.duration_days
