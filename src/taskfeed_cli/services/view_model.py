"""Task view model - pure derivations over a normalized task list.

Nothing here mutates its input; every function returns fresh values so
the list, chart and sign-up views can call them on each render.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from taskfeed_cli.models import Task, TaskBar, TimelineRange

# Padding keeps the first and last bars off the chart edges.
LEAD_PADDING_DAYS = 2
TRAIL_PADDING_DAYS = 5
DEFAULT_WINDOW_DAYS = 8


def sort_by_deadline(tasks: Sequence[Task]) -> list[Task]:
    """Return tasks ordered by deadline, soonest first.

    The sort is stable: equal deadlines keep feed order, and tasks without
    a deadline follow every dated task in their original order.
    """
    return sorted(
        tasks,
        key=lambda t: (t.deadline is None, t.deadline or date.min),
    )


def resolve_reference(reference: str, tasks: Sequence[Task]) -> Task | None:
    """Find the task a prerequisite entry points at.

    An id match takes precedence over an exact name match.
    """
    for candidate in tasks:
        if candidate.id == reference:
            return candidate
    for candidate in tasks:
        if candidate.name == reference:
            return candidate
    return None


def blocking_tasks(task: Task, all_tasks: Sequence[Task]) -> list[Task]:
    """Return the direct prerequisites of *task* that are not completed.

    Unresolvable and self references are ignored. Each blocker appears once.
    """
    blockers: list[Task] = []
    seen: set[str] = set()
    for reference in task.pre_requisites:
        prerequisite = resolve_reference(reference, all_tasks)
        if prerequisite is None or prerequisite.id == task.id:
            continue
        if prerequisite.completed or prerequisite.id in seen:
            continue
        seen.add(prerequisite.id)
        blockers.append(prerequisite)
    return blockers


def is_blocked(task: Task, all_tasks: Sequence[Task]) -> bool:
    """Return whether any direct prerequisite of *task* is still open.

    Only one hop is checked; a prerequisite that is itself blocked does
    not make *task* blocked.
    """
    return bool(blocking_tasks(task, all_tasks))


def timeline_range(tasks: Sequence[Task], *, today: date | None = None) -> TimelineRange:
    """Compute the padded date window for the timeline chart.

    Args:
        tasks: Tasks to lay out
        today: Anchor for the degenerate windows (defaults to today)

    Returns:
        A one-day window at *today* for an empty list, an eight-day window
        from *today* when no task has both dates, otherwise the earliest
        start minus two days through the latest deadline plus five days.
        A deadline earlier than every start, or a dated task starting
        after every deadline, widens the window so it is never empty.
    """
    today = today or date.today()
    if not tasks:
        return TimelineRange(start=today, end=today, total_days=1)

    if not any(t.start_date and t.deadline for t in tasks):
        end = today + timedelta(days=DEFAULT_WINDOW_DAYS - 1)
        return TimelineRange(start=today, end=end, total_days=DEFAULT_WINDOW_DAYS)

    deadlines = [t.deadline for t in tasks if t.deadline]
    earliest = min([t.start_date for t in tasks if t.start_date] + deadlines)
    latest = max([t.start_date for t in tasks if t.start_date and t.deadline] + deadlines)
    start = earliest - timedelta(days=LEAD_PADDING_DAYS)
    end = latest + timedelta(days=TRAIL_PADDING_DAYS)
    return TimelineRange(start=start, end=end, total_days=(end - start).days + 1)


def task_bar(
    task: Task,
    timeline: TimelineRange,
    all_tasks: Sequence[Task] = (),
) -> TaskBar | None:
    """Return the chart bar for *task*, or None when it has no deadline."""
    if task.start_date is None or task.deadline is None:
        return None
    return TaskBar(
        task_id=task.id,
        offset_days=(task.start_date - timeline.start).days,
        duration_days=(task.deadline - task.start_date).days + 1,
        blocked=is_blocked(task, all_tasks),
    )


def task_bars(
    tasks: Sequence[Task], timeline: TimelineRange
) -> list[tuple[Task, TaskBar]]:
    """Pair every drawable task with its bar, in input order."""
    bars: list[tuple[Task, TaskBar]] = []
    for task in tasks:
        bar = task_bar(task, timeline, tasks)
        if bar is not None:
            bars.append((task, bar))
    return bars
