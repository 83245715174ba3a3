"""Rich renderables for the task list, timeline chart and sign-up sheet."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from rich import box
from rich.cells import set_cell_size
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskfeed_cli.data.sample_tasks import (
    BLOCKED_COLOR,
    SUB_TEAM_COLORS,
    sub_team_color,
)
from taskfeed_cli.models import Task, TimelineRange
from taskfeed_cli.services.view_model import (
    blocking_tasks,
    sort_by_deadline,
    task_bars,
    timeline_range,
)

SIGNATURE_LINE = "_" * 40
DAY_WIDTH = 3
CHECK_MARK = "✓"
LOCK_MARK = "🔒"


def format_long_date(value: date | None) -> str:
    """Format as 'Jan 5, 2025', or 'TBD' for a missing date."""
    if value is None:
        return "TBD"
    return f"{value:%b} {value.day}, {value.year}"


def format_short_date(value: date | None) -> str:
    """Format as 'Jan 5', or 'TBD' for a missing date."""
    if value is None:
        return "TBD"
    return f"{value:%b} {value.day}"


def sub_team_badge(sub_team: str) -> Text:
    """Dark text on the sub-team's pastel color."""
    return Text(f" {sub_team} ", style=f"#1f2937 on {sub_team_color(sub_team)}")


# ============================================================================
# Task list
# ============================================================================


def build_task_list(tasks: Sequence[Task], *, blocked_only: bool = False) -> RenderableType:
    """Deadline-sorted table of every task with its status and owner."""
    ordered = sort_by_deadline(tasks)
    if blocked_only:
        ordered = [t for t in ordered if blocking_tasks(t, tasks)]

    header = Text()
    header.append("📋 Task List ", style="bold cyan")
    header.append(f"({len(ordered)} tasks, sorted by soonest deadline)", style="dim")

    if not ordered:
        return Group(header, Text("No tasks found.", style="yellow"))

    table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAD)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Task")
    table.add_column("Sub-Team", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Deadline", no_wrap=True)
    table.add_column("Responsible")
    table.add_column("Pre-reqs")

    for task in ordered:
        title = Text(task.name, style="bold")
        if task.overview:
            title.append(f"\n{task.overview}", style="dim")

        blockers = blocking_tasks(task, tasks)
        if task.completed:
            status = Text("Completed", style="green")
        elif blockers:
            status = Text(f"{LOCK_MARK} Blocked", style="red")
        else:
            status = Text("Pending", style="yellow")

        deadline = Text(
            format_long_date(task.deadline),
            style="red" if task.deadline is None else "",
        )
        table.add_row(
            task.id,
            title,
            sub_team_badge(task.sub_team),
            status,
            deadline,
            task.person_responsible,
            ", ".join(task.pre_requisites) or "-",
        )

    return Group(header, table)


# ============================================================================
# Timeline chart
# ============================================================================


def _day_header(day: date, first: bool) -> str:
    month = f"{day:%b}" if first or day.day == 1 else ""
    return f"{month}\n{day.day:02d}"


def _bar_cell(label: str) -> str:
    # pad by terminal cells; the lock emoji is two cells wide
    return set_cell_size(f" {label}", DAY_WIDTH)


def build_gantt_chart(
    tasks: Sequence[Task],
    *,
    today: date | None = None,
) -> RenderableType:
    """Timeline with one column per day and one bar per dated task."""
    if not tasks:
        return Text("No tasks found.", style="yellow")

    timeline: TimelineRange = timeline_range(tasks, today=today)
    bars = task_bars(tasks, timeline)

    title = Text()
    title.append("📊 Project Timeline ", style="bold cyan")
    title.append(
        f"({format_long_date(timeline.start)} - {format_long_date(timeline.end)}, "
        f"{timeline.total_days} days)",
        style="dim",
    )

    if not bars:
        return Group(
            title,
            Text("No tasks have both a start date and a deadline.", style="yellow"),
        )

    table = Table(box=box.SIMPLE_HEAD, padding=(0, 0), show_lines=False)
    table.add_column("Task", min_width=16, max_width=28, no_wrap=True, overflow="ellipsis")
    for index, day in enumerate(timeline.days()):
        table.add_column(
            _day_header(day, index == 0), width=DAY_WIDTH, no_wrap=True, overflow="crop"
        )

    for task, bar in bars:
        color = BLOCKED_COLOR if bar.blocked else sub_team_color(task.sub_team)
        marker = LOCK_MARK if bar.blocked else CHECK_MARK if task.completed else ""
        cells: list[Text] = []
        first_cell = True
        for day_index in range(timeline.total_days):
            if bar.covers(day_index):
                label = marker if first_cell else ""
                cells.append(Text(_bar_cell(label), style=f"#111827 on {color}"))
                first_cell = False
            else:
                cells.append(Text(""))
        name = Text(task.name, style="dim strike" if task.completed else "")
        table.add_row(name, *cells)

    return Group(title, table, build_legend())


def build_legend() -> Text:
    """Color key for the sub-teams and the blocked state."""
    legend = Text()
    for team, color in SUB_TEAM_COLORS.items():
        legend.append("   ", style=f"on {color}")
        legend.append(f" {team}  ")
    legend.append("   ", style=f"on {BLOCKED_COLOR}")
    legend.append(" Blocked")
    return legend


# ============================================================================
# Sign-up sheet
# ============================================================================


def select_tasks(tasks: Sequence[Task], task_ids: Sequence[str] | None) -> list[Task]:
    """Restrict *tasks* to *task_ids* (all tasks when empty), deadline-sorted."""
    chosen = list(tasks)
    if task_ids:
        wanted = set(task_ids)
        chosen = [t for t in chosen if t.id in wanted]
    return sort_by_deadline(chosen)


def build_signup_sheet(tasks: Sequence[Task]) -> RenderableType:
    """Printable sheet with blank signature slots for each task."""
    heading = Panel(
        Text.assemble(
            ("MASTER TASK SIGN-UP SHEET\n", "bold"),
            "Please sign your name in an available slot for the tasks you wish to claim.",
        ),
        box=box.DOUBLE,
        padding=(0, 2),
    )
    if not tasks:
        return Group(heading, Text("No tasks found.", style="yellow"))

    sections: list[RenderableType] = [heading]
    for task in tasks:
        body = Text()
        if task.overview:
            body.append(f"{task.overview}\n")
        body.append_text(sub_team_badge(task.sub_team))
        body.append(f"  Due: {format_short_date(task.deadline)}\n\n")
        body.append(f"{task.spots_needed} Spots Available\n", style="bold")
        for slot in range(1, task.spots_needed + 1):
            body.append(f"\n{slot}. {SIGNATURE_LINE}")
        sections.append(
            Panel(body, title=Text(task.name, style="bold"), title_align="left", box=box.SQUARE)
        )
    return Group(*sections)
