"""Output formatters for different formats."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.table import Table

from taskfeed_cli.models import Task
from taskfeed_cli.services.view_model import is_blocked, sort_by_deadline
from taskfeed_cli.utils.ui.console import get_console
from taskfeed_cli.utils.ui.task_views import build_task_list

console = get_console()


def task_records(tasks: Sequence[Task], *, blocked_only: bool = False) -> list[dict[str, Any]]:
    """Deadline-sorted JSON-ready dicts, each with a derived ``blocked`` flag."""
    records = []
    for task in sort_by_deadline(tasks):
        blocked = is_blocked(task, tasks)
        if blocked_only and not blocked:
            continue
        record = task.model_dump(mode="json")
        record["blocked"] = blocked
        records.append(record)
    return records


def format_tasks(
    tasks: Sequence[Task],
    output_format: str = "pretty",
    *,
    blocked_only: bool = False,
) -> None:
    """Display tasks in the requested output format."""
    if output_format == "json":
        print(json.dumps(task_records(tasks, blocked_only=blocked_only), indent=2))
    elif output_format == "yaml":
        print(
            yaml.safe_dump(
                task_records(tasks, blocked_only=blocked_only),
                default_flow_style=False,
                sort_keys=False,
            )
        )
    elif output_format == "table":
        format_dict_table(task_records(tasks, blocked_only=blocked_only))
    else:
        console.print(build_task_list(tasks, blocked_only=blocked_only))


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a plain table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        row = []
        for col in columns:
            value = item.get(col, "")
            if isinstance(value, bool):
                value = "✓" if value else "✗"
            elif isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            elif value is None:
                value = "-"
            else:
                value = str(value)
            row.append(value)
        table.add_row(*row)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
