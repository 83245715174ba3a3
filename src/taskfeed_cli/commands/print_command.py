"""Command 'print' - printable task sign-up sheet."""

from pathlib import Path
from typing import Annotated

import typer

from taskfeed_cli.services.task_service import get_task_service
from taskfeed_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskfeed_cli.utils.ui.console import get_console, get_recording_console
from taskfeed_cli.utils.ui.formatters import format_success, format_warning
from taskfeed_cli.utils.ui.task_views import build_signup_sheet, select_tasks

from .decorators import AppError, command_wrapper
from .loading import load_tasks

console = get_console()

EXPORT_SUFFIXES = (".html", ".svg", ".txt")


def export_sheet(sheet, path: Path) -> None:
    """Write a rendered sheet to *path*; the suffix picks the format."""
    recorder = get_recording_console()
    recorder.print(sheet)
    suffix = path.suffix.lower()
    if suffix == ".html":
        recorder.save_html(str(path))
    elif suffix == ".svg":
        recorder.save_svg(str(path), title="Task Sign-up Sheet")
    else:
        recorder.save_text(str(path))


@command_wrapper
async def print_command(
    task_ids: Annotated[
        list[str] | None,
        typer.Option("--task", "-t", help="Task ID to include (repeatable, default all)"),
    ] = None,
    save: Annotated[
        Path | None,
        typer.Option("--save", help="Write the sheet to a .html, .svg or .txt file"),
    ] = None,
    feed: Annotated[
        str | None, typer.Option("--feed", help="Use this feed URL instead of the saved one")
    ] = None,
) -> None:
    """Render the task sign-up sheet."""
    if save is not None and save.suffix.lower() not in EXPORT_SUFFIXES:
        raise AppError(
            f"Cannot save as '{save.suffix or save.name}'. Use one of: {', '.join(EXPORT_SUFFIXES)}",
            exit_code=ERROR_INVALID_ARGS,
        )

    service = get_task_service()
    await load_tasks(service, feed)

    tasks = service.store.tasks
    selected = select_tasks(tasks, task_ids)
    missing = sorted(set(task_ids or []) - {t.id for t in tasks})
    if missing:
        format_warning(f"Unknown task IDs skipped: {', '.join(missing)}")

    sheet = build_signup_sheet(selected)
    if save is None:
        console.print(sheet)
        return

    export_sheet(sheet, save)
    format_success(f"Sign-up sheet for {len(selected)} tasks saved to {save}")
