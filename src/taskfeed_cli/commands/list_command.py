"""Command 'list' - deadline-sorted task list."""

from typing import Annotated

import typer

from taskfeed_cli.services.config_service import get_config_service
from taskfeed_cli.services.task_service import get_task_service
from taskfeed_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskfeed_cli.utils.ui.formatters import format_tasks

from .decorators import AppError, command_wrapper
from .loading import load_tasks

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


@command_wrapper
async def list_command(
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output format (pretty, table, json, yaml)"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    blocked: Annotated[
        bool, typer.Option("--blocked", help="Only show tasks with open prerequisites")
    ] = False,
    feed: Annotated[
        str | None, typer.Option("--feed", help="Use this feed URL instead of the saved one")
    ] = None,
) -> None:
    """List tasks sorted by soonest deadline."""
    if json_opt:
        output = "json"
    elif output is None:
        output = get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )

    service = get_task_service()
    await load_tasks(service, feed)
    format_tasks(service.store.tasks, output, blocked_only=blocked)
