"""Command 'gantt' - project timeline chart."""

from typing import Annotated

import typer

from taskfeed_cli.services.task_service import get_task_service
from taskfeed_cli.utils.ui.console import get_console
from taskfeed_cli.utils.ui.task_views import build_gantt_chart

from .decorators import command_wrapper
from .loading import load_tasks

console = get_console()


@command_wrapper
async def gantt_command(
    feed: Annotated[
        str | None, typer.Option("--feed", help="Use this feed URL instead of the saved one")
    ] = None,
) -> None:
    """Show the project timeline (Gantt chart).

    Tasks without a deadline are left off the chart.
    """
    service = get_task_service()
    await load_tasks(service, feed)
    console.print(build_gantt_chart(service.store.tasks))
