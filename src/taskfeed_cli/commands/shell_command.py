"""Command 'shell' - interactive dashboard session.

The task list is loaded once and kept in memory, so completion toggles
made here last until the next refresh or feed change.
"""

from __future__ import annotations

import shlex
from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from taskfeed_cli.models import FetchError, TaskBlockedError
from taskfeed_cli.services.config_service import get_config_service
from taskfeed_cli.services.feed_client import FeedClient
from taskfeed_cli.services.task_service import TaskService, get_task_service
from taskfeed_cli.utils.ui.console import get_console
from taskfeed_cli.utils.ui.formatters import (
    format_error,
    format_success,
    format_warning,
)
from taskfeed_cli.utils.ui.task_views import (
    build_gantt_chart,
    build_signup_sheet,
    build_task_list,
    select_tasks,
)

from .decorators import command_wrapper
from .loading import load_tasks, resolve_feed_url

console = get_console()

SHELL_COMMANDS = {
    "list [--blocked]": "Show tasks sorted by deadline",
    "gantt": "Show the project timeline",
    "print [ID ...]": "Show the sign-up sheet (all tasks or the given IDs)",
    "toggle ID [--force]": "Mark a task completed / pending",
    "refresh": "Reload the feed (discards toggles)",
    "url [URL]": "Show or change the saved feed URL and reload",
    "help": "Show this help",
    "quit": "Leave the shell",
}


class DashboardShell:
    """Line-oriented dashboard bound to one TaskService."""

    def __init__(self, service: TaskService, feed_url: str, out: Console | None = None):
        self.service = service
        self.feed_url = feed_url
        self.out = out or console

    async def start(self) -> None:
        await load_tasks(self.service, self.feed_url)

    async def handle(self, line: str) -> bool:
        """Run one shell line. Returns False when the session should end."""
        try:
            words = shlex.split(line)
        except ValueError as e:
            format_error(f"Could not parse command: {e}")
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        tasks = self.service.store.tasks

        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            self.out.print(self._help_table())
        elif command == "list":
            self.out.print(build_task_list(tasks, blocked_only="--blocked" in args))
        elif command == "gantt":
            self.out.print(build_gantt_chart(tasks))
        elif command == "print":
            self.out.print(build_signup_sheet(select_tasks(tasks, args)))
        elif command == "toggle":
            self._toggle(args)
        elif command == "refresh":
            await load_tasks(self.service, self.feed_url)
            self.out.print(f"[dim]Loaded {len(self.service.store)} tasks.[/dim]")
        elif command == "url":
            await self._change_url(args)
        else:
            format_error(f"Unknown command '{command}'. Type 'help' for commands.")
        return True

    def _toggle(self, args: list[str]) -> None:
        ids = [a for a in args if not a.startswith("--")]
        if len(ids) != 1:
            format_error("Usage: toggle ID [--force]")
            return
        try:
            task = self.service.toggle(ids[0], force="--force" in args)
        except KeyError:
            format_error(f"No task with ID {ids[0]}")
            return
        except TaskBlockedError as e:
            format_warning(f"{e}. Use 'toggle {ids[0]} --force' to override.")
            return
        state = "completed" if task.completed else "pending"
        format_success(f"{task.name} marked {state}")

    async def _change_url(self, args: list[str]) -> None:
        if not args:
            self.out.print(self.feed_url or "[yellow]No feed URL set[/yellow]")
            return
        try:
            FeedClient(cache_bust=False).build_url(args[0])
        except FetchError as e:
            format_error(str(e))
            return
        self.feed_url = get_config_service().set_feed_url(args[0])
        await load_tasks(self.service, self.feed_url)
        self.out.print(f"[dim]Loaded {len(self.service.store)} tasks.[/dim]")

    @staticmethod
    def _help_table() -> Table:
        table = Table(show_header=False, box=None)
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for usage, description in SHELL_COMMANDS.items():
            table.add_row(usage, description)
        return table


@command_wrapper
async def shell_command(
    feed: Annotated[
        str | None, typer.Option("--feed", help="Use this feed URL instead of the saved one")
    ] = None,
) -> None:
    """Start an interactive dashboard session."""
    shell = DashboardShell(get_task_service(), resolve_feed_url(feed))
    await shell.start()
    console.print("[bold cyan]TaskFeed shell[/bold cyan] [dim]- type 'help' for commands[/dim]")

    while True:
        try:
            line = Prompt.ask("[bold]taskfeed[/bold]", console=console)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not await shell.handle(line):
            break
