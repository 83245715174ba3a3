"""Shared feed loading for the dashboard commands."""

from __future__ import annotations

from rich.console import Console

from taskfeed_cli.services.config_service import get_config_service
from taskfeed_cli.services.task_service import LoadResult, TaskService

# Status messages go to stderr so --output json stays parseable.
err_console = Console(stderr=True)


def resolve_feed_url(override: str | None = None) -> str:
    """Return *override* if given, else the persisted feed URL."""
    if override is not None:
        return override.strip()
    return get_config_service().feed_url


async def load_tasks(service: TaskService, feed_url: str | None = None) -> LoadResult:
    """Load the feed into the service's store and report problems.

    A failed load prints the single user-facing message; the store then
    holds the sample tasks so every view still renders.
    """
    result = await service.load(resolve_feed_url(feed_url))
    if result.error:
        err_console.print(f"[bold red]Error:[/bold red] {result.error}")
        if result.detail:
            err_console.print(f"[dim]{result.detail}[/dim]")
        err_console.print("[dim]Showing sample tasks instead.[/dim]")
    elif result.source == "sample":
        err_console.print(
            "[dim]No feed configured - showing sample tasks. "
            "Set one with 'taskfeed feed set URL'.[/dim]"
        )
    return result
