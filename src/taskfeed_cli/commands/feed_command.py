"""Commands for managing the saved feed URL."""

from typing import Annotated

import typer

from taskfeed_cli.models import FetchError, SourceFormatError
from taskfeed_cli.services.config_service import FEED_URL_KEY, get_config_service
from taskfeed_cli.services.feed_client import FeedClient, get_feed_client
from taskfeed_cli.services.normalizer import normalize_feed
from taskfeed_cli.utils.exit_codes import (
    ERROR_INVALID_ARGS,
    ERROR_NETWORK,
    ERROR_SOURCE_FORMAT,
    get_exit_code_description,
)
from taskfeed_cli.utils.ui.console import get_console
from taskfeed_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Manage the spreadsheet feed URL", no_args_is_help=True)
console = get_console()


@app.command("set")
@command_wrapper
def set_feed(
    url: Annotated[
        str,
        typer.Argument(help="Published CSV URL, e.g. https://docs.google.com/spreadsheets/d/.../pub?output=csv"),
    ],
) -> None:
    """Save the feed URL used by every command."""
    try:
        FeedClient(cache_bust=False).build_url(url)
    except FetchError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    stored = get_config_service().set_feed_url(url)
    format_success(f"Feed URL saved: {stored}")


@app.command("show")
@command_wrapper
def show_feed() -> None:
    """Show the saved feed URL."""
    config_service = get_config_service()
    url = config_service.feed_url
    if not url:
        console.print("[yellow]No feed URL set - sample tasks are shown.[/yellow]")
        return
    console.print(f"[cyan]{FEED_URL_KEY}[/cyan] = {url}")
    console.print(f"[dim]{config_service.config_path}[/dim]")


@app.command("clear")
@command_wrapper
def clear_feed() -> None:
    """Forget the saved feed URL."""
    get_config_service().clear_feed_url()
    format_success("Feed URL cleared")


@app.command("check")
@command_wrapper
async def check_feed(
    url: Annotated[
        str | None, typer.Argument(help="Feed URL to check (default: the saved one)")
    ] = None,
) -> None:
    """Fetch and parse the feed without falling back to sample tasks."""
    config_service = get_config_service()
    target = url.strip() if url else config_service.feed_url
    if not target:
        raise AppError("No feed URL set. Use 'taskfeed feed set URL' first.", ERROR_INVALID_ARGS)

    feed_config = config_service.config.feed
    client = get_feed_client(feed_config.timeout, feed_config.cache_bust)
    try:
        tasks = normalize_feed(await client.fetch_text(target))
    except FetchError as e:
        raise AppError(f"{e} ({get_exit_code_description(ERROR_NETWORK)})", ERROR_NETWORK) from e
    except SourceFormatError as e:
        raise AppError(
            f"{e} ({get_exit_code_description(ERROR_SOURCE_FORMAT)})", ERROR_SOURCE_FORMAT
        ) from e

    dated = sum(1 for t in tasks if t.deadline is not None)
    format_success(f"Feed OK: {len(tasks)} tasks, {dated} with a deadline")
