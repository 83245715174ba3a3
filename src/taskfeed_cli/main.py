"""Main entry point for TaskFeed CLI."""

import typer

from taskfeed_cli import __version__
from taskfeed_cli.commands import (
    feed_command,
    gantt_command,
    list_command,
    print_command,
    shell_command,
)
from taskfeed_cli.utils.logger import enable_console_logging
from taskfeed_cli.utils.ui.console import get_console

app = typer.Typer(
    name="taskfeed",
    help="Project dashboard for spreadsheet task feeds: task list, timeline and sign-up sheet",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also print log messages to stderr"
    ),
) -> None:
    """TaskFeed CLI."""
    if verbose:
        enable_console_logging()


app.add_typer(feed_command.app, name="feed", help="Manage the spreadsheet feed URL")
app.command("list")(list_command.list_command)
app.command("gantt")(gantt_command.gantt_command)
app.command("print")(print_command.print_command)
app.command("shell")(shell_command.shell_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TaskFeed CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
