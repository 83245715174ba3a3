"""TaskFeed CLI - project dashboard for spreadsheet task feeds."""

__version__ = "0.1.0"
