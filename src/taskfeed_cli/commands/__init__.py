"""Command modules for TaskFeed CLI."""
