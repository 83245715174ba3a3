"""Configuration models for TaskFeed CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["pretty", "table", "json", "yaml"]


class FeedConfig(BaseModel):
    """Feed retrieval configuration."""

    url: str = Field(default="", description="Published spreadsheet CSV URL")
    timeout: float = Field(default=30.0, gt=0)
    cache_bust: bool = Field(
        default=True, description="Append a timestamp so proxies never serve stale data"
    )

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        """Store the URL without surrounding whitespace."""
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default="pretty")


class AppConfig(BaseModel):
    """Main TaskFeed configuration."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
