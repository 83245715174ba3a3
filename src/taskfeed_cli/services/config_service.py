"""Configuration service for TaskFeed CLI.

ConfigService is the single owner of ``config.json``. The feed URL is the
only value the program writes; the other settings are defaults the user
may edit by hand.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from taskfeed_cli.models.config_models import AppConfig
from taskfeed_cli.utils.logger import get_logger

# Dot-separated location of the persisted feed URL inside config.json.
FEED_URL_KEY = "feed.url"


class ConfigService:
    """Service for loading and saving the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("taskfeed_cli"))
        self.config_path = self.config_dir / "config.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage.

        A missing file yields defaults; a corrupt file is logged and also
        yields defaults so the dashboard stays usable.
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
        except (OSError, ValidationError) as e:
            get_logger("config").warning("ignoring unreadable config %s: %s", self.config_path, e)
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    @property
    def feed_url(self) -> str:
        """The persisted feed URL, empty when none is set."""
        return self.config.feed.url

    def set_feed_url(self, url: str) -> str:
        """Persist a new feed URL and return it as stored."""
        feed = self.config.feed.model_copy(update={"url": url.strip()})
        self._config = self.config.model_copy(update={"feed": feed})
        self.save_config()
        return self.feed_url

    def clear_feed_url(self) -> None:
        """Forget the persisted feed URL."""
        self.set_feed_url("")


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
