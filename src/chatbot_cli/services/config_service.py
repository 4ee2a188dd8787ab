"""Configuration service for ChatBot CLI.

``ConfigService`` is the single source of truth for configuration. It loads
and saves ``config.json`` under the platform config directory and exposes
dotted-key style ``get``/``set`` for the ``config`` command group.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from chatbot_cli.models.config_models import APP_NAME, AppConfig


class ConfigService:
    """Load, save and edit the application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(APP_NAME))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = self.create_default_config()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def create_default_config(self) -> AppConfig:
        """Default configuration keeping data under the platform data dir."""
        return AppConfig(
            data_file=str(self.data_dir / "tasks.txt"),
            history_file=str(self.data_dir / "history.txt"),
        )

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Return a config value, or ``None`` for an unknown key."""
        return self.config.model_dump().get(key)

    def set(self, key: str, value: Any) -> None:
        """Validate and persist a single config value.

        Raises:
            KeyError: If ``key`` is not a config field.
            ValueError: If the value fails validation.
        """
        if key not in AppConfig.model_fields:
            raise KeyError(key)
        data = self.config.model_dump()
        data[key] = value
        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e
        self.save_config()

    def reset_config(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        defaults = self.create_default_config()
        if key is None:
            self._config = defaults
        else:
            if key not in AppConfig.model_fields:
                raise KeyError(key)
            self._config = self.config.model_copy(update={key: getattr(defaults, key)})
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide config service."""
    return ConfigService()
