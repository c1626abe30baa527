"""Configuration service for Pomorock.

Loads and saves ``config.json`` in the platformdirs user config directory.
Values stored there are the defaults for every run; command-line flags
override them for a single run.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from pomorock.exceptions import ConfigError
from pomorock.models.config_models import AppConfig


class ConfigService:
    """Service for loading, changing and persisting the application config."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("pomorock"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage, falling back to defaults."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: nothing saved yet
            self._config = AppConfig()
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Failed to load config {self.config_path}: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ConfigError(f"Unknown configuration key '{key}'")
            value = getattr(value, k)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save."""
        self.get(key)  # validates the key

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        self.get(key)
        value: Any = AppConfig().model_dump()
        for k in key.split("."):
            value = value[k]
        self.set(key, value)


@lru_cache
def get_config_service() -> ConfigService:
    """Get the shared ConfigService instance."""
    return ConfigService()
