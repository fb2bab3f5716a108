"""Configuration service for managing tasktrack configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated key access (``storage.path``, ``output.format``)
- Resolving the task file and sidecar locations
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from tasktrack_cli.adapters.tsv.task_store import default_sidecar_path
from tasktrack_cli.models.config_models import AppConfig

TASK_FILE_ENV = "TASKTRACK_FILE"


class ConfigService:
    """Service for managing application configuration.

    The configuration lives in ``config.json`` under the platform config
    directory. A missing file is created with defaults on first load.
    """

    def __init__(self, data_file: str | Path | None = None):
        """Initialize the config service.

        Args:
            data_file: Task file override (``--file``); takes precedence over
                the ``TASKTRACK_FILE`` environment variable and the config.
        """
        self.config_dir = Path(user_config_dir("tasktrack_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_file_override = Path(data_file) if data_file else None

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value is invalid for the key
        """
        current = self.get(key)
        if isinstance(current, BaseModel):
            raise KeyError(key)

        config_dict = self.config.model_dump()
        parts = key.split(".")
        target = config_dict
        for part in parts[:-1]:
            target = target[part]
        target[parts[-1]] = value

        try:
            self._config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or a single key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value = self._get_default(key)
        self.set(key, default_value)

    @staticmethod
    def _get_default(key: str) -> Any:
        value: Any = AppConfig()
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    @property
    def data_path(self) -> Path:
        """Task file location: ``--file``, then ``$TASKTRACK_FILE``, then config."""
        if self.data_file_override is not None:
            return self.data_file_override
        env_path = os.environ.get(TASK_FILE_ENV)
        if env_path:
            return Path(env_path)
        return Path(self.config.storage.path).expanduser()

    @property
    def sidecar_path(self) -> Path:
        """Next-id sidecar location next to the task file."""
        return default_sidecar_path(self.data_path, self.config.storage.sidecar_suffix)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide config service."""
    return ConfigService()
