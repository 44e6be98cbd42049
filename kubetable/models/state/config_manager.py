"""Read-only loading of engine and view settings from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubetable.models.state.app_settings import ConfigError, ConfigLoadError, SyncSettings
from kubetable.models.state.view_settings import ViewSetting, ViewSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads settings files. Writing them is owned elsewhere."""

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as handle:
                parsed = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"failed to read {path}: {exc}") from exc
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigLoadError(f"expected a mapping in {path}, got {type(parsed).__name__}")
        return parsed

    @classmethod
    def load(cls, path: Path) -> SyncSettings:
        """Load engine settings, defaults when the file does not exist.

        Raises:
            ConfigLoadError: If the file is unreadable or invalid.
        """
        if not path.exists():
            return SyncSettings()
        try:
            return SyncSettings.model_validate(cls._read_yaml(path))
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings in {path}: {exc}") from exc

    @classmethod
    def load_view_settings(cls, path: Path) -> ViewSettings:
        """Load persisted view settings, empty when the file does not exist.

        Raises:
            ConfigLoadError: If the file is unreadable or invalid.
        """
        if not path.exists():
            return ViewSettings()
        try:
            return ViewSettings.model_validate(cls._read_yaml(path))
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid view settings in {path}: {exc}") from exc

    @classmethod
    def view_setting_for(cls, path: Path, resource: str) -> ViewSetting | None:
        """Return one resource's view setting, None when absent or unreadable."""
        try:
            return cls.load_view_settings(path).for_resource(resource)
        except ConfigError as exc:
            logger.warning(f"Ignoring view settings for {resource}: {exc}")
            return None
