"""Settings models and their read-only loader."""

from kubetable.models.state.app_settings import ConfigError, ConfigLoadError, SyncSettings
from kubetable.models.state.config_manager import ConfigManager
from kubetable.models.state.view_settings import ViewSetting, ViewSettings

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "SyncSettings",
    "ViewSetting",
    "ViewSettings",
]
