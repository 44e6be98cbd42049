"""Engine settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubetable.constants.defaults import (
    IGNORE_VOLATILE_ON_UPDATE_DEFAULT,
    VOLATILE_COLUMN_DEFAULT,
)


class SyncSettings(BaseModel):
    """Table synchronization policy with validation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Column ignored when comparing snapshots for redraw
    volatile_column: str = Field(default=VOLATILE_COLUMN_DEFAULT, alias="volatileColumn")

    # When set, reconciliation also ignores volatile columns so a ticking
    # age does not flag every row as updated on each refresh.
    ignore_volatile_on_update: bool = Field(
        default=IGNORE_VOLATILE_ON_UPDATE_DEFAULT, alias="ignoreVolatileOnUpdate"
    )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
