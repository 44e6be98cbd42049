"""Persisted per-resource view settings (read-only)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubetable.constants.defaults import SORT_ASCENDING_DEFAULT
from kubetable.constants.enums import SortDirection
from kubetable.models.state.app_settings import ConfigError


class ViewSetting(BaseModel):
    """Column selection and default sort for one resource view.

    ``sort_column`` is written as ``NAME:asc`` or ``AGE:desc``; a bare
    column name sorts ascending.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    columns: list[str] = Field(default_factory=list)
    sort_column: str = Field(default="", alias="sortColumn")

    def is_blank(self) -> bool:
        return not self.columns and not self.sort_column

    def sort_col(self) -> tuple[str, bool]:
        """Return the persisted sort column name and direction.

        Raises:
            ConfigError: If no sort column is set or the direction is unknown.
        """
        if not self.sort_column:
            raise ConfigError("no sort column specified")
        name, _, direction = self.sort_column.partition(":")
        name = name.strip()
        if not name:
            raise ConfigError(f"invalid sort column spec {self.sort_column!r}")
        if not direction:
            return name, SORT_ASCENDING_DEFAULT
        try:
            return name, SortDirection(direction.strip().lower()) is SortDirection.ASC
        except ValueError as exc:
            raise ConfigError(
                f"invalid sort direction in {self.sort_column!r}, must be asc|desc"
            ) from exc


class ViewSettings(BaseModel):
    """All persisted view settings keyed by resource, e.g. ``v1/pods``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    views: dict[str, ViewSetting] = Field(default_factory=dict)

    def for_resource(self, resource: str) -> ViewSetting | None:
        return self.views.get(resource)
