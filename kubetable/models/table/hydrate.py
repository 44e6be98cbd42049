"""Hydration of fetched objects into rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from kubetable.models.table.meta_table import MetaTable
from kubetable.models.table.row import Row

if TYPE_CHECKING:
    from kubetable.controllers.render.base_renderer import Renderer


def hydrate(namespace: str, objects: Sequence[Any], renderer: Renderer) -> list[Row]:
    """Render each object. Renderer errors propagate unchanged."""
    return [renderer.render(obj, namespace) for obj in objects]


def generic_hydrate(namespace: str, table: MetaTable, renderer: Renderer) -> list[Row]:
    """Render the rows of a server-side table.

    Renderers that need the column definitions (``GenericRenderer``) are
    handed the table first.
    """
    set_table = getattr(renderer, "set_table", None)
    if set_table is not None:
        set_table(namespace, table)
    return [renderer.render(row, namespace) for row in table.rows]
