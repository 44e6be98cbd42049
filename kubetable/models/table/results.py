"""Structured outcomes for table operations that may recover from failures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kubetable.constants.enums import FilterKind

if TYPE_CHECKING:
    from kubetable.models.table.table_data import TableData


@dataclass
class FilterResult:
    """Result wrapper for a filter pass.

    ``recovered`` is set when the requested strategy failed (e.g. an invalid
    regex) and the table fell back to the unfiltered rows.
    """

    table: TableData
    kind: FilterKind
    recovered: bool = False
    error: str | None = None


@dataclass
class DeleteResult:
    """Result wrapper for a bulk delete."""

    deleted: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def recovered(self) -> bool:
        return bool(self.missing)


@dataclass
class ReconcileResult:
    """Summary of one ``TableData.update`` pass."""

    added: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    deleted: DeleteResult = field(default_factory=DeleteResult)

    @property
    def changed(self) -> bool:
        return bool(self.added or self.updated or self.deleted.deleted)
