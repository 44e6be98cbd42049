"""Generic renderer for server-side tables.

``GenericRenderer`` turns a ``MetaTable`` response into rows without
knowing anything about the resource kind.
"""

from __future__ import annotations

from typing import Any

from kubetable.constants.enums import ColumnRole
from kubetable.constants.values import COL_AGE, COL_NAMESPACE
from kubetable.controllers.render.base_renderer import Renderer
from kubetable.models.table.header import Header, HeaderColumn
from kubetable.models.table.meta_table import MetaTable, MetaTableRow
from kubetable.models.table.row import Row
from kubetable.utils.namespaces import is_all_namespaces

_DATE_FORMATS = frozenset({"date", "date-time"})


class GenericRenderer(Renderer):
    """Renders any resource served as a ``MetaTable``.

    Columns with a priority above zero are wide-only. In all-namespace views
    a NAMESPACE column is prepended unless the table already has one.
    """

    def __init__(self) -> None:
        self._table: MetaTable | None = None

    def is_generic(self) -> bool:
        return True

    def set_table(self, namespace: str, table: MetaTable) -> None:
        self._table = table

    def header(self, namespace: str) -> Header:
        if self._table is None:
            return Header()

        columns: list[HeaderColumn] = []
        if self._prepend_namespace(namespace):
            columns.append(HeaderColumn(COL_NAMESPACE))
        for definition in self._table.column_definitions:
            name = definition.name.upper()
            wide = definition.priority > 0
            if name == COL_AGE:
                columns.append(HeaderColumn.age())
            elif definition.format in _DATE_FORMATS:
                columns.append(HeaderColumn(name, role=ColumnRole.TIME, wide=wide))
            else:
                columns.append(HeaderColumn(name, wide=wide))
        return Header(tuple(columns))

    def render(self, obj: Any, namespace: str) -> Row:
        if not isinstance(obj, MetaTableRow):
            raise TypeError(f"expecting a meta table row but got {type(obj).__name__}")

        meta = obj.object
        row_id = f"{meta.namespace}/{meta.name}" if meta.namespace else meta.name
        fields = [meta.namespace] if self._prepend_namespace(namespace) else []
        fields.extend("" if cell is None else str(cell) for cell in obj.cells)
        return Row(row_id, tuple(fields))

    def _prepend_namespace(self, namespace: str) -> bool:
        """Whether a NAMESPACE column must be added in front.

        Tables that already carry a namespace column (CRD printer columns
        often do) are left as served.
        """
        if not is_all_namespaces(namespace) or self._table is None:
            return False
        return all(
            definition.name.upper() != COL_NAMESPACE
            for definition in self._table.column_definitions
        )
