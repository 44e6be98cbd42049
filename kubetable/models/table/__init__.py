"""Table models: header, rows, row events and the table facade."""

from kubetable.models.table.errors import (
    InvalidFilterError,
    NoDataError,
    RowNotFoundError,
    ShapeMismatchError,
    TableDataError,
)
from kubetable.models.table.header import Header, HeaderColumn
from kubetable.models.table.meta_table import (
    ColumnDefinition,
    MetaTable,
    MetaTableRow,
    ObjectMeta,
)
from kubetable.models.table.results import DeleteResult, FilterResult, ReconcileResult
from kubetable.models.table.row import BLANK_DELTA, DeltaRow, Row, RowEvent
from kubetable.models.table.row_events import RowEvents
from kubetable.models.table.table_data import FilterOpts, SortColumn, TableData

__all__ = [
    "BLANK_DELTA",
    "ColumnDefinition",
    "DeleteResult",
    "DeltaRow",
    "FilterOpts",
    "FilterResult",
    "Header",
    "HeaderColumn",
    "InvalidFilterError",
    "MetaTable",
    "MetaTableRow",
    "NoDataError",
    "ObjectMeta",
    "ReconcileResult",
    "Row",
    "RowEvent",
    "RowEvents",
    "RowNotFoundError",
    "ShapeMismatchError",
    "SortColumn",
    "TableData",
    "TableDataError",
]
