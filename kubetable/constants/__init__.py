"""Constants module for the kubetable engine.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (column names, namespace scopes, filter markers)
- patterns.py: Pre-compiled regex patterns
- defaults.py: Default values for settings
"""

from kubetable.constants.defaults import (
    IGNORE_VOLATILE_ON_UPDATE_DEFAULT,
    SORT_ASCENDING_DEFAULT,
    VOLATILE_COLUMN_DEFAULT,
)
from kubetable.constants.enums import (
    ColumnRole,
    FilterKind,
    RowEventKind,
    SortDirection,
)
from kubetable.constants.values import (
    CLUSTER_SCOPE,
    COL_AGE,
    COL_LABELS,
    COL_NAME,
    COL_NAMESPACE,
    COL_VALID,
    FILTER_FIELD_SEPARATOR,
    INVERSE_PREFIX,
    NAMESPACE_ALL,
    NAMESPACE_BLANK,
)

__all__ = [
    "CLUSTER_SCOPE",
    "COL_AGE",
    "COL_LABELS",
    "COL_NAME",
    "COL_NAMESPACE",
    "COL_VALID",
    "FILTER_FIELD_SEPARATOR",
    "IGNORE_VOLATILE_ON_UPDATE_DEFAULT",
    "INVERSE_PREFIX",
    "NAMESPACE_ALL",
    "NAMESPACE_BLANK",
    "SORT_ASCENDING_DEFAULT",
    "VOLATILE_COLUMN_DEFAULT",
    "ColumnRole",
    "FilterKind",
    "RowEventKind",
    "SortDirection",
]
