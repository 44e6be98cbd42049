"""All enum definitions for the table engine.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Row Event Enums
# =============================================================================

class RowEventKind(Enum):
    """Change classification of a row since the previous snapshot."""

    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DELETED = "deleted"


# =============================================================================
# Column Enums
# =============================================================================

class ColumnRole(Enum):
    """Value semantics of a header column, consumed by sort and filter."""

    TEXT = "text"
    TIME = "time"
    METRIC = "metric"
    CAPACITY = "capacity"


# =============================================================================
# Sort and Filter Enums
# =============================================================================

class SortDirection(Enum):
    """Sort direction for data tables."""

    ASC = "asc"
    DESC = "desc"


class FilterKind(Enum):
    """Filter strategy selected from a filter string."""

    NONE = "none"
    LABEL_SELECTOR = "label_selector"
    FUZZY = "fuzzy"
    REGEX = "regex"


__all__ = [
    "ColumnRole",
    "FilterKind",
    "RowEventKind",
    "SortDirection",
]
