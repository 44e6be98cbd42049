"""Scalar constants for the table engine.

All package-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Well-known column names
# ============================================================================

COL_NAMESPACE: Final = "NAMESPACE"
COL_NAME: Final = "NAME"
COL_AGE: Final = "AGE"
COL_VALID: Final = "VALID"
COL_LABELS: Final = "LABELS"

# ============================================================================
# Namespace scopes
# ============================================================================

NAMESPACE_ALL: Final = "all"
NAMESPACE_BLANK: Final = ""
CLUSTER_SCOPE: Final = "-"

# ============================================================================
# Filtering
# ============================================================================

FILTER_FIELD_SEPARATOR: Final = " "
INVERSE_PREFIX: Final = "!"

# ============================================================================
# Labels
# ============================================================================

LABEL_PAIR_SEPARATOR: Final = ","
LABEL_KV_SEPARATOR: Final = "="

__all__ = [
    "CLUSTER_SCOPE",
    "COL_AGE",
    "COL_LABELS",
    "COL_NAME",
    "COL_NAMESPACE",
    "COL_VALID",
    "FILTER_FIELD_SEPARATOR",
    "INVERSE_PREFIX",
    "LABEL_KV_SEPARATOR",
    "LABEL_PAIR_SEPARATOR",
    "NAMESPACE_ALL",
    "NAMESPACE_BLANK",
]
