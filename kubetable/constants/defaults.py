"""Default values for settings.

All default values used in the SyncSettings model and view-settings fallbacks.
"""

from typing import Final

from kubetable.constants.values import COL_AGE

# ============================================================================
# Reconciliation defaults
# ============================================================================

VOLATILE_COLUMN_DEFAULT: Final = COL_AGE
IGNORE_VOLATILE_ON_UPDATE_DEFAULT: Final = False

# ============================================================================
# Sort defaults
# ============================================================================

SORT_ASCENDING_DEFAULT: Final = True

__all__ = [
    "IGNORE_VOLATILE_ON_UPDATE_DEFAULT",
    "SORT_ASCENDING_DEFAULT",
    "VOLATILE_COLUMN_DEFAULT",
]
