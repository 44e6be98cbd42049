"""Exceptions raised by the table engine."""


class TableDataError(Exception):
    """Base exception for table errors."""


class ShapeMismatchError(TableDataError):
    """Raised when a generic renderer is handed something that is not a table."""


class NoDataError(TableDataError):
    """Raised when rendering resolved no header columns for a resource."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"no data found for resource {resource}")
        self.resource = resource


class RowNotFoundError(TableDataError, KeyError):
    """Raised when a row ID is not present in the store."""

    def __init__(self, row_id: str) -> None:
        super().__init__(f"no row with id {row_id!r}")
        self.row_id = row_id

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidFilterError(TableDataError, ValueError):
    """Raised when a regex filter does not compile."""
