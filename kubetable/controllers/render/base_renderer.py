"""Base renderer turning fetched objects into table rows.

Renderers are supplied by the resource views; the table engine only calls
them through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from kubetable.models.table.header import Header
from kubetable.models.table.row import Row


class Renderer(ABC):
    """Converts raw objects of one resource kind into rows.

    Subclasses should implement the abstract methods to provide the header
    and per-object hydration for their resource.
    """

    def is_generic(self) -> bool:
        """Return True when objects arrive as one server-side ``MetaTable``."""
        return False

    @abstractmethod
    def header(self, namespace: str) -> Header:
        """Return the column schema for the given namespace scope."""
        ...

    @abstractmethod
    def render(self, obj: Any, namespace: str) -> Row:
        """Convert one object into a row aligned with ``header(namespace)``."""
        ...
