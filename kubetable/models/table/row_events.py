"""ID-indexed, order-preserving store of row events."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from kubetable.constants.enums import ColumnRole
from kubetable.models.table.errors import RowNotFoundError
from kubetable.models.table.results import DeleteResult
from kubetable.models.table.row import RowEvent
from kubetable.utils.durations import parse_duration
from kubetable.utils.namespaces import is_namespaced
from kubetable.utils.resource_parser import parse_capacity, parse_quantity


RangeFn = Callable[[int, RowEvent], bool]

_PARSERS: dict[ColumnRole, Callable[[str], float | None]] = {
    ColumnRole.TIME: parse_duration,
    ColumnRole.METRIC: parse_quantity,
    ColumnRole.CAPACITY: parse_capacity,
}


class RowEvents:
    """Ordered collection of ``RowEvent`` keyed by row ID.

    Enumeration order is insertion order until ``sort`` is called. An
    ID -> position index is kept in step with every mutation so lookups by
    ID and by position are both O(1).

    The store does no locking of its own; ``TableData`` guards it.
    """

    def __init__(self, events: Iterable[RowEvent] = ()) -> None:
        self._events: list[RowEvent] = []
        self._index: dict[str, int] = {}
        for event in events:
            self.add(event)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[RowEvent]:
        return iter(list(self._events))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowEvents):
            return NotImplemented
        return self._events == other._events

    def __repr__(self) -> str:
        return f"RowEvents({self.ids()!r})"

    def empty(self) -> bool:
        return not self._events

    def ids(self) -> list[str]:
        return [event.id for event in self._events]

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, event: RowEvent) -> None:
        """Append an event. An event whose ID is already stored replaces it."""
        idx = self._index.get(event.id)
        if idx is not None:
            self._events[idx] = event
            return
        self._index[event.id] = len(self._events)
        self._events.append(event)

    def set(self, idx: int, event: RowEvent) -> None:
        """Replace the event at position ``idx``."""
        current = self._events[idx]
        if current.id != event.id:
            other = self._index.get(event.id)
            if other is not None:
                raise ValueError(f"row id {event.id!r} already stored at index {other}")
            del self._index[current.id]
            self._index[event.id] = idx
        self._events[idx] = event

    def delete(self, row_id: str) -> None:
        """Remove the event with ``row_id``.

        Raises:
            RowNotFoundError: If no event carries that ID.
        """
        idx = self._index.pop(row_id, None)
        if idx is None:
            raise RowNotFoundError(row_id)
        del self._events[idx]
        for pos in range(idx, len(self._events)):
            self._index[self._events[pos].id] = pos

    def delete_many(self, row_ids: Iterable[str]) -> DeleteResult:
        """Remove several events in a single pass over the store.

        IDs that are not stored are reported in ``missing`` rather than
        raised, since under churn they were usually removed already.
        """
        result = DeleteResult()
        victims = set()
        for row_id in row_ids:
            if row_id in self._index:
                victims.add(row_id)
            else:
                result.missing.append(row_id)
        if victims:
            kept = []
            for event in self._events:
                if event.id in victims:
                    result.deleted.append(event.id)
                else:
                    kept.append(event)
            self._events = kept
            self._reindex()
        return result

    def clear(self) -> None:
        self._events = []
        self._index = {}

    def _reindex(self) -> None:
        self._index = {event.id: idx for idx, event in enumerate(self._events)}

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, row_id: str) -> RowEvent | None:
        idx = self._index.get(row_id)
        return None if idx is None else self._events[idx]

    def at(self, idx: int) -> RowEvent | None:
        if 0 <= idx < len(self._events):
            return self._events[idx]
        return None

    def find_index(self, row_id: str) -> int | None:
        return self._index.get(row_id)

    def range(self, fn: RangeFn) -> None:
        """Call ``fn(index, event)`` in order until it returns False."""
        for idx, event in enumerate(self._events):
            if not fn(idx, event):
                return

    # =========================================================================
    # Derivation
    # =========================================================================

    def clone(self) -> RowEvents:
        """Independent copy. Events are immutable so they are shared."""
        clone = RowEvents()
        clone._events = list(self._events)
        clone._index = dict(self._index)
        return clone

    def diff(self, other: RowEvents, ignore_col: int | None = None) -> bool:
        """Return True if the stores differ outside of ``ignore_col``.

        Size, ID membership, position and every other field count.
        """
        if len(self._events) != len(other._events):
            return True
        return any(
            mine.diff(theirs, ignore_col)
            for mine, theirs in zip(self._events, other._events)
        )

    def extract_header_labels(self, label_col: int) -> list[str]:
        """Sorted, unique label keys found across every row."""
        keys: set[str] = set()
        for event in self._events:
            keys.update(event.row.labels(label_col))
        return sorted(keys)

    def labelize(self, cols: Sequence[int], label_col: int, keys: Sequence[str]) -> RowEvents:
        return RowEvents(event.labelize(cols, label_col, keys) for event in self._events)

    def customize(self, indices: Sequence[int]) -> RowEvents:
        return RowEvents(event.customize(indices) for event in self._events)

    # =========================================================================
    # Sorting
    # =========================================================================

    def sort(self, namespace: str, col_idx: int, role: ColumnRole, ascending: bool) -> None:
        """Reorder events in place by the values in column ``col_idx``.

        Text compares lexically; time, metric and capacity cells compare by
        their parsed magnitude, with unparsable cells after real values.
        Equal values fall back to ascending ID order whatever the direction,
        so repeated sorts give the same output.
        """
        prefix = f"{namespace}/" if is_namespaced(namespace) else ""
        parser = _PARSERS.get(role)
        # Keeps unparsable cells last in either direction.
        invalid = 1 if ascending else -1

        def id_key(event: RowEvent) -> str:
            return event.id.removeprefix(prefix) if prefix else event.id

        def value_key(event: RowEvent) -> tuple[int, float, str]:
            value = event.row.field_at(col_idx)
            if parser is None:
                return (0, 0.0, value)
            number = parser(value)
            if number is None:
                return (invalid, 0.0, value)
            # Equal magnitudes spelled differently tie, so IDs order them.
            return (0, number, "")

        # Two stable passes: IDs first so that they order ties.
        self._events.sort(key=id_key)
        self._events.sort(key=value_key, reverse=not ascending)
        self._reindex()
