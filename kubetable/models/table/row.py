"""Row values, per-cell deltas and change-classified row events."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from kubetable.constants.enums import RowEventKind
from kubetable.constants.values import LABEL_KV_SEPARATOR, LABEL_PAIR_SEPARATOR


def parse_labels(raw: str) -> dict[str, str]:
    """Parse a ``k1=v1,k2=v2`` label cell into a dict."""
    labels: dict[str, str] = {}
    for pair in raw.split(LABEL_PAIR_SEPARATOR):
        key, sep, value = pair.strip().partition(LABEL_KV_SEPARATOR)
        if sep and key:
            labels[key] = value
    return labels


@dataclass(frozen=True, slots=True)
class Row:
    """One entity: its unique ID plus field values aligned with the header."""

    id: str
    fields: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    def field_at(self, idx: int) -> str:
        """Return the value at ``idx``, empty when the row is short."""
        return self.fields[idx] if 0 <= idx < len(self.fields) else ""

    def labels(self, label_col: int) -> dict[str, str]:
        return parse_labels(self.field_at(label_col))

    def labelize(self, cols: Sequence[int], label_col: int, keys: Sequence[str]) -> Row:
        """Keep the identity columns and spread selected labels into columns."""
        labels = self.labels(label_col)
        fields = [self.field_at(idx) for idx in cols]
        fields.extend(labels.get(key, "") for key in keys)
        return Row(self.id, tuple(fields))

    def customize(self, indices: Sequence[int]) -> Row:
        return Row(self.id, tuple(self.field_at(idx) for idx in indices))

    def diff(self, other: Row, ignore_col: int | None = None) -> bool:
        """Return True if the rows differ outside of ``ignore_col``."""
        if self.id != other.id or len(self.fields) != len(other.fields):
            return True
        return any(
            mine != theirs
            for idx, (mine, theirs) in enumerate(zip(self.fields, other.fields))
            if idx != ignore_col
        )


@dataclass(frozen=True, slots=True)
class DeltaRow:
    """Per-column change record between two values of the same row.

    Each slot holds the previous value of a changed cell, or None when the
    cell did not change. A delta with no changed cells is blank.
    """

    values: tuple[str | None, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, old: Row, new: Row, ignore: Collection[int] = ()) -> DeltaRow:
        """Compare ``old`` against ``new`` cell by cell.

        Columns in ``ignore`` never count as changed. Cells that exist only
        in the new row count as changed with an empty previous value.
        """
        width = max(len(old.fields), len(new.fields))
        values: list[str | None] = []
        for idx in range(width):
            if idx in ignore:
                values.append(None)
                continue
            before = old.field_at(idx)
            if idx >= len(old.fields) or idx >= len(new.fields) or before != new.fields[idx]:
                values.append(before)
            else:
                values.append(None)
        if all(value is None for value in values):
            return BLANK_DELTA
        return cls(tuple(values))

    def is_blank(self) -> bool:
        return all(value is None for value in self.values)

    def changed(self, idx: int) -> bool:
        return 0 <= idx < len(self.values) and self.values[idx] is not None

    def changed_indices(self) -> list[int]:
        return [idx for idx, value in enumerate(self.values) if value is not None]

    def customize(self, indices: Sequence[int]) -> DeltaRow:
        if self.is_blank():
            return BLANK_DELTA
        return DeltaRow(
            tuple(self.values[idx] if idx < len(self.values) else None for idx in indices)
        )

    def labelize(
        self, cols: Sequence[int], label_col: int, keys: Sequence[str], current: Row
    ) -> DeltaRow:
        """Project the delta the same way ``Row.labelize`` projects values."""
        if self.is_blank():
            return BLANK_DELTA
        values = [self.values[idx] if idx < len(self.values) else None for idx in cols]
        if self.changed(label_col):
            before = parse_labels(self.values[label_col] or "")
            after = current.labels(label_col)
            for key in keys:
                old = before.get(key, "")
                values.append(old if old != after.get(key, "") else None)
        else:
            values.extend(None for _ in keys)
        if all(value is None for value in values):
            return BLANK_DELTA
        return DeltaRow(tuple(values))


BLANK_DELTA = DeltaRow()


@dataclass(frozen=True, slots=True)
class RowEvent:
    """A row annotated with its change kind and delta."""

    kind: RowEventKind
    row: Row
    deltas: DeltaRow = BLANK_DELTA

    @classmethod
    def added(cls, row: Row) -> RowEvent:
        return cls(RowEventKind.ADDED, row)

    @classmethod
    def updated(cls, row: Row, deltas: DeltaRow) -> RowEvent:
        return cls(RowEventKind.UPDATED, row, deltas)

    @classmethod
    def unchanged(cls, row: Row) -> RowEvent:
        return cls(RowEventKind.UNCHANGED, row)

    @property
    def id(self) -> str:
        return self.row.id

    def diff(self, other: RowEvent, ignore_col: int | None = None) -> bool:
        return self.row.diff(other.row, ignore_col)

    def customize(self, indices: Sequence[int]) -> RowEvent:
        return RowEvent(self.kind, self.row.customize(indices), self.deltas.customize(indices))

    def labelize(self, cols: Sequence[int], label_col: int, keys: Sequence[str]) -> RowEvent:
        return RowEvent(
            self.kind,
            self.row.labelize(cols, label_col, keys),
            self.deltas.labelize(cols, label_col, keys, self.row),
        )
