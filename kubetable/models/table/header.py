"""Column schema for a resource table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace

from kubetable.constants.enums import ColumnRole
from kubetable.constants.values import COL_AGE, COL_NAMESPACE, COL_VALID
from kubetable.utils.namespaces import is_all_namespaces


@dataclass(frozen=True, slots=True)
class HeaderColumn:
    """One column descriptor.

    ``role`` drives value comparison when sorting. ``filterable`` columns are
    joined into the text searched by regex filters. ``volatile`` columns
    (ticking ages and the like) are ignored when deciding whether a redraw
    is needed.
    """

    name: str
    role: ColumnRole = ColumnRole.TEXT
    wide: bool = False
    filterable: bool = True
    volatile: bool = False

    @classmethod
    def age(cls, name: str = COL_AGE) -> HeaderColumn:
        """Build the conventional elapsed-time column."""
        return cls(name, role=ColumnRole.TIME, filterable=False, volatile=True)

    @property
    def is_time(self) -> bool:
        return self.role is ColumnRole.TIME

    @property
    def is_metric(self) -> bool:
        return self.role is ColumnRole.METRIC

    @property
    def is_capacity(self) -> bool:
        return self.role is ColumnRole.CAPACITY


@dataclass(frozen=True, slots=True)
class Header:
    """Ordered, immutable sequence of column descriptors.

    Headers are replaced wholesale on every render, never edited in place,
    so one instance can be shared freely between tables and threads.
    """

    columns: tuple[HeaderColumn, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))
        names = [col.name for col in self.columns]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate column names in header: {names}")

    @classmethod
    def of(cls, *columns: HeaderColumn | str) -> Header:
        """Build a header from descriptors or bare TEXT column names."""
        return cls(
            tuple(col if isinstance(col, HeaderColumn) else HeaderColumn(col) for col in columns)
        )

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[HeaderColumn]:
        return iter(self.columns)

    def __getitem__(self, idx: int) -> HeaderColumn:
        return self.columns[idx]

    def __bool__(self) -> bool:
        return bool(self.columns)

    def index_of(self, name: str, include_wide: bool) -> int | None:
        """Return the index of the column named ``name``.

        Wide columns are only considered when ``include_wide`` is set.
        """
        for idx, col in enumerate(self.columns):
            if col.wide and not include_wide:
                continue
            if col.name == name:
                return idx
        return None

    def column_names(self, wide: bool) -> list[str]:
        return [col.name for col in self.columns if wide or not col.wide]

    def valid_col_index(self) -> int | None:
        return self.index_of(COL_VALID, True)

    def age_col_index(self) -> int | None:
        return self.index_of(COL_AGE, True)

    def volatile_indices(self) -> frozenset[int]:
        return frozenset(idx for idx, col in enumerate(self.columns) if col.volatile)

    def filter_col_indices(self, namespace: str, wide: bool) -> frozenset[int]:
        """Indices of the columns searched by text filters.

        The NAMESPACE column only takes part when the view spans all
        namespaces, since every row carries the same value otherwise.
        """
        indices = set()
        for idx, col in enumerate(self.columns):
            if not col.filterable or (col.wide and not wide):
                continue
            if col.name == COL_NAMESPACE and not is_all_namespaces(namespace):
                continue
            indices.add(idx)
        return frozenset(indices)

    def diff(self, other: Header) -> bool:
        """Return True if the headers differ in any column or attribute."""
        return self.columns != other.columns

    def clone(self) -> Header:
        return Header(self.columns)

    def clear(self) -> Header:
        return Header()

    def labelize(self, cols: Sequence[int], keys: Iterable[str]) -> Header:
        """Identity columns followed by one TEXT column per label key."""
        columns = [self.columns[idx] for idx in cols]
        columns.extend(HeaderColumn(key) for key in keys)
        return Header(tuple(columns))

    def customize(self, names: Sequence[str], wide: bool) -> tuple[Header, list[int]]:
        """Project the header onto ``names``, in that order.

        Unknown names are skipped. In wide mode, wide columns not listed are
        appended so nothing the user asked to see disappears.

        Returns:
            The new header and, for each of its columns, the source index.
        """
        if not names:
            if wide:
                return self, list(range(len(self.columns)))
            indices = [idx for idx, col in enumerate(self.columns) if not col.wide]
            return Header(tuple(self.columns[idx] for idx in indices)), indices

        indices = []
        for name in names:
            idx = self.index_of(name, True)
            if idx is not None and idx not in indices:
                indices.append(idx)
        if wide:
            indices.extend(
                idx for idx, col in enumerate(self.columns)
                if col.wide and idx not in indices
            )
        columns = []
        for idx in indices:
            col = self.columns[idx]
            # Explicitly picked columns are shown even when wide-only.
            columns.append(replace(col, wide=False) if col.name in names else col)
        return Header(tuple(columns)), indices
