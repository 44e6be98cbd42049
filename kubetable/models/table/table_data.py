"""TableData - live, versioned table of one resource view.

A ``TableData`` owns one ``Header`` and one ``RowEvents`` store for a
resource kind within a namespace scope. The refresh path feeds it full
snapshots through ``render``/``update``; the UI reads, filters and sorts it.

Locking:
- One reader/writer lock per instance. ``update``, ``delete``, ``sort``,
  ``clear``, ``reset``, ``set_header``, ``add_row`` and ``set_row`` take it
  exclusively; every accessor takes it shared.
- ``filter``, ``labelize``, ``customize`` and ``clone`` return new tables
  that share no mutable state with their source, so derived views never
  need locking against the canonical one.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from textual.fuzzy import Matcher

from kubetable.constants.enums import FilterKind
from kubetable.constants.values import (
    COL_LABELS,
    COL_NAME,
    COL_NAMESPACE,
    FILTER_FIELD_SEPARATOR,
)
from kubetable.models.state.app_settings import ConfigError, SyncSettings
from kubetable.models.state.view_settings import ViewSetting
from kubetable.models.table.errors import InvalidFilterError, NoDataError, ShapeMismatchError
from kubetable.models.table.header import Header, HeaderColumn
from kubetable.models.table.hydrate import generic_hydrate, hydrate
from kubetable.models.table.meta_table import MetaTable
from kubetable.models.table.results import DeleteResult, FilterResult, ReconcileResult
from kubetable.models.table.row import DeltaRow, Row, RowEvent
from kubetable.models.table.row_events import RangeFn, RowEvents
from kubetable.utils.namespaces import is_all_namespaces, is_namespaced
from kubetable.utils.rw_lock import ReadWriteLock
from kubetable.utils.selectors import parse_filter

if TYPE_CHECKING:
    from kubetable.controllers.render.base_renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SortColumn:
    """A sort request. An empty name means no explicit sort."""

    name: str = ""
    ascending: bool = True

    def is_set(self) -> bool:
        return self.name != ""


@dataclass(frozen=True, slots=True)
class FilterOpts:
    """Filter request from the UI."""

    toast: bool = False
    filter: str = ""
    invert: bool = False


class TableData:
    """Tracks one resource view for tabular display."""

    def __init__(
        self,
        resource: str,
        namespace: str = "",
        header: Header | None = None,
        row_events: RowEvents | None = None,
        settings: SyncSettings | None = None,
    ) -> None:
        self.resource = resource
        self._namespace = namespace
        self._header = header if header is not None else Header()
        self._row_events = row_events if row_events is not None else RowEvents()
        self._settings = settings if settings is not None else SyncSettings()
        self._lock = ReadWriteLock()

    @classmethod
    def from_table(cls, other: TableData) -> TableData:
        """Independent copy of ``other``, same as ``other.clone()``."""
        return other.clone()

    def __repr__(self) -> str:
        return f"TableData(resource={self.resource!r}, namespace={self._namespace!r})"

    @property
    def settings(self) -> SyncSettings:
        return self._settings

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def header(self) -> Header:
        with self._lock.read_locked():
            return self._header

    def header_count(self) -> int:
        with self._lock.read_locked():
            return len(self._header)

    def head_col(self, name: str, wide: bool) -> tuple[HeaderColumn | None, int | None]:
        with self._lock.read_locked():
            idx = self._header.index_of(name, wide)
            if idx is None:
                return None, None
            return self._header[idx], idx

    def index_of_header(self, name: str) -> int | None:
        with self._lock.read_locked():
            return self._header.index_of(name, False)

    def column_names(self, wide: bool) -> list[str]:
        with self._lock.read_locked():
            return self._header.column_names(wide)

    def get_namespace(self) -> str:
        with self._lock.read_locked():
            return self._namespace

    def empty(self) -> bool:
        with self._lock.read_locked():
            return self._row_events.empty()

    def row_count(self) -> int:
        with self._lock.read_locked():
            return len(self._row_events)

    def find_row(self, row_id: str) -> RowEvent | None:
        with self._lock.read_locked():
            return self._row_events.get(row_id)

    def row_at(self, idx: int) -> RowEvent | None:
        with self._lock.read_locked():
            return self._row_events.at(idx)

    def rows_range(self, fn: RangeFn) -> None:
        """Iterate rows under the shared lock.

        ``fn`` must not call back into this table at all, readers included:
        the lock is not reentrant and a queued writer blocks new readers.
        """
        with self._lock.read_locked():
            self._row_events.range(fn)

    def row_events(self) -> RowEvents:
        """Independent copy of the current row events."""
        with self._lock.read_locked():
            return self._row_events.clone()

    # =========================================================================
    # Writers
    # =========================================================================

    def add_row(self, event: RowEvent) -> None:
        with self._lock.write_locked():
            self._row_events.add(event)

    def set_row(self, idx: int, event: RowEvent) -> None:
        with self._lock.write_locked():
            self._row_events.set(idx, event)

    def set_header(self, namespace: str, header: Header) -> None:
        with self._lock.write_locked():
            self._namespace, self._header = namespace, header

    def reset(self, namespace: str) -> None:
        """Switch namespace scope and drop all content."""
        with self._lock.write_locked():
            self._namespace = namespace
            self._clear_locked()

    def clear(self) -> None:
        with self._lock.write_locked():
            self._clear_locked()

    def _clear_locked(self) -> None:
        self._header = self._header.clear()
        self._row_events.clear()

    # =========================================================================
    # Rendering and reconciliation
    # =========================================================================

    def render(self, renderer: Renderer, objects: Sequence[Any]) -> ReconcileResult:
        """Hydrate fetched objects and reconcile them into the table.

        Hydration happens before the table is touched, so on any error the
        previous content is left as it was.

        Raises:
            ShapeMismatchError: The renderer is generic but the object is not
                a ``MetaTable``.
            NoDataError: The renderer resolved no header columns.
            Exception: Whatever the renderer raises while hydrating.
        """
        namespace = self.get_namespace()
        rows: list[Row] = []
        if objects:
            if renderer.is_generic():
                table = objects[0]
                if not isinstance(table, MetaTable):
                    raise ShapeMismatchError(
                        f"expecting a meta table but got {type(table).__name__}"
                    )
                rows = generic_hydrate(namespace, table, renderer)
            else:
                rows = hydrate(namespace, objects, renderer)

        header = renderer.header(namespace)
        if not header:
            raise NoDataError(self.resource)

        with self._lock.write_locked():
            self._header = header
            return self._update_locked(rows)

    def update(self, rows: Iterable[Row]) -> ReconcileResult:
        """Reconcile a complete snapshot into the store.

        Afterwards the stored IDs are exactly the IDs of ``rows``.
        """
        with self._lock.write_locked():
            return self._update_locked(rows)

    def _update_locked(self, rows: Iterable[Row]) -> ReconcileResult:
        result = ReconcileResult()
        store = self._row_events

        if store.empty():
            for row in rows:
                store.add(RowEvent.added(row))
                result.added.append(row.id)
            logger.debug(f"{self.resource}: loaded {len(store)} rows")
            return result

        ignore = self._volatile_indices_locked() if self._settings.ignore_volatile_on_update else ()
        seen: set[str] = set()
        for row in rows:
            seen.add(row.id)
            idx = store.find_index(row.id)
            if idx is None:
                store.add(RowEvent.added(row))
                result.added.append(row.id)
                continue
            current = store.at(idx)
            delta = DeltaRow.build(current.row, row, ignore)
            if delta.is_blank():
                store.set(idx, RowEvent.unchanged(row))
                result.unchanged.append(row.id)
            else:
                store.set(idx, RowEvent.updated(row, delta))
                result.updated.append(row.id)

        result.deleted = self._delete_locked(seen)
        logger.debug(
            f"{self.resource}: +{len(result.added)} ~{len(result.updated)} "
            f"-{len(result.deleted.deleted)} ={len(result.unchanged)}"
        )
        return result

    def delete(self, keep_ids: Iterable[str]) -> DeleteResult:
        """Remove every row whose ID is not in ``keep_ids``."""
        with self._lock.write_locked():
            return self._delete_locked(set(keep_ids))

    def _delete_locked(self, keep_ids: set[str]) -> DeleteResult:
        victims = [event.id for event in self._row_events if event.id not in keep_ids]
        result = self._row_events.delete_many(victims)
        for row_id in result.missing:
            logger.error(f"Table delete failed for {self.resource}: row {row_id!r} not found")
        return result

    def _volatile_index_locked(self) -> int | None:
        idx = self._header.index_of(self._settings.volatile_column, True)
        if idx is not None:
            return idx
        flagged = sorted(self._header.volatile_indices())
        return flagged[0] if flagged else None

    def _volatile_indices_locked(self) -> frozenset[int]:
        indices = set(self._header.volatile_indices())
        named = self._header.index_of(self._settings.volatile_column, True)
        if named is not None:
            indices.add(named)
        return frozenset(indices)

    # =========================================================================
    # Filtering
    # =========================================================================

    def filter(self, opts: FilterOpts) -> TableData:
        """Return a new table holding the rows selected by ``opts``."""
        return self.filter_result(opts).table

    def filter_result(self, opts: FilterOpts) -> FilterResult:
        """Filter and report which strategy ran and whether it fell back.

        Toast filtering keeps rows with a non-empty VALID cell and composes
        with the text filter. Label selectors are applied upstream by the
        fetch layer, so they leave the rows untouched here. Fuzzy filtering
        ranks rows by match quality; regex filtering keeps the input order.
        """
        spec = parse_filter(opts.filter, opts.invert)
        with self._lock.read_locked():
            source = self._filter_toast_locked() if opts.toast else self._row_events.clone()
            table = TableData(self.resource, self._namespace, self._header, source, self._settings)

            if spec.kind in (FilterKind.NONE, FilterKind.LABEL_SELECTOR):
                return FilterResult(table, spec.kind)

            if spec.kind is FilterKind.FUZZY:
                table._row_events = self._fuzzy_filter(source, spec.query)
                return FilterResult(table, spec.kind)

            try:
                table._row_events = self._rx_filter_locked(source, spec.query, spec.invert)
            except InvalidFilterError as exc:
                logger.error(f"RX filter failed: {exc}")
                return FilterResult(table, spec.kind, recovered=True, error=str(exc))
            return FilterResult(table, spec.kind)

    def _filter_toast_locked(self) -> RowEvents:
        selected = RowEvents()
        idx = self._header.valid_col_index()
        if idx is None:
            return selected
        for event in self._row_events:
            if event.row.field_at(idx) != "":
                selected.add(event)
        return selected

    @staticmethod
    def _fuzzy_filter(source: RowEvents, query: str) -> RowEvents:
        matcher = Matcher(query.strip())
        scored = []
        for idx, event in enumerate(source):
            score = matcher.match(event.id)
            if score > 0:
                scored.append((score, idx, event))
        scored.sort(key=lambda item: (-item[0], item[1]))
        return RowEvents(event for _, _, event in scored)

    def _rx_filter_locked(self, source: RowEvents, query: str, invert: bool) -> RowEvents:
        # Multi-token queries are left alone rather than guessed at.
        if any(char.isspace() for char in query):
            return source

        try:
            rx = re.compile(f"(?i)({query})")
        except re.error as exc:
            raise InvalidFilterError(f"invalid rx filter {query!r}: {exc}") from exc

        indices = self._header.filter_col_indices(self._namespace, True)
        selected = RowEvents()
        for event in source:
            text = FILTER_FIELD_SEPARATOR.join(
                value for idx, value in enumerate(event.row.fields) if idx in indices
            )
            if bool(rx.search(text)) != invert:
                selected.add(event)
        return selected

    # =========================================================================
    # Sorting
    # =========================================================================

    def sort(self, sc: SortColumn) -> None:
        """Sort rows in place. Unknown columns leave the order unchanged."""
        with self._lock.write_locked():
            idx = self._header.index_of(sc.name, False)
            if idx is None:
                idx = self._header.index_of(sc.name, True)
            if idx is None:
                return
            self._row_events.sort(self._namespace, idx, self._header[idx].role, sc.ascending)

    def compute_sort_col(
        self, view_setting: ViewSetting | None, sc: SortColumn, manual: bool
    ) -> SortColumn:
        """Pick the effective sort column.

        Without persisted settings the user's pick wins, else a default
        based on the view. With persisted settings they win unless the user
        changed the sort during this interaction.
        """
        if view_setting is None or view_setting.is_blank():
            if sc.is_set():
                return sc
            return self._default_sort_col() or sc
        if manual and sc.is_set():
            return sc
        try:
            name, ascending = view_setting.sort_col()
        except ConfigError:
            return sc
        return SortColumn(name, ascending)

    def _default_sort_col(self) -> SortColumn | None:
        with self._lock.read_locked():
            header, namespace = self._header, self._namespace
        if not header:
            return None
        candidates = [COL_NAMESPACE, COL_NAME] if is_all_namespaces(namespace) else [COL_NAME]
        for name in candidates:
            if header.index_of(name, False) is not None:
                return SortColumn(name, True)
        return SortColumn(header[0].name, True)

    # =========================================================================
    # Derivation
    # =========================================================================

    def clone(self) -> TableData:
        with self._lock.read_locked():
            return TableData(
                self.resource,
                self._namespace,
                self._header.clone(),
                self._row_events.clone(),
                self._settings,
            )

    def labelize(self, keys: Sequence[str] = ()) -> TableData:
        """Project label keys out of the LABELS column into their own columns.

        The result keeps the identity columns (NAMESPACE when the view spans
        namespaces, then NAME) followed by one column per key. With no keys,
        every key found in the rows is projected. Keys named like an identity
        column are dropped. Tables without a LABELS column come back as a
        plain copy.
        """
        with self._lock.read_locked():
            label_col = self._header.index_of(COL_LABELS, True)
            if label_col is None:
                return TableData(
                    self.resource,
                    self._namespace,
                    self._header,
                    self._row_events.clone(),
                    self._settings,
                )

            cols = []
            if not is_namespaced(self._namespace):
                ns_idx = self._header.index_of(COL_NAMESPACE, True)
                if ns_idx is not None:
                    cols.append(ns_idx)
            name_idx = self._header.index_of(COL_NAME, True)
            cols.append(name_idx if name_idx is not None else 0)

            keys = list(keys) or self._row_events.extract_header_labels(label_col)
            # Keys named like an identity column would shadow it.
            taken = {self._header[idx].name for idx in cols}
            keys = [key for key in dict.fromkeys(keys) if key not in taken]
            return TableData(
                self.resource,
                self._namespace,
                self._header.labelize(cols, keys),
                self._row_events.labelize(cols, label_col, keys),
                self._settings,
            )

    def customize(self, view_setting: ViewSetting | None, wide: bool) -> TableData:
        """Project the table onto a view setting's column selection."""
        columns = view_setting.columns if view_setting is not None else []
        with self._lock.read_locked():
            header, indices = self._header.customize(columns, wide)
            return TableData(
                self.resource,
                self._namespace,
                header,
                self._row_events.customize(indices),
                self._settings,
            )

    # =========================================================================
    # Comparison
    # =========================================================================

    def diff(self, other: TableData | None) -> bool:
        """Return True if ``other`` would render differently from this table.

        The volatile column (AGE by default) is ignored so that ticking ages
        alone do not trigger a redraw.
        """
        if other is None:
            return True
        # Snapshot first so the two locks are never held together.
        theirs = other.clone()
        with self._lock.read_locked():
            if self._namespace != theirs._namespace or self._header.diff(theirs._header):
                return True
            return self._row_events.diff(theirs._row_events, self._volatile_index_locked())
