"""Tests for TableData sorting and sort column resolution."""

from __future__ import annotations

import pytest

from kubetable.constants.enums import ColumnRole
from kubetable.models.state.view_settings import ViewSetting
from kubetable.models.table import Header, HeaderColumn, Row, SortColumn, TableData


@pytest.fixture
def table() -> TableData:
    header = Header.of(
        "NAMESPACE",
        "NAME",
        "STATUS",
        HeaderColumn("MEM", role=ColumnRole.METRIC),
        HeaderColumn("NODE", wide=True),
        HeaderColumn.age(),
    )
    table = TableData("v1/pods", "all", header)
    table.update(
        [
            Row("prod/web", ("prod", "web", "Running", "512Mi", "n2", "3d")),
            Row("dev/api", ("dev", "api", "Running", "1Gi", "n1", "40m")),
            Row("prod/db", ("prod", "db", "Pending", "128Mi", "n3", "2h")),
        ]
    )
    return table


def _ids(table: TableData) -> list[str]:
    return table.row_events().ids()


@pytest.mark.unit
@pytest.mark.fast
class TestSort:
    """Tests for TableData.sort."""

    def test_sort_by_name(self, table: TableData) -> None:
        """Test sort by name."""
        table.sort(SortColumn("NAME", True))
        assert _ids(table) == ["dev/api", "prod/db", "prod/web"]
        assert table.find_row("prod/web") is table.row_at(2)

    def test_sort_by_age_uses_durations(self, table: TableData) -> None:
        """Test sort by age uses durations."""
        table.sort(SortColumn("AGE", True))
        assert _ids(table) == ["dev/api", "prod/db", "prod/web"]
        table.sort(SortColumn("AGE", False))
        assert _ids(table) == ["prod/web", "prod/db", "dev/api"]

    def test_sort_by_metric(self, table: TableData) -> None:
        """Test sort by metric."""
        table.sort(SortColumn("MEM", False))
        assert _ids(table) == ["dev/api", "prod/web", "prod/db"]

    def test_sort_by_wide_column(self, table: TableData) -> None:
        """Test sort by wide column."""
        table.sort(SortColumn("NODE", True))
        assert _ids(table) == ["dev/api", "prod/web", "prod/db"]

    def test_duplicate_values_tie_break_on_id(self, table: TableData) -> None:
        """Test duplicate values tie break on id."""
        table.sort(SortColumn("STATUS", False))
        first = _ids(table)
        table.sort(SortColumn("STATUS", False))
        assert _ids(table) == first == ["dev/api", "prod/web", "prod/db"]

    def test_unknown_column_is_noop(self, table: TableData) -> None:
        """Test unknown column is noop."""
        before = _ids(table)
        table.sort(SortColumn("BOGUS", True))
        table.sort(SortColumn())
        assert _ids(table) == before


@pytest.mark.unit
@pytest.mark.fast
class TestComputeSortCol:
    """Tests for TableData.compute_sort_col precedence."""

    def test_no_settings_prefers_user_choice(self, table: TableData) -> None:
        """Test no settings prefers user choice."""
        sc = SortColumn("STATUS", False)
        assert table.compute_sort_col(None, sc, False) == sc
        assert table.compute_sort_col(ViewSetting(), sc, False) == sc

    def test_no_settings_all_namespaces_defaults_to_namespace(self, table: TableData) -> None:
        """Test no settings all namespaces defaults to namespace."""
        assert table.compute_sort_col(None, SortColumn(), False) == SortColumn("NAMESPACE", True)

    def test_no_settings_single_namespace_defaults_to_name(self) -> None:
        """Test no settings single namespace defaults to name."""
        table = TableData("v1/pods", "prod", Header.of("NAME", "STATUS"))
        assert table.compute_sort_col(None, SortColumn(), False) == SortColumn("NAME", True)

    def test_default_falls_back_to_first_column(self) -> None:
        """Test default falls back to first column."""
        table = TableData("v1/events", "prod", Header.of("REASON", "MESSAGE"))
        assert table.compute_sort_col(None, SortColumn(), False) == SortColumn("REASON", True)
        everywhere = TableData("v1/events", "all", Header.of("REASON", "MESSAGE"))
        assert everywhere.compute_sort_col(None, SortColumn(), False) == SortColumn("REASON", True)

    def test_no_header_keeps_request(self) -> None:
        """Test no header keeps request."""
        table = TableData("v1/pods", "prod")
        assert table.compute_sort_col(None, SortColumn(), False) == SortColumn()

    def test_persisted_settings_win_without_manual_override(self, table: TableData) -> None:
        """Test persisted settings win without manual override."""
        vs = ViewSetting(sort_column="AGE:desc")
        assert table.compute_sort_col(vs, SortColumn("NAME", True), False) == SortColumn(
            "AGE", False
        )

    def test_manual_override_beats_persisted_settings(self, table: TableData) -> None:
        """Test manual override beats persisted settings."""
        vs = ViewSetting(sort_column="AGE:desc")
        sc = SortColumn("NAME", True)
        assert table.compute_sort_col(vs, sc, True) == sc

    def test_persisted_columns_only_keeps_request(self, table: TableData) -> None:
        """Test persisted columns only keeps request."""
        vs = ViewSetting(columns=["NAME"])
        sc = SortColumn("STATUS", True)
        assert table.compute_sort_col(vs, sc, False) == sc
