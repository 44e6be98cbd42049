"""Tests for Header and HeaderColumn."""

from __future__ import annotations

import pytest

from kubetable.constants.enums import ColumnRole
from kubetable.models.table.header import Header, HeaderColumn


@pytest.fixture
def pod_header() -> Header:
    """Header shaped like an all-namespaces pod view."""
    return Header.of(
        "NAMESPACE",
        "NAME",
        "STATUS",
        HeaderColumn("CPU", role=ColumnRole.METRIC),
        HeaderColumn("IP", wide=True),
        "VALID",
        "LABELS",
        HeaderColumn.age(),
    )


@pytest.mark.unit
@pytest.mark.fast
class TestHeaderColumn:
    """Tests for HeaderColumn."""

    def test_defaults(self) -> None:
        """Test HeaderColumn defaults."""
        col = HeaderColumn("NAME")
        assert col.role is ColumnRole.TEXT
        assert col.filterable is True
        assert col.wide is False
        assert col.volatile is False

    def test_age_column(self) -> None:
        """Test the conventional AGE column."""
        col = HeaderColumn.age()
        assert col.name == "AGE"
        assert col.is_time
        assert not col.filterable
        assert col.volatile

    def test_role_properties(self) -> None:
        """Test role convenience properties."""
        assert HeaderColumn("MEM", role=ColumnRole.METRIC).is_metric
        assert HeaderColumn("SIZE", role=ColumnRole.CAPACITY).is_capacity


@pytest.mark.unit
@pytest.mark.fast
class TestHeader:
    """Tests for Header lookups and projections."""

    def test_duplicate_names_rejected(self) -> None:
        """Test duplicate names rejected."""
        with pytest.raises(ValueError):
            Header.of("NAME", "NAME")

    def test_index_of_skips_wide_unless_requested(self, pod_header: Header) -> None:
        """Test index of skips wide unless requested."""
        assert pod_header.index_of("NAME", False) == 1
        assert pod_header.index_of("IP", False) is None
        assert pod_header.index_of("IP", True) == 4
        assert pod_header.index_of("name", True) is None

    def test_column_names(self, pod_header: Header) -> None:
        """Test column names with and without wide columns."""
        assert "IP" not in pod_header.column_names(False)
        assert "IP" in pod_header.column_names(True)

    def test_special_columns(self, pod_header: Header) -> None:
        """Test VALID, AGE and volatile column lookups."""
        assert pod_header.valid_col_index() == 5
        assert pod_header.age_col_index() == 7
        assert pod_header.volatile_indices() == frozenset({7})
        assert pod_header[7].is_time

    def test_filter_col_indices_all_namespaces(self, pod_header: Header) -> None:
        """Test filter col indices all namespaces."""
        indices = pod_header.filter_col_indices("all", True)
        assert 0 in indices
        assert 7 not in indices
        assert 4 in indices

    def test_filter_col_indices_single_namespace(self, pod_header: Header) -> None:
        """Test filter col indices single namespace."""
        indices = pod_header.filter_col_indices("default", False)
        assert 0 not in indices
        assert 4 not in indices
        assert 1 in indices

    def test_diff(self, pod_header: Header) -> None:
        """Test header comparison."""
        assert not pod_header.diff(pod_header.clone())
        assert pod_header.diff(Header.of("NAME"))
        retyped = Header.of("NAME", HeaderColumn("STATUS", role=ColumnRole.METRIC))
        assert retyped.diff(Header.of("NAME", "STATUS"))
        assert Header.of("A", "B").diff(Header.of("B", "A"))

    def test_clear(self, pod_header: Header) -> None:
        """Test clearing returns an empty header."""
        cleared = pod_header.clear()
        assert len(cleared) == 0
        assert not cleared
        assert len(pod_header) == 8

    def test_labelize(self, pod_header: Header) -> None:
        """Test label projection of the header."""
        labelized = pod_header.labelize([0, 1], ["app", "tier"])
        assert labelized.column_names(True) == ["NAMESPACE", "NAME", "app", "tier"]

    def test_customize(self, pod_header: Header) -> None:
        """Test column selection and ordering."""
        custom, indices = pod_header.customize(["NAME", "IP", "BOGUS", "STATUS"], False)
        assert custom.column_names(False) == ["NAME", "IP", "STATUS"]
        assert indices == [1, 4, 2]

    def test_customize_without_columns(self, pod_header: Header) -> None:
        """Test customize without columns."""
        custom, indices = pod_header.customize([], False)
        assert "IP" not in custom.column_names(True)
        assert 4 not in indices
        wide, wide_indices = pod_header.customize([], True)
        assert wide == pod_header
        assert wide_indices == list(range(8))
