"""Tests for resource parser utilities."""

from __future__ import annotations

import pytest

from kubetable.utils.resource_parser import parse_capacity, parse_quantity


@pytest.mark.unit
@pytest.mark.fast
class TestParseQuantityCpu:
    """Tests for parse_quantity with CPU cells."""

    def test_millicores(self) -> None:
        """Test parsing CPU in millicores."""
        assert parse_quantity("100m") == 0.1
        assert parse_quantity("500m") == 0.5
        assert parse_quantity("1000m") == 1.0

    def test_micro_and_nano_cores(self) -> None:
        """Test parsing CPU in microcore/nanocore units."""
        assert parse_quantity("500000u") == 0.5
        assert parse_quantity("500000000n") == 0.5

    def test_decimal(self) -> None:
        """Test parsing CPU in decimal."""
        assert parse_quantity("1.5") == 1.5
        assert parse_quantity("2") == 2.0

    def test_with_whitespace(self) -> None:
        """Test parsing CPU string with whitespace."""
        assert parse_quantity(" 100m ") == 0.1


@pytest.mark.unit
@pytest.mark.fast
class TestParseQuantityMemory:
    """Tests for parse_quantity with memory cells."""

    def test_binary_suffixes(self) -> None:
        """Test converting binary suffixes to bytes."""
        assert parse_quantity("1024Ki") == 1024 * 1024
        assert parse_quantity("512Mi") == 512 * 1024 * 1024
        assert parse_quantity("1Gi") == 1024**3

    def test_decimal_suffixes(self) -> None:
        """Test converting decimal suffixes to bytes."""
        assert parse_quantity("500M") == 500 * 1000**2
        assert parse_quantity("2G") == 2 * 1000**3

    def test_equal_sizes_spelled_differently(self) -> None:
        """Test that 1Gi and 1024Mi parse to the same magnitude."""
        assert parse_quantity("1Gi") == parse_quantity("1024Mi")


@pytest.mark.unit
@pytest.mark.fast
class TestParseQuantityInvalid:
    """Tests for cells that hold no number."""

    def test_missing_is_distinct_from_zero(self) -> None:
        """Test that non-numeric cells parse to None, not 0."""
        assert parse_quantity("n/a") is None
        assert parse_quantity("") is None
        assert parse_quantity(None) is None  # type: ignore
        assert parse_quantity("lotsMi") is None
        assert parse_quantity("0") == 0.0

    def test_percentages(self) -> None:
        """Test that percent signs are stripped."""
        assert parse_quantity("12%") == 12.0
        assert parse_quantity("%") is None

    def test_uses_first_token(self) -> None:
        """Test decorated cells such as '120m (12%)'."""
        assert parse_quantity("120m (12%)") == pytest.approx(0.12)


@pytest.mark.unit
@pytest.mark.fast
class TestParseCapacity:
    """Tests for parse_capacity function."""

    def test_sizes(self) -> None:
        """Test capacity cells in binary, decimal and plain bytes."""
        assert parse_capacity("10Gi") == 10 * 1024**3
        assert parse_capacity("500M") == 500 * 1000**2
        assert parse_capacity("4096") == 4096.0

    def test_invalid(self) -> None:
        """Test capacity cells that hold no size."""
        assert parse_capacity("<none>") is None
        assert parse_capacity("") is None
        assert parse_capacity("250m") is None
