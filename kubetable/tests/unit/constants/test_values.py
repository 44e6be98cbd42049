"""Unit tests for scalar constants in constants/values.py and constants/defaults.py."""

from __future__ import annotations

import pytest

from kubetable.constants import (
    CLUSTER_SCOPE,
    COL_AGE,
    IGNORE_VOLATILE_ON_UPDATE_DEFAULT,
    NAMESPACE_ALL,
    NAMESPACE_BLANK,
    VOLATILE_COLUMN_DEFAULT,
)
from kubetable.utils.namespaces import is_all_namespaces, is_cluster_scoped, is_namespaced


@pytest.mark.unit
@pytest.mark.fast
class TestNamespaceScopes:
    """Test namespace sentinels and their predicates."""

    def test_all_namespaces(self) -> None:
        """Test all-namespaces sentinels."""
        assert is_all_namespaces(NAMESPACE_ALL)
        assert is_all_namespaces(NAMESPACE_BLANK)
        assert not is_all_namespaces("default")

    def test_cluster_scope(self) -> None:
        """Test cluster scope sentinel."""
        assert is_cluster_scoped(CLUSTER_SCOPE)
        assert not is_namespaced(CLUSTER_SCOPE)

    def test_namespaced(self) -> None:
        """Test namespaced predicate."""
        assert is_namespaced("kube-system")
        assert not is_namespaced(NAMESPACE_ALL)


@pytest.mark.unit
@pytest.mark.fast
class TestDefaults:
    """Test reconciliation defaults."""

    def test_volatile_column_is_age(self) -> None:
        """Test volatile column is age."""
        assert VOLATILE_COLUMN_DEFAULT == COL_AGE

    def test_reconcile_keeps_volatile_columns_by_default(self) -> None:
        """Test reconcile keeps volatile columns by default."""
        assert IGNORE_VOLATILE_ON_UPDATE_DEFAULT is False
