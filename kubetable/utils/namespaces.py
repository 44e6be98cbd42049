"""Namespace scope predicates."""

from kubetable.constants.values import CLUSTER_SCOPE, NAMESPACE_ALL, NAMESPACE_BLANK


def is_all_namespaces(namespace: str) -> bool:
    """Return True when the scope spans every namespace."""
    return namespace in (NAMESPACE_ALL, NAMESPACE_BLANK)


def is_cluster_scoped(namespace: str) -> bool:
    """Return True for cluster-wide (non-namespaced) resources."""
    return namespace == CLUSTER_SCOPE


def is_namespaced(namespace: str) -> bool:
    """Return True when the scope is a single concrete namespace."""
    return not is_all_namespaces(namespace) and not is_cluster_scoped(namespace)
