"""Utility modules for the kubetable engine."""

from kubetable.utils.rw_lock import ReadWriteLock

__all__ = ["ReadWriteLock"]
