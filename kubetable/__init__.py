"""kubetable - live resource table synchronization engine."""

__version__ = "0.1.0"
