"""Resource parsing utilities for CPU, memory and generic quantities.

Provides functions to parse Kubernetes resource cells into sortable numbers:
- Quantity: CPU cores or memory bytes, or None when the cell holds no number
- Capacity: bytes, or None when the cell holds no size
"""

# Module-level constants to avoid re-creating on every function call.
# Binary suffixes must be checked before their one-letter decimal siblings.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
    ("k", 1000),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
    ("P", 1000**5),
    ("E", 1000**6),
)

_CPU_DIVISORS: tuple[tuple[str, int], ...] = (
    ("n", 1_000_000_000),
    ("u", 1_000_000),
    ("m", 1000),
)

# Decorations the renderers add to metric cells, e.g. "120m (12%)" or "50%".
_METRIC_NOISE = ("%",)


def parse_quantity(raw: str) -> float | None:
    """Parse a metric cell into a comparable number.

    "Not a number" is kept distinct from zero, so cells such as "n/a" or
    "<unknown>" can be ordered after real values. Memory suffixes are tried
    before CPU suffixes.
    Only the first whitespace-separated token is considered.
    """
    if not raw:
        return None
    token = str(raw).strip().split(" ", 1)[0]
    for noise in _METRIC_NOISE:
        token = token.replace(noise, "")
    if not token:
        return None

    value = _parse_bytes_or_none(token)
    if value is not None:
        return value
    return _parse_cpu_or_none(token)


def parse_capacity(raw: str) -> float | None:
    """Parse a capacity cell ("10Gi", "500M") into bytes, None when invalid."""
    if not raw:
        return None
    return _parse_bytes_or_none(str(raw).strip().split(" ", 1)[0])


def _parse_cpu_or_none(cpu_str: str) -> float | None:
    if not cpu_str:
        return None

    cpu_str = str(cpu_str).strip()
    for suffix, divisor in _CPU_DIVISORS:
        if cpu_str.endswith(suffix):
            try:
                return float(cpu_str[:-1]) / divisor
            except ValueError:
                return None

    try:
        return float(cpu_str)
    except ValueError:
        return None


def _parse_bytes_or_none(memory_str: str) -> float | None:
    if not memory_str:
        return None

    memory_str = str(memory_str).strip()
    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return float(memory_str[: -len(suffix)]) * mult
            except ValueError:
                return None

    try:
        return float(memory_str)
    except ValueError:
        return None
