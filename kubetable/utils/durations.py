"""Duration parsing for age-style columns ("5d3h", "12m", "2y30d")."""

from kubetable.constants.patterns import DURATION_TOKEN_PATTERN

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
    "y": 365 * 86400.0,
}


def parse_duration(raw: str) -> float | None:
    """Parse a human duration into seconds.

    Returns None when the value is not a duration at all (e.g. "<unknown>",
    "n/a" or an empty cell) so callers can order such cells last.
    """
    if not raw:
        return None

    text = raw.strip()
    total = 0.0
    pos = 0
    for match in DURATION_TOKEN_PATTERN.finditer(text):
        if match.start() != pos:
            return None
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if pos == 0 or pos != len(text):
        return None
    return total
