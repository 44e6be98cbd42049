"""Filter string parsing.

A raw filter string typed by the user is parsed once into a ``FilterSpec``
and the table dispatches on its ``kind``:

- ``""``                      -> NONE
- ``-l app=nginx`` / ``app=x`` -> LABEL_SELECTOR (applied server side)
- ``-f query``                -> FUZZY
- anything else               -> REGEX, inverted when prefixed with ``!``
"""

from __future__ import annotations

from dataclasses import dataclass

from kubetable.constants.enums import FilterKind
from kubetable.constants.patterns import (
    FUZZY_PATTERN,
    INVERSE_PATTERN,
    LABEL_PREFIX_PATTERN,
    LABEL_SELECTOR_PATTERN,
)
from kubetable.constants.values import INVERSE_PREFIX, LABEL_KV_SEPARATOR


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Parsed filter string."""

    kind: FilterKind
    query: str = ""
    invert: bool = False


def is_label_selector(raw: str) -> bool:
    """Check whether a filter string is a label selector expression."""
    if not raw or not raw.strip():
        return False
    if LABEL_PREFIX_PATTERN.match(raw):
        return True
    return LABEL_KV_SEPARATOR in raw and bool(LABEL_SELECTOR_PATTERN.match(raw))


def fuzzy_query(raw: str) -> str | None:
    """Return the fuzzy query of a ``-f`` filter, None for other filters."""
    match = FUZZY_PATTERN.match(raw)
    if match is None:
        return None
    query = match.group(1).strip()
    return query or None


def is_inverse_selector(raw: str) -> bool:
    """Check whether a regex filter asks for non-matching rows."""
    return bool(INVERSE_PATTERN.match(raw))


def parse_filter(raw: str, invert: bool = False) -> FilterSpec:
    """Parse a raw filter string into a tagged ``FilterSpec``.

    Args:
        raw: The filter string as typed.
        invert: Explicit inversion request; a leading ``!`` also inverts.

    Returns:
        The parsed filter. Label selectors keep the selector text (without
        any ``-l`` prefix) as their query.
    """
    if not raw or not raw.strip():
        return FilterSpec(FilterKind.NONE)

    if is_label_selector(raw):
        prefixed = LABEL_PREFIX_PATTERN.match(raw)
        query = prefixed.group(1) if prefixed else raw
        return FilterSpec(FilterKind.LABEL_SELECTOR, query.strip())

    query = fuzzy_query(raw)
    if query is not None:
        return FilterSpec(FilterKind.FUZZY, query)

    if is_inverse_selector(raw):
        return FilterSpec(FilterKind.REGEX, raw[len(INVERSE_PREFIX):], invert=True)
    return FilterSpec(FilterKind.REGEX, raw, invert=invert)
