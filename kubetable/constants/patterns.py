"""Regex patterns for filter and value parsing."""

import re

# One label requirement: !key, key, key=value, key==value or key!=value
_LABEL_TERM = r"(?:![A-Za-z0-9][\w./-]*|[A-Za-z0-9][\w./-]*\s*(?:(?:==|!=|=)\s*[\w.-]*)?)"

FUZZY_PATTERN = re.compile(r"\A-f\s*(.+)\Z")
LABEL_PREFIX_PATTERN = re.compile(r"\A-l\s+(.+)\Z")
LABEL_SELECTOR_PATTERN = re.compile(rf"\A\s*{_LABEL_TERM}(?:\s*,\s*{_LABEL_TERM})*\s*\Z")
INVERSE_PATTERN = re.compile(r"\A!")
DURATION_TOKEN_PATTERN = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|y|d|h|m|s)")

__all__ = [
    "DURATION_TOKEN_PATTERN",
    "FUZZY_PATTERN",
    "INVERSE_PATTERN",
    "LABEL_PREFIX_PATTERN",
    "LABEL_SELECTOR_PATTERN",
]
