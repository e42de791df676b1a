"""Shared helpers for rules."""

import fnmatch
import re
from typing import Any

REGEX_LITERAL_PATTERN = re.compile(r"^/(.+)/([imsx]*)$", re.DOTALL)
_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def to_pattern_list(value: Any) -> list[str]:
    """Normalize a string-or-list setting into its non-empty strings."""
    if value is None:
        return []
    items = [value] if isinstance(value, str) else list(value)
    return [item for item in items if isinstance(item, str) and item]


def match(text: str, pattern: str) -> bool:
    """Match text against `/regex/flags` or a glob pattern.

    A regex is searched anywhere in the text, as a JavaScript-style literal
    would be; a glob must cover the whole text and is case-sensitive.
    """
    regex = REGEX_LITERAL_PATTERN.match(pattern)
    if regex:
        flags = 0
        for flag in regex.group(2):
            flags |= _FLAGS[flag]
        try:
            return re.search(regex.group(1), text, flags) is not None
        except re.error:
            return False
    return fnmatch.fnmatchcase(text, pattern)
