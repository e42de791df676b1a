"""Utility functions for markup parsing operations.

This module provides helper functions for whitespace classification,
source position arithmetic and template detection.
"""

import re
from typing import List, Pattern, Sequence, Tuple

from .constants import ASCII_WHITESPACE


class TextUtils:
    """Text processing utilities."""

    @staticmethod
    def is_whitespace(text: str) -> bool:
        """Check if text consists only of HTML whitespace.

        Args:
            text: Raw text content

        Returns:
            True for empty strings and whitespace-only strings
        """
        return all(char in ASCII_WHITESPACE for char in text)

    @staticmethod
    def split_tokens(value: str) -> List[str]:
        """Split a space-separated token list, dropping empty entries.

        Args:
            value: Attribute value such as a class list

        Returns:
            Tokens in source order
        """
        return [token for token in re.split(r'[ \t\n\f\r]+', value) if token]


class PositionUtils:
    """Source position utilities. Lines and columns are 1-based."""

    @staticmethod
    def advance(line: int, col: int, text: str, offset: int) -> Tuple[int, int]:
        """Compute the position reached after `offset` characters of `text`.

        Args:
            line: Line where `text` starts
            col: Column where `text` starts
            text: Source text starting at (line, col)
            offset: Character offset into `text`

        Returns:
            (line, col) of the character at `offset`
        """
        prefix = text[:offset]
        newlines = prefix.count('\n')
        if newlines == 0:
            return line, col + offset
        return line + newlines, offset - prefix.rfind('\n')


class TemplateUtils:
    """Detection of templated (dynamic) attribute values."""

    @staticmethod
    def compile_patterns(patterns: Sequence[str]) -> List[Pattern[str]]:
        return [re.compile(pattern, re.DOTALL) for pattern in patterns]

    @staticmethod
    def is_dynamic(value: str, patterns: Sequence[Pattern[str]]) -> bool:
        """Check if a value contains template syntax.

        Args:
            value: Raw attribute value
            patterns: Compiled template patterns

        Returns:
            True if any pattern matches
        """
        return any(pattern.search(value) for pattern in patterns)
