from __future__ import annotations

import re
from typing import Any, Dict, Pattern, Tuple


class Str:
    """Laravel-style string helper class."""

    # Cache for compiled regex patterns
    _patterns: Dict[str, Pattern[str]] = {}

    # Converted values, keyed by (value, delimiter) / (value, lc_first)
    _snake_cache: Dict[Tuple[str, str], str] = {}
    _studly_cache: Dict[Tuple[str, bool], str] = {}

    @classmethod
    def _pattern(cls, pattern: str) -> Pattern[str]:
        """Compile and cache a regex pattern."""
        if pattern not in cls._patterns:
            cls._patterns[pattern] = re.compile(pattern)
        return cls._patterns[pattern]

    @classmethod
    def snake(cls, value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake case.

        Values made only of lowercase letters are returned as-is. Otherwise
        whitespace is removed and the delimiter is inserted before every
        uppercase letter that does not start the string.
        """
        key = (value, delimiter)
        if key in cls._snake_cache:
            return cls._snake_cache[key]

        result = value
        if not cls._pattern(r'[a-z]+').fullmatch(value):
            result = cls._pattern(r'\s+').sub('', result)
            result = cls._pattern(r'(.)(?=[A-Z])').sub(
                lambda match: match.group(1) + delimiter, result
            ).lower()

        cls._snake_cache[key] = result
        return result

    @classmethod
    def studly(cls, value: str, lc_first: bool = False) -> str:
        """Convert a value to studly caps case, optionally lowering the first letter."""
        key = (value, lc_first)
        if key in cls._studly_cache:
            return cls._studly_cache[key]

        # Uppercase the first letter of every word, like ucwords()
        words = value.replace('-', ' ').replace('_', ' ')
        words = cls._pattern(r'(^|\s)(\S)').sub(
            lambda match: match.group(1) + match.group(2).upper(), words
        )
        if lc_first:
            words = cls.lcfirst(words)

        result = words.replace(' ', '')
        cls._studly_cache[key] = result
        return result

    @classmethod
    def camel(cls, value: str) -> str:
        """Convert a value to camel case."""
        return cls.studly(value, lc_first=True)

    @staticmethod
    def lcfirst(string: str) -> str:
        """Make a string's first character lowercase."""
        if not string:
            return string
        return string[0].lower() + string[1:]

    @staticmethod
    def ucfirst(string: str) -> str:
        """Make a string's first character uppercase."""
        if not string:
            return string
        return string[0].upper() + string[1:]

    @staticmethod
    def class_basename(value: Any) -> str:
        """Get the class "basename" of the given object or class."""
        cls = value if isinstance(value, type) else type(value)
        return cls.__name__

    @classmethod
    def flush_cache(cls) -> None:
        """Forget all cached conversions."""
        cls._snake_cache.clear()
        cls._studly_cache.clear()
