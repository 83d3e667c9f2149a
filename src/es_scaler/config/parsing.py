"""
Strict string parsers shared by the resolver and the value extractor.
"""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def split_and_trim(value: str, sep: str) -> list[str]:
    """
    Split value on sep and strip whitespace around every token.

    Empty tokens are kept in place:
        split_and_trim("  a ; b;c  ", ";") -> ["a", "b", "c"]
        split_and_trim("a,,b", ",") -> ["a", "", "b"]
    """
    return [token.strip() for token in value.split(sep)]


def parse_int(value: str) -> int:
    """
    Parse a base-10 integer with an optional sign.

    Unlike int(), surrounding whitespace, underscores and non-ASCII digits
    are rejected.

    Raises:
        ValueError: If value is not a plain integer literal
    """
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid syntax: {value!r}")
    return int(value)


def parse_bool(value: str) -> bool:
    """
    Parse a boolean literal ("true", "False", "1", "f", ...).

    Raises:
        ValueError: If value is not a recognised literal
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid syntax: {value!r}")


__all__ = [
    "parse_bool",
    "parse_int",
    "split_and_trim",
]
