"""
Value Extractor - Reads the metric out of a search response.

Path syntax (a subset of gjson, the dialect scaler users already write):

    hits.total.value               nested keys
    hits.hits.0._source.pending    numeric segment indexes an array
    hits.hits[0]._source.pending   bracketed index, same thing
    hits.hits.#                    length of an array
    aggregations.by\\.host.value   backslash escapes a literal dot

Strings holding an integer are accepted, numbers are truncated toward zero,
anything else (missing, null, boolean, array, object) is an error. A missing
value is never read as 0.
"""

from __future__ import annotations

import json
import math
from typing import Any

from ..config.parsing import parse_int
from ..domain import InvalidValueType

_MISSING = object()

# Type names reported in errors
NULL = "Null"
TRUE = "True"
FALSE = "False"
JSON = "JSON"


def parse_path(expression: str) -> list[str]:
    """Split a path expression into its key / index segments."""
    segments: list[str] = []
    current: list[str] = []
    escaped = False
    i = 0
    while i < len(expression):
        char = expression[i]
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            segments.append("".join(current))
            current = []
        elif char == "[":
            end = expression.find("]", i)
            if end == -1:
                current.append(char)
            else:
                if current:
                    segments.append("".join(current))
                    current = []
                segments.append(expression[i + 1 : end].strip())
                i = end
                # "a[0].b": the dot after a bracket is only a separator
                if expression[i + 1 : i + 2] == ".":
                    i += 1
                if i + 1 >= len(expression):
                    return segments
        else:
            current.append(char)
        i += 1
    segments.append("".join(current))
    return segments


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        if segment == "#":
            return len(node)
        if segment.isdigit() and segment.isascii():
            index = int(segment)
            return node[index] if index < len(node) else _MISSING
    return _MISSING


def lookup(document: Any, expression: str) -> Any:
    """Value at expression in document, or None when the path does not resolve."""
    if not expression:
        return None
    node = document
    for segment in parse_path(expression):
        node = _step(node, segment)
        if node is _MISSING:
            return None
    return node


def _decode(body: Any) -> Any:
    if isinstance(body, (bytes, bytearray, str)):
        try:
            if not isinstance(body, str):
                body = bytes(body).decode("utf-8")
            return json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InvalidValueType("invalid JSON response") from exc
    return body


def type_name(value: Any) -> str:
    """Name of a decoded JSON value's type as reported in errors."""
    if value is None:
        return NULL
    if value is True:
        return TRUE
    if value is False:
        return FALSE
    if isinstance(value, str):
        return "String"
    if isinstance(value, (int, float)):
        return "Number"
    return JSON


def get_value_from_search(body: Any, value_location: str) -> int:
    """
    Extract the integer at value_location from a search response.

    Args:
        body: Raw response (bytes or str) or an already decoded document
        value_location: Path expression, see module docstring

    Raises:
        InvalidValueType: Citing the string or the type found at the location
    """
    value = lookup(_decode(body), value_location)

    if isinstance(value, str):
        try:
            return parse_int(value)
        except ValueError:
            raise InvalidValueType(value) from None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueType(type_name(value))

    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueType(str(value))
    return int(value)


__all__ = [
    "get_value_from_search",
    "lookup",
    "parse_path",
    "type_name",
]
