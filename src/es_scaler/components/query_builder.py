"""
Query Builder - Request body for a templated search.
"""

from __future__ import annotations

from typing import Any, Iterable

from ..config.resolver import parse_parameter


def build_query(template_name: str, parameters: Iterable[str] = ()) -> dict[str, Any]:
    """
    Build the _search/template body for template_name.

    Each non-empty "key:value" token becomes a template parameter; a repeated
    key keeps its last value. "params" is left out entirely when there are no
    parameters, since some templates treat an empty map differently from none.

        build_query("jobs", []) -> {"id": "jobs"}
        build_query("jobs", ["a:b"]) -> {"id": "jobs", "params": {"a": "b"}}

    Raises:
        ConfigurationError: On a malformed token (resolved metadata never has one)
    """
    params: dict[str, str] = {}
    for token in parameters:
        if token:
            key, value = parse_parameter(token)
            params[key] = value

    query: dict[str, Any] = {"id": template_name}
    if params:
        query["params"] = params
    return query


__all__ = ["build_query"]
