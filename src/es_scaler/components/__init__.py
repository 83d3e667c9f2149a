"""
Components - Pure, I/O-free steps of the polling pipeline.
"""

from .query_builder import build_query
from .value_extractor import get_value_from_search, lookup, parse_path

__all__ = [
    "build_query",
    "get_value_from_search",
    "lookup",
    "parse_path",
]
