"""
Infrastructure - Adapters to logging and the search engine.
"""

from .logger import StandardLogger, configure_logging
from .search_client import OpenSearchTemplateClient, build_client_kwargs

__all__ = [
    "OpenSearchTemplateClient",
    "StandardLogger",
    "build_client_kwargs",
    "configure_logging",
]
