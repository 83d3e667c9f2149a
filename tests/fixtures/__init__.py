"""
Package fixtures - Reusable pytest fixtures.
"""

from .scaler_fixtures import (
    mock_opensearch_client,
    mock_search_client,
    resolved_metadata,
    scaler_config,
    search_response,
    trigger_metadata,
)

__all__ = [
    "mock_opensearch_client",
    "mock_search_client",
    "resolved_metadata",
    "scaler_config",
    "search_response",
    "trigger_metadata",
]
