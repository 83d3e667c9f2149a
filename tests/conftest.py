"""
conftest.py - Shared fixtures and pytest configuration.
"""

import logging
from unittest.mock import Mock

import pytest

from fixtures.scaler_fixtures import (
    mock_opensearch_client,
    mock_search_client,
    resolved_metadata,
    scaler_config,
    search_response,
    trigger_metadata,
)


@pytest.fixture
def logger():
    """ScalerLogger double recording every call."""
    return Mock(spec=["info", "error", "debug"])


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore root logging handlers after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
