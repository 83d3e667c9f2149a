"""
Domain - Immutable data model of the scaler.
"""

from .exceptions import (
    ConfigurationError,
    DeadlineExceeded,
    InvalidValueType,
    ScalerConnectionError,
    ScalerError,
)
from .metadata import ResolvedMetadata, ScalerConfig
from .metrics import AVERAGE_VALUE, ExternalMetricValue, MetricSpec

__all__ = [
    "AVERAGE_VALUE",
    "ConfigurationError",
    "DeadlineExceeded",
    "ExternalMetricValue",
    "InvalidValueType",
    "MetricSpec",
    "ResolvedMetadata",
    "ScalerConfig",
    "ScalerConnectionError",
    "ScalerError",
]
