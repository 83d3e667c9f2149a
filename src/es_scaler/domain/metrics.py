"""
Metric descriptors and values handed to the autoscaler host.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

AVERAGE_VALUE = "AverageValue"


@dataclass(frozen=True)
class MetricSpec:
    """External metric registered once with the host."""

    name: str
    target: int
    target_type: str = AVERAGE_VALUE


@dataclass(frozen=True)
class ExternalMetricValue:
    """One sample of an external metric."""

    metric_name: str
    value: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "AVERAGE_VALUE",
    "ExternalMetricValue",
    "MetricSpec",
]
