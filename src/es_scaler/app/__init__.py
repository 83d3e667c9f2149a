"""
App - Host-facing scaler and its call-tracing decorators.
"""

from .decorators import log_call, timed
from .scaler import ElasticsearchScaler, metric_name_for, normalize_string

__all__ = [
    "ElasticsearchScaler",
    "log_call",
    "metric_name_for",
    "normalize_string",
    "timed",
]
