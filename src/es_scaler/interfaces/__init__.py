"""
Interfaces (Protocol) - Contracts between the scaler, its collaborators and the host.

The host only depends on Scaler; the scaler only depends on SearchClient and
ScalerLogger, so each side can be swapped without touching the other.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..domain import ExternalMetricValue, MetricSpec, ScalerConfig


class ScalerLogger(Protocol):
    """Logging collaborator injected into each scaler instance."""

    def info(self, message: str) -> None:
        """Log an informational message."""
        ...

    def error(self, message: str, exception: BaseException | None = None) -> None:
        """Log an error, with traceback when an exception is given."""
        ...

    def debug(self, message: str) -> None:
        """Log a debug message."""
        ...


class SearchClient(Protocol):
    """Connection to the search engine, owned by one scaler instance."""

    def search_template(
        self,
        query: Mapping[str, Any],
        indexes: Sequence[str],
        timeout: float | None = None,
    ) -> Any:
        """
        Run a templated search scoped to indexes.

        Returns:
            The response body (bytes, str or decoded mapping)

        Raises:
            ScalerConnectionError: On any transport or search engine failure
        """
        ...

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


class Scaler(Protocol):
    """
    Capability set the autoscaler host drives.

    Construct, check activity, describe the metric, read the metric, close.
    """

    @classmethod
    def from_config(cls, config: ScalerConfig, logger: ScalerLogger | None = None) -> "Scaler":
        """Build a ready-to-poll scaler or raise before returning."""
        ...

    def is_active(self, timeout: float | None = None) -> bool:
        """True when there is scalable work right now."""
        ...

    def get_metric_spec(self) -> list[MetricSpec]:
        """Metrics this scaler publishes, with their targets."""
        ...

    def get_metrics(
        self, metric_name: str, timeout: float | None = None
    ) -> list[ExternalMetricValue]:
        """Current value of the named metric."""
        ...

    def close(self) -> None:
        """Release resources. Safe to call more than once."""
        ...


__all__ = [
    "Scaler",
    "ScalerLogger",
    "SearchClient",
]
