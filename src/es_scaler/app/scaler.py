"""
Elasticsearch scaler - Activity signal and external metric from a search template.

Each poll runs the search template once, reads the configured value out of
the response and hands it to the host. No state is kept between polls: a
host asking for both is_active() and get_metrics() in the same cycle pays
two round trips.
"""

from __future__ import annotations

from typing import Any

from ..components import build_query, get_value_from_search
from ..config import resolve_metadata
from ..domain import (
    ExternalMetricValue,
    MetricSpec,
    ResolvedMetadata,
    ScalerConfig,
    ScalerError,
)
from ..infrastructure import OpenSearchTemplateClient, StandardLogger
from ..interfaces import Scaler, ScalerLogger, SearchClient
from .decorators import log_call, timed

METRIC_PREFIX = "elasticsearch"


def normalize_string(value: str) -> str:
    """Replace characters not allowed in metric names with '-'."""
    for char in ("/", ".", ":", "%"):
        value = value.replace(char, "-")
    return value


def generate_metric_name(index: int, metric_name: str) -> str:
    return f"s{index}-{metric_name}"


def metric_name_for(meta: ResolvedMetadata) -> str:
    """Metric name, unique per (search template, target value) pair."""
    base = normalize_string(f"{METRIC_PREFIX}-{meta.search_template_name}")
    return generate_metric_name(meta.target_value, base)


class ElasticsearchScaler(Scaler):
    """
    Scaler backed by an Elasticsearch search template.

    Composes the resolved metadata, the query builder, the search client and
    the value extractor. The search client is owned by this instance alone.
    """

    def __init__(
        self,
        metadata: ResolvedMetadata,
        client: SearchClient,
        logger: ScalerLogger | None = None,
    ) -> None:
        self.metadata = metadata
        self._client = client
        self._logger = logger or StandardLogger(f"{__name__}.{metadata.search_template_name}")
        self._closed = False

    @classmethod
    def from_config(
        cls, config: ScalerConfig, logger: ScalerLogger | None = None
    ) -> "ElasticsearchScaler":
        """
        Resolve config, connect and ping the cluster.

        Raises:
            ConfigurationError: If config is invalid (no network I/O happens)
            ScalerConnectionError: If the cluster cannot be reached
        """
        logger = logger or StandardLogger(__name__)
        metadata = resolve_metadata(config)
        client = OpenSearchTemplateClient.connect(metadata, logger)
        return cls(metadata, client, logger)

    @timed("elasticsearch.query")
    def _get_query_result(self, timeout: float | None = None) -> int:
        query = build_query(self.metadata.search_template_name, self.metadata.parameters)
        body: Any = self._client.search_template(query, self.metadata.indexes, timeout=timeout)
        return get_value_from_search(body, self.metadata.value_location)

    @log_call()
    def is_active(self, timeout: float | None = None) -> bool:
        """
        True when the extracted value is strictly greater than zero.

        Errors propagate: a failed poll is not an inactive workload.
        """
        try:
            value = self._get_query_result(timeout=timeout)
        except ScalerError as exc:
            self._logger.error(f"Error inspecting elasticsearch: {exc}", exc)
            raise
        return value > 0

    def get_metric_spec(self) -> list[MetricSpec]:
        return [MetricSpec(name=metric_name_for(self.metadata), target=self.metadata.target_value)]

    @log_call()
    def get_metrics(
        self, metric_name: str, timeout: float | None = None
    ) -> list[ExternalMetricValue]:
        """
        Current value of the metric, as a single fresh sample.

        Raises:
            ScalerError: Exactly what is_active() would raise for the same poll
        """
        try:
            value = self._get_query_result(timeout=timeout)
        except ScalerError as exc:
            self._logger.error(f"Error inspecting elasticsearch: {exc}", exc)
            raise
        return [ExternalMetricValue(metric_name=metric_name, value=value)]

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._client.close()
        self._logger.debug("Elasticsearch scaler closed")

    def __enter__(self) -> "ElasticsearchScaler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ElasticsearchScaler({self.metadata.search_template_name!r})"


__all__ = [
    "ElasticsearchScaler",
    "generate_metric_name",
    "metric_name_for",
    "normalize_string",
]
