"""
Search client adapter - Templated searches through opensearch-py.

opensearch-py speaks the Elasticsearch 7 REST API, _search/template included.
This adapter adds no retry: the host's polling loop owns that policy.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from opensearchpy import ConnectionTimeout, ImproperlyConfigured, OpenSearch, OpenSearchException

from ..domain import ConfigurationError, DeadlineExceeded, ResolvedMetadata, ScalerConnectionError
from ..interfaces import ScalerLogger, SearchClient
from .logger import StandardLogger


def build_client_kwargs(meta: ResolvedMetadata) -> dict[str, Any]:
    """Keyword arguments for OpenSearch() derived from the resolved metadata."""
    client_kwargs: dict[str, Any] = {"hosts": list(meta.addresses)}
    if meta.username:
        client_kwargs["http_auth"] = (meta.username, meta.password or "")
    if meta.unsafe_ssl:
        client_kwargs["verify_certs"] = False
        client_kwargs["ssl_assert_hostname"] = False
        client_kwargs["ssl_show_warn"] = False
    return client_kwargs


class OpenSearchTemplateClient(SearchClient):
    """Long-lived connection used by exactly one scaler instance."""

    def __init__(self, client: OpenSearch, logger: ScalerLogger | None = None) -> None:
        self._client = client
        self._logger = logger or StandardLogger(__name__)
        self._closed = False

    @classmethod
    def connect(
        cls, meta: ResolvedMetadata, logger: ScalerLogger | None = None
    ) -> "OpenSearchTemplateClient":
        """
        Create the client and check the cluster answers.

        Raises:
            ConfigurationError: If opensearch-py rejects the connection settings
            ScalerConnectionError: If the cluster cannot be reached
        """
        logger = logger or StandardLogger(__name__)
        try:
            client = OpenSearch(**build_client_kwargs(meta))
        except (ImproperlyConfigured, ValueError) as exc:
            logger.error(f"Found error when creating client: {exc}")
            raise ConfigurationError(
                f"error getting elasticsearch client: {exc}", field="addresses"
            ) from exc

        adapter = cls(client, logger)
        try:
            client.info()
        except OpenSearchException as exc:
            logger.error(f"Found error when pinging search engine: {exc}")
            adapter.close()
            raise ScalerConnectionError(
                f"error getting elasticsearch client: {exc}", cause=exc
            ) from exc
        logger.info(f"Connected to search engine at {', '.join(meta.addresses)}")
        return adapter

    def search_template(
        self,
        query: Mapping[str, Any],
        indexes: Sequence[str],
        timeout: float | None = None,
    ) -> Any:
        """
        Run the templated search scoped to indexes and return the response body.

        Raises:
            DeadlineExceeded: If the request outlived timeout
            ScalerConnectionError: On any other transport or search engine error
        """
        if self._closed:
            raise ScalerConnectionError("search client is closed")
        params: dict[str, Any] = {}
        if timeout is not None:
            params["request_timeout"] = timeout
        try:
            return self._client.search_template(body=dict(query), index=list(indexes), **params)
        except ConnectionTimeout as exc:
            self._logger.error(f"Elasticsearch query timed out: {exc}")
            raise DeadlineExceeded(f"elasticsearch query timed out: {exc}", cause=exc) from exc
        except OpenSearchException as exc:
            self._logger.error(f"Could not query elasticsearch: {exc}")
            raise ScalerConnectionError(f"could not query elasticsearch: {exc}", cause=exc) from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._client.close()


__all__ = [
    "OpenSearchTemplateClient",
    "build_client_kwargs",
]
