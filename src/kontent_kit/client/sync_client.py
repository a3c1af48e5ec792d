"""Synchronous HTTP transport for the Management API.

This module provides blocking I/O for scripts and applications that
don't require concurrency.
"""

import logging
from typing import Any

import httpx

from ..exceptions import ConnectionError as KontentConnectionError
from ..exceptions import TimeoutError as KontentTimeoutError
from ..protocols import AuthProvider, ConfigProvider, HTTPClient
from .base import BaseClient

logger = logging.getLogger(__name__)


class SyncClient(BaseClient):
    """Synchronous HTTP transport for the Management API.

    Example:
        ```python
        from kontent_kit import ManagementConfig
        from kontent_kit.client import SyncClient

        config = ManagementConfig(
            environment_id="00000000-0000-0000-0000-000000000000",
            api_key="your-key",
        )

        with SyncClient(config) as client:
            languages = client.get("languages")
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: HTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        """Initialize the synchronous client with dependency injection.

        Args:
            config: Configuration provider (typically ManagementConfig)
            http_client: HTTP client (defaults to httpx.Client with pooling)
            auth: Authentication provider (passed to BaseClient)
        """
        super().__init__(config, auth=auth)

        self._client: HTTPClient | httpx.Client = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.Client:
        """Create default HTTP client with connection pooling.

        Returns:
            Configured httpx.Client instance
        """
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    def __enter__(self) -> "SyncClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance
        (not injected from outside).
        """
        if self._owns_client:
            self._client.close()
        logger.info("Closed synchronous Management API client")

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the Management API.

        GET, PUT and DELETE are retried according to the retry configuration;
        POST and PATCH are sent exactly once.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            endpoint: Endpoint path relative to the environment
            params: URL query parameters
            json: JSON request body (object or array)
            headers: Additional headers

        Returns:
            Decoded response JSON, or None for empty responses

        Raises:
            KontentError: On API errors
            ConnectionError: On connection failures
            TimeoutError: On request timeout
        """

        def _do_request() -> Any:
            url = self._build_url(endpoint)
            request_headers = self._get_headers(headers)

            logger.debug(f"{method} {url} params={params}")

            try:
                response = self._client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json,
                    headers=request_headers,
                )
            except httpx.TimeoutException as e:
                raise KontentTimeoutError(
                    f"Request timed out after {self.config.timeout}s: {e}"
                ) from e
            except httpx.TransportError as e:
                raise KontentConnectionError(f"Failed to connect to {self.base_url}: {e}") from e

            if not response.is_success:
                self._handle_error_response(response)

            return self._parse_json(response)

        if self._should_retry(method):
            return self._create_retry_decorator()(_do_request)()
        return _do_request()

    def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request."""
        return self.request("GET", endpoint, params=params, headers=headers)

    def post(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a POST request."""
        return self.request("POST", endpoint, json=json, headers=headers)

    def put(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a PUT request."""
        return self.request("PUT", endpoint, json=json, headers=headers)

    def patch(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a PATCH request."""
        return self.request("PATCH", endpoint, json=json, headers=headers)

    def delete(self, endpoint: str, headers: dict[str, str] | None = None) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", endpoint, headers=headers)
