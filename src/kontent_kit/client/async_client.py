"""Asynchronous HTTP transport for the Management API.

This module provides non-blocking I/O for applications built on
async/await.
"""

import logging
from typing import Any

import httpx

from ..exceptions import ConnectionError as KontentConnectionError
from ..exceptions import TimeoutError as KontentTimeoutError
from ..protocols import AsyncHTTPClient, AuthProvider, ConfigProvider
from .base import BaseClient

logger = logging.getLogger(__name__)


class AsyncClient(BaseClient):
    """Asynchronous HTTP transport for the Management API.

    Example:
        ```python
        import asyncio
        from kontent_kit import ManagementConfig
        from kontent_kit.client import AsyncClient

        async def main():
            config = ManagementConfig(
                environment_id="00000000-0000-0000-0000-000000000000",
                api_key="your-key",
            )

            async with AsyncClient(config) as client:
                languages = await client.get("languages")

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        """Initialize the asynchronous client with dependency injection.

        Args:
            config: Configuration provider (typically ManagementConfig)
            http_client: Async HTTP client (defaults to httpx.AsyncClient with pooling)
            auth: Authentication provider (passed to BaseClient)
        """
        super().__init__(config, auth=auth)

        self._client: AsyncHTTPClient | httpx.AsyncClient = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create default async HTTP client with connection pooling.

        Returns:
            Configured httpx.AsyncClient instance
        """
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance
        (not injected from outside).
        """
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed asynchronous Management API client")

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the Management API.

        GET, PUT and DELETE are retried according to the retry configuration;
        POST and PATCH are sent exactly once. Cancelling the awaiting task
        cancels the in-flight request.

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

        async def _do_request() -> Any:
            url = self._build_url(endpoint)
            request_headers = self._get_headers(headers)

            logger.debug(f"{method} {url} params={params}")

            try:
                response = await self._client.request(
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
            return await self._create_retry_decorator()(_do_request)()
        return await _do_request()

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request."""
        return await self.request("GET", endpoint, params=params, headers=headers)

    async def post(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a POST request."""
        return await self.request("POST", endpoint, json=json, headers=headers)

    async def put(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a PUT request."""
        return await self.request("PUT", endpoint, json=json, headers=headers)

    async def patch(self, endpoint: str, json: Any, headers: dict[str, str] | None = None) -> Any:
        """Make a PATCH request."""
        return await self.request("PATCH", endpoint, json=json, headers=headers)

    async def delete(self, endpoint: str, headers: dict[str, str] | None = None) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", endpoint, headers=headers)
