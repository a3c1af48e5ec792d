"""Protocols for dependency injection.

The clients depend on these structural types rather than on concrete
classes, so tests and callers can swap in their own HTTP client, auth
provider or configuration object.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AuthProvider(Protocol):
    """Supplies authentication headers for each request."""

    def get_headers(self) -> dict[str, str]:
        """Return headers to merge into the outgoing request."""
        ...

    def validate_token(self) -> bool:
        """Return True if the credentials are usable."""
        ...


@runtime_checkable
class ConfigProvider(Protocol):
    """Configuration consumed by the management clients."""

    def get_base_url(self) -> str: ...

    def get_api_key(self) -> str: ...

    @property
    def environment_id(self) -> str: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...

    @property
    def retry(self) -> Any: ...


@runtime_checkable
class HTTPClient(Protocol):
    """Blocking HTTP client (httpx.Client compatible)."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...

    def close(self) -> None: ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Non-blocking HTTP client (httpx.AsyncClient compatible)."""

    async def request(self, method: str, url: str, **kwargs: Any) -> Any: ...

    async def aclose(self) -> None: ...
