"""Base HTTP client for Management API communication.

This module holds everything the synchronous and asynchronous transports
share: URL and header building, error mapping and the retry policy.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..auth.api_token import APITokenAuth
from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    FormatError,
    KontentError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)
from ..models.errors import ErrorResponse
from ..protocols import AuthProvider, ConfigProvider

logger = logging.getLogger(__name__)

# Methods that may be retried; POST and PATCH are sent once.
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE"})


class BaseClient:
    """Base HTTP client for Management API operations.

    This class provides the foundation for both synchronous and asynchronous
    transports with:
    - Bearer authentication via an AuthProvider
    - Environment-scoped URL building
    - Error handling and exception mapping
    - Retry of idempotent requests

    Not intended to be used directly - use SyncClient or AsyncClient instead.
    """

    def __init__(self, config: ConfigProvider, auth: AuthProvider | None = None) -> None:
        """Initialize the base client.

        Args:
            config: Configuration with environment id, API key and options
            auth: Authentication provider (defaults to bearer API key auth)

        Raises:
            ValueError: If no usable API key is configured
        """
        self.config = config
        self.base_url = config.get_base_url().rstrip("/")
        self.environment_id = config.environment_id
        self.auth: AuthProvider = auth or APITokenAuth(config.get_api_key())

        if not self.auth.validate_token():
            raise ValueError("API key is required and cannot be empty")

        logger.info(
            f"Initialized Management API client for {self.base_url} "
            f"(environment: {self.environment_id})"
        )

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers with authentication.

        Args:
            extra_headers: Additional headers to include

        Returns:
            Complete headers dictionary
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self.auth.get_headers(),
        }

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, endpoint: str) -> str:
        """Build full URL for an environment-scoped endpoint.

        Args:
            endpoint: Endpoint path relative to the environment (e.g. "languages/codename/en-US")

        Returns:
            Complete URL
        """
        endpoint = endpoint.strip("/")
        return f"{self.base_url}/projects/{self.environment_id}/{endpoint}"

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses by raising appropriate exceptions.

        Args:
            response: HTTPX response object

        Raises:
            Appropriate KontentError subclass based on status code
        """
        status_code = response.status_code

        try:
            error = ErrorResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            error = ErrorResponse(message=response.text or f"HTTP {status_code}")

        error_message = error.message or f"HTTP {status_code}"
        error_details: dict[str, Any] = {
            "request_id": error.request_id,
            "error_code": error.error_code,
        }

        if status_code in (400, 422):
            raise ValidationError(
                f"Validation error: {error_message}",
                status_code=status_code,
                details=error_details,
                validation_errors=error.validation_errors,
            )
        elif status_code == 401:
            raise AuthenticationError(
                f"Authentication failed: {error_message}", status_code=401, details=error_details
            )
        elif status_code == 403:
            raise AuthorizationError(
                f"Authorization failed: {error_message}", status_code=403, details=error_details
            )
        elif status_code == 404:
            raise NotFoundError(
                f"Resource not found: {error_message}", status_code=404, details=error_details
            )
        elif status_code == 409:
            raise ConflictError(
                f"Conflict: {error_message}", status_code=409, details=error_details
            )
        elif status_code == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            raise RateLimitError(
                f"Rate limit exceeded: {error_message}",
                retry_after=retry_seconds,
                details=error_details,
            )
        elif 500 <= status_code < 600:
            raise ServerError(
                f"Server error: {error_message}",
                status_code=status_code,
                details=error_details,
            )
        else:
            raise KontentError(
                f"Unexpected error (HTTP {status_code}): {error_message}",
                status_code=status_code,
                details=error_details,
            )

    def _parse_json(self, response: httpx.Response) -> Any:
        """Decode a successful response body.

        Returns:
            Decoded JSON, or None for empty bodies (e.g. 204 No Content)

        Raises:
            FormatError: If the body is not JSON
        """
        if response.status_code == 204 or not response.content:
            logger.debug(f"Response: {response.status_code} (no content)")
            return None

        try:
            data = response.json()
        except ValueError as e:
            content_type = response.headers.get("content-type", "unknown")
            body_preview = response.text[:500] if response.text else ""
            raise FormatError(
                f"Received non-JSON response (content-type: {content_type})",
                status_code=response.status_code,
                details={"body_preview": body_preview},
            ) from e

        logger.debug(f"Response: {response.status_code}")
        return data

    def _is_retryable(self, error: BaseException) -> bool:
        if isinstance(error, TransportError):
            return True
        if isinstance(error, ServerError):
            return error.status_code in self.config.retry.retry_on_status
        return False

    def _create_retry_decorator(self) -> Any:
        """Create a retry decorator based on configuration.

        Returns:
            Configured tenacity retry decorator
        """
        retry_config = self.config.retry

        return retry(
            stop=stop_after_attempt(retry_config.max_attempts),
            wait=wait_exponential(
                multiplier=retry_config.initial_wait,
                exp_base=retry_config.exponential_base,
                max=retry_config.max_wait,
            ),
            retry=retry_if_exception(self._is_retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    @staticmethod
    def _should_retry(method: str) -> bool:
        return method.upper() in IDEMPOTENT_METHODS
