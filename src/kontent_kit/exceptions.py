"""Exception hierarchy for kontent-kit.

All errors raised by the SDK derive from KontentError, so callers can catch
a single type. Local errors (InvalidReferenceError, InvalidPatchOperationError)
are raised before any request is sent; remote errors map HTTP status codes.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models.errors import ValidationErrorDetail


class KontentError(Exception):
    """Base exception for all kontent-kit errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(KontentError):
    """Raised when the client configuration is invalid."""


class InvalidReferenceError(KontentError):
    """Raised when a resource reference is empty or malformed.

    Never reaches the network.
    """


class InvalidPatchOperationError(KontentError):
    """Raised when a patch operation is not legal for the target resource.

    Attributes:
        property_name: Property the offending operation targets
        op: Operation kind of the offending operation
    """

    def __init__(self, property_name: str, op: str, reason: str) -> None:
        self.property_name = property_name
        self.op = op
        self.reason = reason
        super().__init__(
            f"Invalid patch operation '{op}' on '{property_name}': {reason}",
            details={"property_name": property_name, "op": op},
        )


# Remote errors


class AuthenticationError(KontentError):
    """Raised on HTTP 401."""


class AuthorizationError(KontentError):
    """Raised on HTTP 403."""


class NotFoundError(KontentError):
    """Raised on HTTP 404 when the resource does not exist."""


class ValidationError(KontentError):
    """Raised when the service rejects a payload (HTTP 400/422).

    Attributes:
        validation_errors: Field-level messages reported by the service
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        validation_errors: "list[ValidationErrorDetail] | None" = None,
    ) -> None:
        self.validation_errors = validation_errors or []
        super().__init__(message, status_code=status_code, details=details)


class ConflictError(KontentError):
    """Raised on HTTP 409."""


class RateLimitError(KontentError):
    """Raised on HTTP 429."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=429, details=details)


class ServerError(KontentError):
    """Raised on HTTP 5xx."""


class FormatError(KontentError):
    """Raised when a response body is not JSON or not the expected shape."""


# Transport errors


class TransportError(KontentError):
    """Base for network-level failures surfaced from the HTTP client."""


class ConnectionError(TransportError):  # noqa: A001
    """Raised when the service cannot be reached."""


class TimeoutError(TransportError):  # noqa: A001
    """Raised when a request times out."""
