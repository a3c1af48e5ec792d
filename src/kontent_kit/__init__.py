"""kontent-kit: a typed Python client for the Kontent.ai Management API.

This package provides:
- Synchronous and asynchronous management clients
- Create, get, list, modify and delete operations per resource family
- References by ID, codename or external ID
- Validated patch documents for partial updates
- Lazy iteration over paginated listings
- Type-safe data models with Pydantic
"""

from .__version__ import __version__
from .client import AsyncClient, SyncClient
from .config_provider import ConfigFactory, create_config, load_config
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    FormatError,
    InvalidPatchOperationError,
    InvalidReferenceError,
    KontentError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)
from .management_client import AsyncManagementClient, ManagementClient
from .models import (
    ManagementConfig,
    OperationKind,
    PatchDocumentBuilder,
    PatchOperation,
    Reference,
    ReferenceResolver,
    ResourceSchema,
    RetryConfig,
)
from .operations.pagination import AsyncPagedResponseIterator, PagedResponseIterator
from .protocols import AsyncHTTPClient, AuthProvider, ConfigProvider, HTTPClient

__all__ = [
    "__version__",
    # Clients
    "ManagementClient",
    "AsyncManagementClient",
    "SyncClient",
    "AsyncClient",
    # Configuration
    "ManagementConfig",
    "RetryConfig",
    "ConfigFactory",
    "create_config",
    "load_config",
    # References and patches
    "Reference",
    "ReferenceResolver",
    "OperationKind",
    "PatchOperation",
    "PatchDocumentBuilder",
    "ResourceSchema",
    # Pagination
    "PagedResponseIterator",
    "AsyncPagedResponseIterator",
    # Protocols (for dependency injection)
    "AuthProvider",
    "ConfigProvider",
    "HTTPClient",
    "AsyncHTTPClient",
    # Exceptions
    "KontentError",
    "ConfigurationError",
    "InvalidReferenceError",
    "InvalidPatchOperationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "FormatError",
    "TransportError",
]
