"""Management API facades.

The facades own a transport and expose one resource object per family:

    >>> with ManagementClient(config) as client:
    ...     german = client.languages.modify(
    ...         Reference.by_codename("de-DE"),
    ...         [LANGUAGE_SCHEMA.replace(LanguagePropertyName.NAME, "Deutsch")],
    ...     )
"""

from typing import Any

from .client.async_client import AsyncClient
from .client.sync_client import SyncClient
from .models.assets import AssetModel
from .models.content_items import ContentItemModel
from .models.content_types import ContentTypeModel
from .models.languages import LanguageModel
from .models.taxonomies import TaxonomyGroupModel
from .protocols import AsyncHTTPClient, AuthProvider, ConfigProvider, HTTPClient
from .resources import (
    ASSETS,
    CONTENT_ITEMS,
    CONTENT_TYPES,
    LANGUAGES,
    TAXONOMIES,
    AsyncResource,
    SyncResource,
)


class ManagementClient:
    """Blocking client for the Management API.

    Args:
        config: Explicit configuration (typically ManagementConfig)
        http_client: Optional injected HTTP client; the caller keeps ownership
        auth: Optional authentication provider replacing the API key auth
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: HTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        self.transport = SyncClient(config, http_client=http_client, auth=auth)

        self.languages: SyncResource[LanguageModel] = SyncResource(self.transport, LANGUAGES)
        self.content_types: SyncResource[ContentTypeModel] = SyncResource(
            self.transport, CONTENT_TYPES
        )
        self.content_items: SyncResource[ContentItemModel] = SyncResource(
            self.transport, CONTENT_ITEMS
        )
        self.assets: SyncResource[AssetModel] = SyncResource(self.transport, ASSETS)
        self.taxonomies: SyncResource[TaxonomyGroupModel] = SyncResource(
            self.transport, TAXONOMIES
        )

    def __enter__(self) -> "ManagementClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport's connections."""
        self.transport.close()


class AsyncManagementClient:
    """Non-blocking client for the Management API.

    Example:
        >>> async with AsyncManagementClient(config) as client:
        ...     languages = await client.languages.list().get_all()
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        self.transport = AsyncClient(config, http_client=http_client, auth=auth)

        self.languages: AsyncResource[LanguageModel] = AsyncResource(self.transport, LANGUAGES)
        self.content_types: AsyncResource[ContentTypeModel] = AsyncResource(
            self.transport, CONTENT_TYPES
        )
        self.content_items: AsyncResource[ContentItemModel] = AsyncResource(
            self.transport, CONTENT_ITEMS
        )
        self.assets: AsyncResource[AssetModel] = AsyncResource(self.transport, ASSETS)
        self.taxonomies: AsyncResource[TaxonomyGroupModel] = AsyncResource(
            self.transport, TAXONOMIES
        )

    async def __aenter__(self) -> "AsyncManagementClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the transport's connections."""
        await self.transport.close()
