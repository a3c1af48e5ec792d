"""Resource-oriented operations for each resource family.

A ResourceFamily describes where a family lives and which models it uses.
SyncResource and AsyncResource turn that description into the create, get,
list, modify and delete operations. Each operation resolves references
and validates patch documents locally, before any request is sent.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .client.async_client import AsyncClient
from .client.sync_client import SyncClient
from .exceptions import FormatError, InvalidReferenceError
from .models.assets import ASSET_SCHEMA, AssetCreateModel, AssetModel, AssetUpsertModel
from .models.content_items import (
    CONTENT_ITEM_SCHEMA,
    ContentItemCreateModel,
    ContentItemModel,
    ContentItemUpsertModel,
)
from .models.content_types import CONTENT_TYPE_SCHEMA, ContentTypeCreateModel, ContentTypeModel
from .models.languages import LANGUAGE_SCHEMA, LanguageCreateModel, LanguageModel
from .models.listing import ListingPage
from .models.patch import PatchDocumentBuilder, PatchOperation, ResourceSchema
from .models.reference import Reference, ReferenceResolver
from .models.taxonomies import TAXONOMY_SCHEMA, TaxonomyGroupCreateModel, TaxonomyGroupModel
from .operations.pagination import (
    CONTINUATION_HEADER,
    AsyncPagedResponseIterator,
    PagedResponseIterator,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ResourceFamily(Generic[ModelT]):
    """Endpoint, models and patch schema of one resource family.

    Attributes:
        name: Human-readable family name used in log messages
        endpoint: Collection endpoint relative to the environment
        list_key: Array key of the family's listing response
        model: Response model
        create_model: Payload model for create
        schema: Patchable properties
        upsert_model: Payload model for upsert, None if unsupported
    """

    name: str
    endpoint: str
    list_key: str
    model: type[ModelT]
    create_model: type[BaseModel]
    schema: ResourceSchema
    upsert_model: type[BaseModel] | None = None


LANGUAGES: ResourceFamily[LanguageModel] = ResourceFamily(
    name="language",
    endpoint="languages",
    list_key="languages",
    model=LanguageModel,
    create_model=LanguageCreateModel,
    schema=LANGUAGE_SCHEMA,
)

CONTENT_TYPES: ResourceFamily[ContentTypeModel] = ResourceFamily(
    name="content type",
    endpoint="types",
    list_key="types",
    model=ContentTypeModel,
    create_model=ContentTypeCreateModel,
    schema=CONTENT_TYPE_SCHEMA,
)

CONTENT_ITEMS: ResourceFamily[ContentItemModel] = ResourceFamily(
    name="content item",
    endpoint="items",
    list_key="items",
    model=ContentItemModel,
    create_model=ContentItemCreateModel,
    schema=CONTENT_ITEM_SCHEMA,
    upsert_model=ContentItemUpsertModel,
)

ASSETS: ResourceFamily[AssetModel] = ResourceFamily(
    name="asset",
    endpoint="assets",
    list_key="assets",
    model=AssetModel,
    create_model=AssetCreateModel,
    schema=ASSET_SCHEMA,
    upsert_model=AssetUpsertModel,
)

TAXONOMIES: ResourceFamily[TaxonomyGroupModel] = ResourceFamily(
    name="taxonomy group",
    endpoint="taxonomies",
    list_key="taxonomies",
    model=TaxonomyGroupModel,
    create_model=TaxonomyGroupCreateModel,
    schema=TAXONOMY_SCHEMA,
)


class _ResourceBase(Generic[ModelT]):
    """Request building and response parsing shared by both resource flavours."""

    def __init__(self, family: ResourceFamily[ModelT]) -> None:
        self.family = family

    @property
    def schema(self) -> ResourceSchema:
        return self.family.schema

    def _item_path(self, reference: Reference) -> str:
        return f"{self.family.endpoint}/{ReferenceResolver.resolve(reference)}"

    def _serialize(self, model_type: type[BaseModel], data: BaseModel | dict[str, Any]) -> Any:
        payload = data if isinstance(data, model_type) else model_type.model_validate(data)
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _upsert_model(self) -> type[BaseModel]:
        if self.family.upsert_model is None:
            raise NotImplementedError(f"{self.family.name} resources do not support upsert")
        return self.family.upsert_model

    def _build_patch(self, operations: Iterable[PatchOperation]) -> list[dict[str, Any]]:
        return PatchDocumentBuilder.build(self.family.schema, operations)

    def _parse(self, data: Any) -> ModelT:
        if not isinstance(data, dict):
            raise FormatError(
                f"Expected a {self.family.name} object, got {type(data).__name__}"
            )
        try:
            return self.family.model.model_validate(data)
        except (PydanticValidationError, InvalidReferenceError) as e:
            raise FormatError(f"Response is not a valid {self.family.name}: {e}") from e

    def _parse_page(self, data: Any) -> ListingPage[ModelT]:
        return ListingPage.from_response(data, self.family.model, key=self.family.list_key)

    @staticmethod
    def _continuation_headers(continuation_token: str | None) -> dict[str, str] | None:
        return {CONTINUATION_HEADER: continuation_token} if continuation_token else None


class SyncResource(_ResourceBase[ModelT]):
    """Blocking operations on one resource family.

    Example:
        >>> language = client.languages.get(Reference.by_codename("default"))
        >>> language.name
        'Default project language'
    """

    def __init__(self, client: SyncClient, family: ResourceFamily[ModelT]) -> None:
        super().__init__(family)
        self._client = client

    def create(self, data: BaseModel | dict[str, Any]) -> ModelT:
        """Create a resource.

        Args:
            data: The family's create model, or a dict shaped like it

        Raises:
            ValidationError: If the service rejects the payload
        """
        payload = self._serialize(self.family.create_model, data)
        logger.debug(f"Creating {self.family.name}")
        return self._parse(self._client.post(self.family.endpoint, json=payload))

    def get(self, reference: Reference) -> ModelT:
        """Fetch a single resource.

        Raises:
            InvalidReferenceError: If the reference is malformed
            NotFoundError: If no such resource exists
        """
        return self._parse(self._client.get(self._item_path(reference)))

    def list(self) -> PagedResponseIterator[ModelT]:
        """List every resource of the family, fetching pages lazily."""
        return PagedResponseIterator(self._fetch_page)

    def modify(self, reference: Reference, operations: Iterable[PatchOperation]) -> ModelT:
        """Apply patch operations, in order, to a resource.

        Raises:
            InvalidReferenceError: If the reference is malformed
            InvalidPatchOperationError: If any operation is invalid; nothing is sent
            NotFoundError: If no such resource exists
            ValidationError: If the service rejects the patch
        """
        path = self._item_path(reference)
        document = self._build_patch(operations)
        logger.debug(f"Modifying {self.family.name} {reference} with {len(document)} operations")
        return self._parse(self._client.patch(path, json=document))

    def delete(self, reference: Reference) -> None:
        """Delete a resource.

        Raises:
            InvalidReferenceError: If the reference is malformed
            NotFoundError: If no such resource exists
        """
        self._client.delete(self._item_path(reference))
        logger.debug(f"Deleted {self.family.name} {reference}")

    def upsert(self, reference: Reference, data: BaseModel | dict[str, Any]) -> ModelT:
        """Create the resource at ``reference``, or replace it if it exists.

        Raises:
            NotImplementedError: If the family has no upsert endpoint
        """
        payload = self._serialize(self._upsert_model(), data)
        return self._parse(self._client.put(self._item_path(reference), json=payload))

    def _fetch_page(self, continuation_token: str | None) -> ListingPage[ModelT]:
        data = self._client.get(
            self.family.endpoint, headers=self._continuation_headers(continuation_token)
        )
        return self._parse_page(data)


class AsyncResource(_ResourceBase[ModelT]):
    """Non-blocking operations on one resource family."""

    def __init__(self, client: AsyncClient, family: ResourceFamily[ModelT]) -> None:
        super().__init__(family)
        self._client = client

    async def create(self, data: BaseModel | dict[str, Any]) -> ModelT:
        """Create a resource."""
        payload = self._serialize(self.family.create_model, data)
        logger.debug(f"Creating {self.family.name}")
        return self._parse(await self._client.post(self.family.endpoint, json=payload))

    async def get(self, reference: Reference) -> ModelT:
        """Fetch a single resource."""
        return self._parse(await self._client.get(self._item_path(reference)))

    def list(self) -> AsyncPagedResponseIterator[ModelT]:
        """List every resource of the family, fetching pages lazily."""
        return AsyncPagedResponseIterator(self._fetch_page)

    async def modify(self, reference: Reference, operations: Iterable[PatchOperation]) -> ModelT:
        """Apply patch operations, in order, to a resource."""
        path = self._item_path(reference)
        document = self._build_patch(operations)
        logger.debug(f"Modifying {self.family.name} {reference} with {len(document)} operations")
        return self._parse(await self._client.patch(path, json=document))

    async def delete(self, reference: Reference) -> None:
        """Delete a resource."""
        await self._client.delete(self._item_path(reference))
        logger.debug(f"Deleted {self.family.name} {reference}")

    async def upsert(self, reference: Reference, data: BaseModel | dict[str, Any]) -> ModelT:
        """Create the resource at ``reference``, or replace it if it exists."""
        payload = self._serialize(self._upsert_model(), data)
        return self._parse(await self._client.put(self._item_path(reference), json=payload))

    async def _fetch_page(self, continuation_token: str | None) -> ListingPage[ModelT]:
        data = await self._client.get(
            self.family.endpoint, headers=self._continuation_headers(continuation_token)
        )
        return self._parse_page(data)
