"""Content item models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .patch import NonEmptyStr, PropertySpec, ResourceSchema
from .reference import Reference


class ContentItemModel(BaseModel):
    """A content item, as returned by the service."""

    id: str
    name: str
    codename: str
    type: Reference
    collection: Reference | None = None
    sitemap_locations: list[Reference] = Field(default_factory=list)
    external_id: str | None = None
    last_modified: datetime | None = None


class ContentItemCreateModel(BaseModel):
    """Payload for creating a content item."""

    name: str = Field(min_length=1)
    type: Reference
    codename: str | None = None
    external_id: str | None = None
    collection: Reference | None = None


class ContentItemUpsertModel(BaseModel):
    """Payload for creating or updating a content item at a known reference."""

    name: str = Field(min_length=1)
    codename: str | None = None
    type: Reference | None = None
    collection: Reference | None = None


class ContentItemPropertyName(str, Enum):
    """Content item properties that can be patched."""

    NAME = "name"
    CODENAME = "codename"
    COLLECTION = "collection"


CONTENT_ITEM_SCHEMA = ResourceSchema.of(
    "content item",
    ContentItemPropertyName,
    PropertySpec(ContentItemPropertyName.NAME.value, value_type=NonEmptyStr),
    PropertySpec(ContentItemPropertyName.CODENAME.value, value_type=NonEmptyStr),
    PropertySpec(ContentItemPropertyName.COLLECTION.value, value_type=Reference),
)
