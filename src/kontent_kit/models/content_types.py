"""Content type models.

Content types are patched with collection operations on ``elements`` and
``content_groups``: elements are added, removed by reference and moved
before or after a sibling.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .elements import ElementModel
from .patch import COLLECTION_OPERATIONS, NonEmptyStr, PropertySpec, ResourceSchema


class ContentGroupModel(BaseModel):
    """A tab grouping elements of a content type."""

    id: str | None = None
    name: str
    codename: str | None = None
    external_id: str | None = None


class ContentTypeModel(BaseModel):
    """A content type, as returned by the service."""

    id: str
    name: str
    codename: str
    external_id: str | None = None
    last_modified: datetime | None = None
    content_groups: list[ContentGroupModel] = Field(default_factory=list)
    elements: list[ElementModel] = Field(default_factory=list)

    def get_element(self, codename: str) -> ElementModel | None:
        """Find an element by codename.

        Args:
            codename: Element codename

        Returns:
            The element or None if the type has no such element
        """
        for element in self.elements:
            if element.codename == codename:
                return element
        return None


class ContentTypeCreateModel(BaseModel):
    """Payload for creating a content type."""

    name: str = Field(min_length=1)
    codename: str | None = None
    external_id: str | None = None
    content_groups: list[ContentGroupModel] = Field(default_factory=list)
    elements: list[ElementModel] = Field(default_factory=list)


class ContentTypePropertyName(str, Enum):
    """Content type properties that can be patched."""

    NAME = "name"
    CODENAME = "codename"
    ELEMENTS = "elements"
    CONTENT_GROUPS = "content_groups"


CONTENT_TYPE_SCHEMA = ResourceSchema.of(
    "content type",
    ContentTypePropertyName,
    PropertySpec(ContentTypePropertyName.NAME.value, value_type=NonEmptyStr),
    PropertySpec(ContentTypePropertyName.CODENAME.value, value_type=NonEmptyStr),
    PropertySpec(
        ContentTypePropertyName.ELEMENTS.value,
        operations=COLLECTION_OPERATIONS,
        item_type=ElementModel,
    ),
    PropertySpec(
        ContentTypePropertyName.CONTENT_GROUPS.value,
        operations=COLLECTION_OPERATIONS,
        item_type=ContentGroupModel,
    ),
)
