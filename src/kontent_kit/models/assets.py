"""Asset models.

Assets are created from a file reference returned by a previous upload;
uploading the binary itself is outside this client.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .patch import PropertySpec, ResourceSchema
from .reference import Reference


class FileReference(BaseModel):
    """Points at an uploaded binary file."""

    id: str
    type: str = "internal"


class AssetDescription(BaseModel):
    """Asset description in one language."""

    language: Reference
    description: str | None = None


class AssetModel(BaseModel):
    """An asset, as returned by the service."""

    id: str
    file_name: str
    title: str | None = None
    size: int = 0
    type: str = Field(default="application/octet-stream", description="MIME type")
    image_width: int | None = None
    image_height: int | None = None
    url: str | None = None
    file_reference: FileReference | None = None
    descriptions: list[AssetDescription] = Field(default_factory=list)
    external_id: str | None = None
    folder: Reference | None = None
    collection: Reference | None = None
    last_modified: datetime | None = None

    @property
    def is_image(self) -> bool:
        return self.type.startswith("image/")

    def get_description(self, language: Reference) -> str | None:
        """Return the description for a language, or None if it has none."""
        for item in self.descriptions:
            if item.language == language:
                return item.description
        return None


class AssetCreateModel(BaseModel):
    """Payload for creating an asset."""

    file_reference: FileReference
    title: str | None = None
    descriptions: list[AssetDescription] = Field(default_factory=list)
    external_id: str | None = None
    folder: Reference | None = None
    collection: Reference | None = None


class AssetUpsertModel(BaseModel):
    """Payload for creating or updating an asset at a known reference."""

    file_reference: FileReference
    title: str | None = None
    descriptions: list[AssetDescription] = Field(default_factory=list)
    folder: Reference | None = None
    collection: Reference | None = None


class AssetPropertyName(str, Enum):
    """Asset properties that can be patched."""

    TITLE = "title"
    DESCRIPTIONS = "descriptions"
    FOLDER = "folder"
    COLLECTION = "collection"


ASSET_SCHEMA = ResourceSchema.of(
    "asset",
    AssetPropertyName,
    PropertySpec(AssetPropertyName.TITLE.value, value_type=str),
    PropertySpec(AssetPropertyName.DESCRIPTIONS.value, value_type=list[AssetDescription]),
    PropertySpec(AssetPropertyName.FOLDER.value, value_type=Reference),
    PropertySpec(AssetPropertyName.COLLECTION.value, value_type=Reference),
)
