"""Data models for kontent-kit."""

from .assets import (
    ASSET_SCHEMA,
    AssetCreateModel,
    AssetDescription,
    AssetModel,
    AssetPropertyName,
    AssetUpsertModel,
    FileReference,
)
from .config import ManagementConfig, RetryConfig
from .content_items import (
    CONTENT_ITEM_SCHEMA,
    ContentItemCreateModel,
    ContentItemModel,
    ContentItemPropertyName,
    ContentItemUpsertModel,
)
from .content_types import (
    CONTENT_TYPE_SCHEMA,
    ContentGroupModel,
    ContentTypeCreateModel,
    ContentTypeModel,
    ContentTypePropertyName,
)
from .elements import (
    DateTimeElementDefaultValue,
    ElementDefaultValue,
    ElementModel,
    MultipleChoiceElementDefaultValue,
    NumberElementDefaultValue,
    TextElementDefaultValue,
)
from .errors import ErrorResponse, ValidationErrorDetail
from .languages import LANGUAGE_SCHEMA, LanguageCreateModel, LanguageModel, LanguagePropertyName
from .listing import ListingPage
from .patch import (
    OperationKind,
    PatchDocumentBuilder,
    PatchOperation,
    PropertySpec,
    ResourceSchema,
)
from .reference import Reference, ReferenceKind, ReferenceResolver
from .taxonomies import (
    TAXONOMY_SCHEMA,
    TaxonomyGroupCreateModel,
    TaxonomyGroupModel,
    TaxonomyPropertyName,
    TaxonomyTermCreateModel,
    TaxonomyTermModel,
)

__all__ = [
    # Configuration
    "ManagementConfig",
    "RetryConfig",
    # References and patches
    "Reference",
    "ReferenceKind",
    "ReferenceResolver",
    "OperationKind",
    "PatchOperation",
    "PatchDocumentBuilder",
    "PropertySpec",
    "ResourceSchema",
    # Listing
    "ListingPage",
    # Errors
    "ErrorResponse",
    "ValidationErrorDetail",
    # Languages
    "LANGUAGE_SCHEMA",
    "LanguageModel",
    "LanguageCreateModel",
    "LanguagePropertyName",
    # Content types
    "CONTENT_TYPE_SCHEMA",
    "ContentGroupModel",
    "ContentTypeModel",
    "ContentTypeCreateModel",
    "ContentTypePropertyName",
    "ElementModel",
    "ElementDefaultValue",
    "TextElementDefaultValue",
    "NumberElementDefaultValue",
    "DateTimeElementDefaultValue",
    "MultipleChoiceElementDefaultValue",
    # Content items
    "CONTENT_ITEM_SCHEMA",
    "ContentItemModel",
    "ContentItemCreateModel",
    "ContentItemUpsertModel",
    "ContentItemPropertyName",
    # Assets
    "ASSET_SCHEMA",
    "AssetModel",
    "AssetCreateModel",
    "AssetUpsertModel",
    "AssetDescription",
    "AssetPropertyName",
    "FileReference",
    # Taxonomies
    "TAXONOMY_SCHEMA",
    "TaxonomyGroupModel",
    "TaxonomyGroupCreateModel",
    "TaxonomyTermModel",
    "TaxonomyTermCreateModel",
    "TaxonomyPropertyName",
]
