"""Taxonomy group models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .patch import COLLECTION_OPERATIONS, NonEmptyStr, PropertySpec, ResourceSchema


class TaxonomyTermModel(BaseModel):
    """A taxonomy term; terms nest to any depth."""

    id: str
    name: str
    codename: str
    external_id: str | None = None
    terms: list["TaxonomyTermModel"] = Field(default_factory=list)


class TaxonomyGroupModel(BaseModel):
    """A taxonomy group, as returned by the service."""

    id: str
    name: str
    codename: str
    external_id: str | None = None
    last_modified: datetime | None = None
    terms: list[TaxonomyTermModel] = Field(default_factory=list)

    def iter_terms(self) -> list[TaxonomyTermModel]:
        """Flatten the term tree in depth-first order."""
        flattened: list[TaxonomyTermModel] = []
        stack = list(reversed(self.terms))
        while stack:
            term = stack.pop()
            flattened.append(term)
            stack.extend(reversed(term.terms))
        return flattened


class TaxonomyTermCreateModel(BaseModel):
    """Payload for a new term, including its children."""

    name: str = Field(min_length=1)
    codename: str | None = None
    external_id: str | None = None
    terms: list["TaxonomyTermCreateModel"] = Field(default_factory=list)


class TaxonomyGroupCreateModel(BaseModel):
    """Payload for creating a taxonomy group."""

    name: str = Field(min_length=1)
    codename: str | None = None
    external_id: str | None = None
    terms: list[TaxonomyTermCreateModel] = Field(default_factory=list)


class TaxonomyPropertyName(str, Enum):
    """Taxonomy group properties that can be patched."""

    NAME = "name"
    CODENAME = "codename"
    TERMS = "terms"


TAXONOMY_SCHEMA = ResourceSchema.of(
    "taxonomy group",
    TaxonomyPropertyName,
    PropertySpec(TaxonomyPropertyName.NAME.value, value_type=NonEmptyStr),
    PropertySpec(TaxonomyPropertyName.CODENAME.value, value_type=NonEmptyStr),
    PropertySpec(
        TaxonomyPropertyName.TERMS.value,
        operations=COLLECTION_OPERATIONS,
        item_type=TaxonomyTermCreateModel,
    ),
)
