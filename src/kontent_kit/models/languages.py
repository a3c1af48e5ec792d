"""Language models."""

from enum import Enum

from pydantic import BaseModel, Field

from .patch import NonEmptyStr, PropertySpec, ResourceSchema
from .reference import Reference


class LanguageModel(BaseModel):
    """A language of the environment, as returned by the service."""

    id: str
    name: str
    codename: str
    external_id: str | None = None
    is_active: bool = True
    is_default: bool = False
    fallback_language: Reference | None = None


class LanguageCreateModel(BaseModel):
    """Payload for creating a language."""

    name: str = Field(min_length=1)
    codename: str = Field(min_length=1)
    is_active: bool = True
    external_id: str | None = None
    fallback_language: Reference | None = None


class LanguagePropertyName(str, Enum):
    """Language properties that can be patched."""

    NAME = "name"
    CODENAME = "codename"
    IS_ACTIVE = "is_active"
    EXTERNAL_ID = "external_id"
    FALLBACK_LANGUAGE = "fallback_language"


LANGUAGE_SCHEMA = ResourceSchema.of(
    "language",
    LanguagePropertyName,
    PropertySpec(LanguagePropertyName.NAME.value, value_type=NonEmptyStr),
    PropertySpec(LanguagePropertyName.CODENAME.value, value_type=NonEmptyStr),
    PropertySpec(LanguagePropertyName.IS_ACTIVE.value, value_type=bool),
    PropertySpec(LanguagePropertyName.EXTERNAL_ID.value, value_type=NonEmptyStr),
    PropertySpec(LanguagePropertyName.FALLBACK_LANGUAGE.value, value_type=Reference),
)
