"""Content type element models.

Elements are a discriminated union on ``type``. Default values are explicit
generic containers over a closed set of value types, so a text element's
default is always a string and a date-time element's always a datetime.
"""

from datetime import datetime
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from .reference import Reference

ValueT = TypeVar("ValueT")


class TypeValue(BaseModel, Generic[ValueT]):
    """Wrapper holding a single typed value."""

    value: ValueT


class ElementDefaultValue(BaseModel, Generic[ValueT]):
    """Default value of an element, applied in every language (``global``)."""

    global_: TypeValue[ValueT] = Field(alias="global")

    model_config = {"populate_by_name": True}

    @classmethod
    def of(cls, value: ValueT) -> "ElementDefaultValue[ValueT]":
        return cls(global_={"value": value})


TextElementDefaultValue = ElementDefaultValue[str]
NumberElementDefaultValue = ElementDefaultValue[float]
DateTimeElementDefaultValue = ElementDefaultValue[datetime]
MultipleChoiceElementDefaultValue = ElementDefaultValue[list[Reference]]


class LengthLimit(BaseModel):
    value: int = Field(ge=1)
    applies_to: Literal["words", "characters"] = "characters"


class ItemCountLimit(BaseModel):
    value: int = Field(ge=0)
    condition: Literal["at_most", "exactly", "at_least"] = "at_most"


class ElementBase(BaseModel):
    """Metadata shared by all element types."""

    id: str | None = None
    codename: str | None = None
    external_id: str | None = None
    content_group: Reference | None = None

    model_config = {"populate_by_name": True}


class NamedElementBase(ElementBase):
    name: str
    guidelines: str | None = None
    is_required: bool = False
    is_non_localizable: bool = False


class TextElement(NamedElementBase):
    type: Literal["text"] = "text"
    maximum_length: LengthLimit | None = None
    default: TextElementDefaultValue | None = None


class RichTextElement(NamedElementBase):
    type: Literal["rich_text"] = "rich_text"
    maximum_text_length: LengthLimit | None = None
    allowed_content_types: list[Reference] = Field(default_factory=list)


class NumberElement(NamedElementBase):
    type: Literal["number"] = "number"
    default: NumberElementDefaultValue | None = None


class DateTimeElement(NamedElementBase):
    type: Literal["date_time"] = "date_time"
    default: DateTimeElementDefaultValue | None = None


class MultipleChoiceOption(BaseModel):
    id: str | None = None
    name: str
    codename: str | None = None
    external_id: str | None = None


class MultipleChoiceElement(NamedElementBase):
    type: Literal["multiple_choice"] = "multiple_choice"
    mode: Literal["single", "multiple"] = "single"
    options: list[MultipleChoiceOption] = Field(default_factory=list)
    default: MultipleChoiceElementDefaultValue | None = None


class AssetElement(NamedElementBase):
    type: Literal["asset"] = "asset"
    allowed_file_types: Literal["adjustable", "any"] = "any"


class LinkedItemsElement(NamedElementBase):
    type: Literal["modular_content"] = "modular_content"
    allowed_content_types: list[Reference] = Field(default_factory=list)
    item_count_limit: ItemCountLimit | None = None


class TaxonomyElement(ElementBase):
    type: Literal["taxonomy"] = "taxonomy"
    taxonomy_group: Reference
    is_required: bool = False


class UrlSlugDependency(BaseModel):
    element: Reference
    snippet: Reference | None = None


class UrlSlugElement(NamedElementBase):
    type: Literal["url_slug"] = "url_slug"
    depends_on: UrlSlugDependency


class GuidelinesElement(ElementBase):
    type: Literal["guidelines"] = "guidelines"
    guidelines: str


class SnippetElement(ElementBase):
    """Inserts the elements of a content type snippet."""

    type: Literal["snippet"] = "snippet"
    snippet: Reference


class SubpagesElement(NamedElementBase):
    type: Literal["subpages"] = "subpages"
    allowed_content_types: list[Reference] = Field(default_factory=list)
    item_count_limit: ItemCountLimit | None = None


class CustomElement(NamedElementBase):
    """Element rendered by an external editor hosted at ``source_url``."""

    type: Literal["custom"] = "custom"
    source_url: str
    json_parameters: str | None = None
    allowed_elements: list[Reference] = Field(default_factory=list)


ElementModel = Annotated[
    TextElement
    | RichTextElement
    | NumberElement
    | DateTimeElement
    | MultipleChoiceElement
    | AssetElement
    | LinkedItemsElement
    | TaxonomyElement
    | UrlSlugElement
    | GuidelinesElement
    | SnippetElement
    | SubpagesElement
    | CustomElement,
    Field(discriminator="type"),
]
