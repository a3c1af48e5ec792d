"""Resource references and their resolution into request paths.

A Reference locates a resource by exactly one of its internal ID, its
codename or its external ID. The resolver turns a reference into the form
each part of a request needs: a URL path segment, a patch pointer, or a
request-body object.
"""

import uuid
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, model_serializer, model_validator

from ..exceptions import InvalidReferenceError


class ReferenceKind(str, Enum):
    """Which identifier a reference uses."""

    ID = "id"
    CODENAME = "codename"
    EXTERNAL_ID = "external_id"


class Reference(BaseModel):
    """Discriminated locator for a resource.

    Exactly one variant is active and its value is non-empty (a UUID for
    ``id``); anything else raises InvalidReferenceError on construction.

        >>> Reference.by_codename("en-US")
        Reference(id=None, codename='en-US', external_id=None)

    References parsed from responses (``{"id": "..."}``) use the same model
    and serialise back to the same single-key shape.
    """

    id: str | None = None
    codename: str | None = None
    external_id: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _validate_variant(self) -> "Reference":
        ReferenceResolver.validate(self)
        return self

    @model_serializer(mode="plain")
    def _serialize(self) -> dict[str, str]:
        return {self.kind.value: self.value}

    @classmethod
    def by_id(cls, value: uuid.UUID | str) -> "Reference":
        return cls(id=str(value))

    @classmethod
    def by_codename(cls, value: str) -> "Reference":
        return cls(codename=value)

    @classmethod
    def by_external_id(cls, value: str) -> "Reference":
        return cls(external_id=value)

    @property
    def kind(self) -> ReferenceKind:
        if self.id is not None:
            return ReferenceKind.ID
        if self.codename is not None:
            return ReferenceKind.CODENAME
        return ReferenceKind.EXTERNAL_ID

    @property
    def value(self) -> str:
        return str(getattr(self, self.kind.value))

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


class ReferenceResolver:
    """Turns references into path segments, patch pointers and payloads."""

    _PATH_PREFIXES: dict[ReferenceKind, str] = {
        ReferenceKind.ID: "",
        ReferenceKind.CODENAME: "codename/",
        ReferenceKind.EXTERNAL_ID: "external-id/",
    }

    @staticmethod
    def validate(reference: Reference) -> None:
        """Check that the active value is usable.

        Raises:
            InvalidReferenceError: If the value is blank, or an id is not a UUID
        """
        if not isinstance(reference, Reference):
            raise InvalidReferenceError(f"Expected a Reference, got {type(reference).__name__}")

        active = [kind for kind in ReferenceKind if getattr(reference, kind.value) is not None]
        if len(active) != 1:
            raise InvalidReferenceError(
                "A reference needs exactly one of id, codename or external_id, "
                f"got {len(active)}"
            )

        value = reference.value
        if not value.strip():
            raise InvalidReferenceError(f"Reference {reference.kind.value} must not be empty")

        if reference.kind is ReferenceKind.ID:
            try:
                uuid.UUID(value)
            except ValueError as e:
                raise InvalidReferenceError(f"Reference id '{value}' is not a valid UUID") from e

    @classmethod
    def resolve(cls, reference: Reference) -> str:
        """Resolve a reference into the URL path segment addressing it.

        Examples:
            >>> ReferenceResolver.resolve(Reference.by_codename("de-DE"))
            'codename/de-DE'
            >>> ReferenceResolver.resolve(Reference.by_external_id("standard-german"))
            'external-id/standard-german'
        """
        cls.validate(reference)
        return cls._PATH_PREFIXES[reference.kind] + quote(reference.value, safe="")

    @classmethod
    def to_pointer(cls, reference: Reference) -> str:
        """Render the patch-path form of a reference, e.g. ``codename:title``."""
        cls.validate(reference)
        return f"{reference.kind.value}:{reference.value}"

    @classmethod
    def to_payload(cls, reference: Reference) -> dict[str, Any]:
        """Render the request-body form of a reference, e.g. ``{"codename": "en-US"}``."""
        cls.validate(reference)
        return {reference.kind.value: reference.value}
