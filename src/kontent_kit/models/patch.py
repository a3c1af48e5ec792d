"""Patch documents for partial updates.

Each resource family declares a ResourceSchema: the properties a patch may
touch, which operations each property allows, and the value shape each
operation expects. PatchDocumentBuilder checks a whole sequence of
operations against a schema and serialises it, in order, into the JSON
array the Management API accepts.

Example:
    >>> from kontent_kit.models.languages import LANGUAGE_SCHEMA, LanguagePropertyName
    >>> operations = [
    ...     PatchOperation(
    ...         property_name=LanguagePropertyName.FALLBACK_LANGUAGE,
    ...         value={"codename": "en-US"},
    ...     ),
    ...     PatchOperation(property_name=LanguagePropertyName.NAME, value="Deutsch"),
    ... ]
    >>> PatchDocumentBuilder.build(LANGUAGE_SCHEMA, operations)
    [{'op': 'replace', 'path': '/fallback_language', 'value': {'codename': 'en-US'}},
     {'op': 'replace', 'path': '/name', 'value': 'Deutsch'}]
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidPatchOperationError, InvalidReferenceError
from .reference import Reference, ReferenceResolver


class OperationKind(str, Enum):
    """Kinds of patch operation."""

    REPLACE = "replace"
    ADD = "add"
    REMOVE = "remove"
    MOVE = "move"

    @property
    def wire_name(self) -> str:
        # "addInto" on the wire
        return "addInto" if self is OperationKind.ADD else self.value


def _require_non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Checked but sent as given: surrounding whitespace is not stripped.
NonEmptyStr = Annotated[str, AfterValidator(_require_non_blank)]

REPLACE_ONLY = frozenset({OperationKind.REPLACE})
COLLECTION_OPERATIONS = frozenset({OperationKind.ADD, OperationKind.REMOVE, OperationKind.MOVE})


class PatchOperation(BaseModel):
    """A single mutation of one named property.

    Attributes:
        property_name: Property to change; a family's PropertyName enum member
            or its string value
        op: Operation kind, ``replace`` unless given
        value: New value (replace) or item to insert (add)
        target: Collection item addressed by remove and move
        before: Move the target in front of this item
        after: Move the target behind this item
    """

    property_name: str
    op: OperationKind = OperationKind.REPLACE
    value: Any = None
    target: Reference | None = None
    before: Reference | None = None
    after: Reference | None = None
    # Enum class the property name came from, None for plain strings
    property_enum: type[Enum] | None = Field(default=None, exclude=True, repr=False)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _split_property_enum(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("property_name"), Enum):
            member = data["property_name"]
            data = {**data, "property_name": member.value, "property_enum": type(member)}
        return data


@dataclass(frozen=True)
class PropertySpec:
    """Declares how one property of a resource may be patched.

    Attributes:
        name: Property name as it appears in patch paths
        operations: Operation kinds allowed on the property
        value_type: Type a ``replace`` value must validate against
        item_type: Type an ``add`` value must validate against
    """

    name: str
    operations: frozenset[OperationKind] = REPLACE_ONLY
    value_type: Any = None
    item_type: Any = None

    @cached_property
    def value_adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.value_type)

    @cached_property
    def item_adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.item_type)


@dataclass(frozen=True)
class ResourceSchema:
    """The patchable surface of a resource family.

    Attributes:
        resource: Family name used in error messages
        property_names: The family's PropertyName enum; members of any other
            enum are rejected even when their value matches
        properties: Patchable properties by name
    """

    resource: str
    property_names: type[Enum] | None = None
    properties: Mapping[str, PropertySpec] = field(default_factory=dict)

    @classmethod
    def of(
        cls, resource: str, property_names: type[Enum] | None, *specs: PropertySpec
    ) -> "ResourceSchema":
        return cls(
            resource=resource,
            property_names=property_names,
            properties={spec.name: spec for spec in specs},
        )

    def __contains__(self, property_name: object) -> bool:
        if isinstance(property_name, Enum):
            if not self.accepts_enum(type(property_name)):
                return False
            property_name = property_name.value
        return property_name in self.properties

    def accepts_enum(self, enum_type: type[Enum] | None) -> bool:
        """Check whether property names from ``enum_type`` belong to this schema."""
        return enum_type is None or self.property_names is None or enum_type is self.property_names

    # Constructors that validate at construction time

    def replace(self, property_name: str | Enum, value: Any) -> PatchOperation:
        return self._checked(PatchOperation(property_name=property_name, value=value))

    def add(self, property_name: str | Enum, value: Any) -> PatchOperation:
        return self._checked(
            PatchOperation(property_name=property_name, op=OperationKind.ADD, value=value)
        )

    def remove(self, property_name: str | Enum, target: Reference) -> PatchOperation:
        return self._checked(
            PatchOperation(property_name=property_name, op=OperationKind.REMOVE, target=target)
        )

    def move(
        self,
        property_name: str | Enum,
        target: Reference,
        *,
        before: Reference | None = None,
        after: Reference | None = None,
    ) -> PatchOperation:
        return self._checked(
            PatchOperation(
                property_name=property_name,
                op=OperationKind.MOVE,
                target=target,
                before=before,
                after=after,
            )
        )

    def _checked(self, operation: PatchOperation) -> PatchOperation:
        value = PatchDocumentBuilder.validate_value(self, operation)
        return operation.model_copy(update={"value": value})


class PatchDocumentBuilder:
    """Validates and serialises patch operations against a ResourceSchema."""

    @staticmethod
    def build(
        schema: ResourceSchema, operations: Iterable[PatchOperation]
    ) -> list[dict[str, Any]]:
        """Build the patch document for a sequence of operations.

        The document is all-or-nothing: the first invalid operation raises
        and nothing is returned. Output order matches input order.

        Raises:
            InvalidPatchOperationError: On an empty sequence, or on any
                operation the schema does not allow
        """
        operations = list(operations)
        if not operations:
            raise InvalidPatchOperationError(
                schema.resource, "build", "a patch document needs at least one operation"
            )
        return [PatchDocumentBuilder.build_entry(schema, operation) for operation in operations]

    @staticmethod
    def build_entry(schema: ResourceSchema, operation: PatchOperation) -> dict[str, Any]:
        """Validate a single operation and render its wire entry."""
        if not isinstance(operation, PatchOperation):
            raise InvalidPatchOperationError(
                str(getattr(operation, "property_name", "?")),
                str(getattr(operation, "op", "?")),
                f"expected a PatchOperation, got {type(operation).__name__}",
            )

        value = PatchDocumentBuilder.validate_value(schema, operation)
        spec = schema.properties[operation.property_name]

        path = f"/{spec.name}"
        entry: dict[str, Any] = {"op": operation.op.wire_name}

        if operation.op is OperationKind.REPLACE:
            entry["path"] = path
            entry["value"] = spec.value_adapter.dump_python(
                value, mode="json", by_alias=True, exclude_none=True
            )
        elif operation.op is OperationKind.ADD:
            entry["path"] = path
            entry["value"] = spec.item_adapter.dump_python(
                value, mode="json", by_alias=True, exclude_none=True
            )
        else:
            target = operation.target
            if target is None:
                raise InvalidPatchOperationError(
                    spec.name, operation.op.value, "a target item is required"
                )
            entry["path"] = f"{path}/{ReferenceResolver.to_pointer(target)}"
            if operation.before is not None:
                entry["before"] = ReferenceResolver.to_payload(operation.before)
            elif operation.after is not None:
                entry["after"] = ReferenceResolver.to_payload(operation.after)

        return entry

    @staticmethod
    def validate_value(schema: ResourceSchema, operation: PatchOperation) -> Any:
        """Check an operation against the schema and return its validated value.

        Raises:
            InvalidPatchOperationError: If the property is unknown, the operation
                kind is not allowed for it, or the value has the wrong shape
        """
        name = operation.property_name
        op = operation.op.value

        if not schema.accepts_enum(operation.property_enum):
            enum_name = operation.property_enum.__name__ if operation.property_enum else "?"
            raise InvalidPatchOperationError(
                name, op, f"{enum_name} does not name '{schema.resource}' properties"
            )

        if name not in schema:
            raise InvalidPatchOperationError(
                name, op, f"'{schema.resource}' has no patchable property '{name}'"
            )

        spec = schema.properties[name]
        if operation.op not in spec.operations:
            allowed = ", ".join(sorted(kind.value for kind in spec.operations))
            raise InvalidPatchOperationError(name, op, f"allowed operations are: {allowed}")

        if operation.op in (OperationKind.REMOVE, OperationKind.MOVE):
            if operation.target is None:
                raise InvalidPatchOperationError(name, op, "a target item is required")
            if operation.value is not None:
                raise InvalidPatchOperationError(name, op, "does not take a value")
            if operation.op is OperationKind.MOVE and (
                (operation.before is None) == (operation.after is None)
            ):
                raise InvalidPatchOperationError(
                    name, op, "exactly one of before or after is required"
                )
            return None

        if any(ref is not None for ref in (operation.target, operation.before, operation.after)):
            raise InvalidPatchOperationError(name, op, "does not take a target or position")

        adapter = spec.value_adapter if operation.op is OperationKind.REPLACE else spec.item_adapter
        try:
            return adapter.validate_python(operation.value)
        except (PydanticValidationError, InvalidReferenceError) as e:
            raise InvalidPatchOperationError(name, op, f"invalid value: {e}") from e
