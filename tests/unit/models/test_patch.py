"""Tests for patch operations and document building."""

import itertools

import pytest

from kontent_kit import (
    InvalidPatchOperationError,
    OperationKind,
    PatchDocumentBuilder,
    PatchOperation,
    Reference,
)
from kontent_kit.models import (
    CONTENT_TYPE_SCHEMA,
    LANGUAGE_SCHEMA,
    TAXONOMY_SCHEMA,
    ContentItemPropertyName,
    ContentTypePropertyName,
    LanguagePropertyName,
    TaxonomyPropertyName,
)
from kontent_kit.models.elements import TextElement


def language_operations() -> list[PatchOperation]:
    return [
        PatchOperation(
            property_name=LanguagePropertyName.FALLBACK_LANGUAGE,
            value={"codename": "en-US"},
        ),
        PatchOperation(property_name=LanguagePropertyName.NAME, value="Deutsch"),
        PatchOperation(property_name=LanguagePropertyName.IS_ACTIVE, value=True),
    ]


class TestPatchOperation:
    """Tests for the PatchOperation model."""

    def test_defaults_to_replace(self) -> None:
        """Test that operations replace unless told otherwise."""
        operation = PatchOperation(property_name="name", value="Deutsch")
        assert operation.op is OperationKind.REPLACE

    def test_enum_property_name_stored_as_string(self) -> None:
        """Test that PropertyName enums are normalised to their value."""
        operation = PatchOperation(property_name=LanguagePropertyName.NAME, value="x")
        assert operation.property_name == "name"

    def test_add_wire_name(self) -> None:
        """Test the service name of the add operation."""
        assert OperationKind.ADD.wire_name == "addInto"
        assert OperationKind.REPLACE.wire_name == "replace"


class TestLanguagePatches:
    """Tests for building language patch documents."""

    def test_build_replace_document(self) -> None:
        """Test serialising replace operations."""
        document = PatchDocumentBuilder.build(LANGUAGE_SCHEMA, language_operations())

        assert document == [
            {"op": "replace", "path": "/fallback_language", "value": {"codename": "en-US"}},
            {"op": "replace", "path": "/name", "value": "Deutsch"},
            {"op": "replace", "path": "/is_active", "value": True},
        ]

    def test_build_preserves_order_for_every_permutation(self) -> None:
        """Test that output order always follows input order."""
        operations = language_operations()

        for permutation in itertools.permutations(operations):
            document = PatchDocumentBuilder.build(LANGUAGE_SCHEMA, permutation)
            assert [entry["path"] for entry in document] == [
                f"/{operation.property_name}" for operation in permutation
            ]

    def test_unknown_property_rejects_whole_document(self) -> None:
        """Test that one unknown property fails the whole build."""
        operations = [
            *language_operations(),
            PatchOperation(property_name="is_default", value=True),
        ]

        with pytest.raises(InvalidPatchOperationError) as exc_info:
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, operations)

        assert exc_info.value.property_name == "is_default"
        assert exc_info.value.op == "replace"

    def test_unknown_property_first_position(self) -> None:
        """Test rejection does not depend on the position of the bad operation."""
        operations = [PatchOperation(property_name="color", value="red"), *language_operations()]

        with pytest.raises(InvalidPatchOperationError, match="no patchable property 'color'"):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, operations)

    def test_replace_only_property_rejects_add(self) -> None:
        """Test that scalar properties cannot be added into."""
        operation = PatchOperation(
            property_name=LanguagePropertyName.NAME, op=OperationKind.ADD, value="x"
        )

        with pytest.raises(InvalidPatchOperationError, match="allowed operations are: replace"):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [operation])

    def test_fallback_language_requires_reference_shape(self) -> None:
        """Test that the fallback value must be a reference object."""
        operation = PatchOperation(
            property_name=LanguagePropertyName.FALLBACK_LANGUAGE, value="en-US"
        )

        with pytest.raises(InvalidPatchOperationError, match="invalid value"):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [operation])

    def test_fallback_language_rejects_empty_reference(self) -> None:
        """Test that an empty reference value is reported as a patch error."""
        operation = PatchOperation(
            property_name=LanguagePropertyName.FALLBACK_LANGUAGE, value={"codename": ""}
        )

        with pytest.raises(InvalidPatchOperationError):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [operation])

    def test_name_rejects_wrong_type(self) -> None:
        """Test that names must be strings."""
        operation = PatchOperation(property_name=LanguagePropertyName.NAME, value=42)

        with pytest.raises(InvalidPatchOperationError):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [operation])

    def test_empty_document_rejected(self) -> None:
        """Test that a patch needs at least one operation."""
        with pytest.raises(InvalidPatchOperationError, match="at least one operation"):
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [])

    def test_replace_validates_at_construction(self) -> None:
        """Test that schema constructors validate immediately."""
        operation = LANGUAGE_SCHEMA.replace(
            LanguagePropertyName.FALLBACK_LANGUAGE, {"codename": "en-US"}
        )
        assert operation.value == Reference.by_codename("en-US")

        with pytest.raises(InvalidPatchOperationError):
            LANGUAGE_SCHEMA.replace(LanguagePropertyName.FALLBACK_LANGUAGE, 42)

    def test_schema_membership(self) -> None:
        """Test membership checks with enums and strings."""
        assert LanguagePropertyName.NAME in LANGUAGE_SCHEMA
        assert "fallback_language" in LANGUAGE_SCHEMA
        assert "elements" not in LANGUAGE_SCHEMA


class TestCollectionPatches:
    """Tests for add, remove and move on collection properties."""

    def test_add_element(self) -> None:
        """Test adding an element to a content type."""
        operation = CONTENT_TYPE_SCHEMA.add(
            ContentTypePropertyName.ELEMENTS,
            {"type": "text", "name": "Title", "codename": "title", "is_required": True},
        )
        assert isinstance(operation.value, TextElement)

        document = PatchDocumentBuilder.build(CONTENT_TYPE_SCHEMA, [operation])

        assert document == [
            {
                "op": "addInto",
                "path": "/elements",
                "value": {
                    "type": "text",
                    "name": "Title",
                    "codename": "title",
                    "is_required": True,
                    "is_non_localizable": False,
                },
            }
        ]

    def test_add_rejects_unknown_element_type(self) -> None:
        """Test that the element discriminator is enforced."""
        with pytest.raises(InvalidPatchOperationError):
            CONTENT_TYPE_SCHEMA.add(
                ContentTypePropertyName.ELEMENTS, {"type": "hologram", "name": "X"}
            )

    def test_remove_element(self) -> None:
        """Test removing an element by codename."""
        operation = CONTENT_TYPE_SCHEMA.remove(
            ContentTypePropertyName.ELEMENTS, Reference.by_codename("title")
        )

        document = PatchDocumentBuilder.build(CONTENT_TYPE_SCHEMA, [operation])

        assert document == [{"op": "remove", "path": "/elements/codename:title"}]

    def test_remove_requires_target(self) -> None:
        """Test that remove needs a target item."""
        operation = PatchOperation(property_name="elements", op=OperationKind.REMOVE)

        with pytest.raises(InvalidPatchOperationError, match="target item is required"):
            PatchDocumentBuilder.build(CONTENT_TYPE_SCHEMA, [operation])

    def test_move_term_after_sibling(self) -> None:
        """Test moving a taxonomy term behind another."""
        operation = TAXONOMY_SCHEMA.move(
            TaxonomyPropertyName.TERMS,
            Reference.by_codename("cats"),
            after=Reference.by_codename("dogs"),
        )

        document = PatchDocumentBuilder.build(TAXONOMY_SCHEMA, [operation])

        assert document == [
            {"op": "move", "path": "/terms/codename:cats", "after": {"codename": "dogs"}}
        ]

    def test_move_requires_exactly_one_position(self) -> None:
        """Test that move needs before or after, not both."""
        with pytest.raises(InvalidPatchOperationError, match="exactly one of before or after"):
            TAXONOMY_SCHEMA.move(TaxonomyPropertyName.TERMS, Reference.by_codename("cats"))

        with pytest.raises(InvalidPatchOperationError, match="exactly one of before or after"):
            TAXONOMY_SCHEMA.move(
                TaxonomyPropertyName.TERMS,
                Reference.by_codename("cats"),
                before=Reference.by_codename("dogs"),
                after=Reference.by_codename("birds"),
            )

    def test_replace_rejects_target(self) -> None:
        """Test that replace does not accept collection addressing."""
        operation = PatchOperation(
            property_name="name", value="Article", target=Reference.by_codename("title")
        )

        with pytest.raises(InvalidPatchOperationError, match="does not take a target"):
            PatchDocumentBuilder.build(CONTENT_TYPE_SCHEMA, [operation])

    def test_mixed_document_keeps_order(self) -> None:
        """Test a document mixing renames and element changes."""
        operations = [
            CONTENT_TYPE_SCHEMA.replace(ContentTypePropertyName.NAME, "Article"),
            CONTENT_TYPE_SCHEMA.remove(
                ContentTypePropertyName.ELEMENTS, Reference.by_codename("summary")
            ),
            CONTENT_TYPE_SCHEMA.move(
                ContentTypePropertyName.ELEMENTS,
                Reference.by_codename("title"),
                before=Reference.by_codename("body"),
            ),
        ]

        document = PatchDocumentBuilder.build(CONTENT_TYPE_SCHEMA, operations)

        assert [entry["op"] for entry in document] == ["replace", "remove", "move"]
        assert document[2]["before"] == {"codename": "body"}


class TestPropertyNameScoping:
    """Tests for property names belonging to one resource family."""

    def test_other_family_enum_rejected(self) -> None:
        """Test that a content item property cannot patch a language."""
        operation = PatchOperation(property_name=ContentItemPropertyName.NAME, value="Deutsch")

        with pytest.raises(InvalidPatchOperationError, match="ContentItemPropertyName") as exc_info:
            PatchDocumentBuilder.build(LANGUAGE_SCHEMA, [operation])

        assert exc_info.value.property_name == "name"

    def test_other_family_enum_rejected_at_construction(self) -> None:
        """Test that schema constructors enforce the same scoping."""
        with pytest.raises(InvalidPatchOperationError):
            LANGUAGE_SCHEMA.replace(ContentTypePropertyName.NAME, "Deutsch")

    def test_other_family_enum_not_in_schema(self) -> None:
        """Test membership checks with an enum of another family."""
        assert ContentItemPropertyName.NAME not in LANGUAGE_SCHEMA
        assert LanguagePropertyName.NAME in LANGUAGE_SCHEMA

    def test_plain_string_still_accepted(self) -> None:
        """Test that string property names are looked up by value."""
        document = PatchDocumentBuilder.build(
            LANGUAGE_SCHEMA, [PatchOperation(property_name="name", value="Deutsch")]
        )
        assert document == [{"op": "replace", "path": "/name", "value": "Deutsch"}]

    def test_property_enum_not_serialized(self) -> None:
        """Test that the enum origin stays out of dumps."""
        operation = PatchOperation(property_name=LanguagePropertyName.NAME, value="Deutsch")

        assert operation.property_enum is LanguagePropertyName
        assert "property_enum" not in operation.model_dump()


class TestStringValues:
    """Tests for non-blank string properties."""

    def test_surrounding_whitespace_kept(self) -> None:
        """Test that names are sent exactly as given."""
        document = PatchDocumentBuilder.build(
            LANGUAGE_SCHEMA,
            [PatchOperation(property_name=LanguagePropertyName.NAME, value="  Deutsch  ")],
        )

        assert document[0]["value"] == "  Deutsch  "

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_rejected(self, value: str) -> None:
        """Test that blank names fail validation."""
        with pytest.raises(InvalidPatchOperationError, match="invalid value"):
            LANGUAGE_SCHEMA.replace(LanguagePropertyName.NAME, value)

    def test_move_without_target_rejected_under_construct(self) -> None:
        """Test that an unvalidated move without a target still fails cleanly."""
        operation = PatchOperation.model_construct(
            property_name="terms",
            op=OperationKind.MOVE,
            value=None,
            target=None,
            before=Reference.by_codename("dogs"),
            after=None,
            property_enum=None,
        )

        with pytest.raises(InvalidPatchOperationError, match="target item is required"):
            PatchDocumentBuilder.build(TAXONOMY_SCHEMA, [operation])
