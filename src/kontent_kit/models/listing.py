"""One page of a listing response."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import FormatError, InvalidReferenceError

ItemT = TypeVar("ItemT")


class ListingPage(BaseModel, Generic[ItemT]):
    """Items of one page plus the cursor for the next one.

    A missing or empty continuation token marks the last page.
    """

    items: list[ItemT] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def is_last(self) -> bool:
        return not self.continuation_token

    @classmethod
    def from_response(
        cls,
        data: Any,
        item_type: type[ItemT],
        key: str = "items",
    ) -> "ListingPage[ItemT]":
        """Parse a raw listing response.

        Items are read from ``key`` (e.g. ``"languages"``), falling back to
        ``"items"``.

        Args:
            data: Decoded response body
            item_type: Model each item is parsed into
            key: Name of the array holding the items

        Raises:
            FormatError: If the body is not a listing object, or an item
                does not match ``item_type``
        """
        if not isinstance(data, dict):
            raise FormatError(f"Expected a listing object, got {type(data).__name__}")

        raw_items = data.get(key, data.get("items"))
        if raw_items is None:
            raise FormatError(f"Listing response has no '{key}' array")

        pagination = data.get("pagination") or {}
        if not isinstance(pagination, dict):
            raise FormatError("Listing response has a malformed 'pagination' object")

        adapter = TypeAdapter(list[item_type])  # type: ignore[valid-type]
        try:
            items = adapter.validate_python(raw_items)
        except (PydanticValidationError, InvalidReferenceError) as e:
            raise FormatError(f"Listing response has an invalid item: {e}") from e
        return cls(items=items, continuation_token=pagination.get("continuation_token") or None)
