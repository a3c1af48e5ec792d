"""Operations module for kontent-kit.

Helpers that sit between the transports and the resource facades.
"""

from kontent_kit.operations.pagination import (
    CONTINUATION_HEADER,
    AsyncPagedResponseIterator,
    PagedResponseIterator,
)

__all__ = [
    "CONTINUATION_HEADER",
    "PagedResponseIterator",
    "AsyncPagedResponseIterator",
]
