"""Lazy iteration over paginated listing endpoints.

The iterators fetch pages on demand: the first page on the first pull,
then one follow-up request per exhausted page while the service keeps
returning a continuation token. Items come out in page order and, within a
page, in the order the service sent them.

The service may change between page fetches. Items can then appear twice
or be skipped; the iterators do not deduplicate or detect this.

Example:
    >>> with ManagementClient(config) as client:
    ...     for language in client.languages.list():
    ...         print(language.codename)
"""

import logging
from collections import deque
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Generic, TypeVar

from ..models.listing import ListingPage

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")

CONTINUATION_HEADER = "x-continuation"


class PagedResponseIterator(Generic[ItemT]):
    """Iterates over every item of a listing, one page at a time.

    Instances are single-use: once exhausted they stay exhausted and issue
    no further requests. Ask the resource for a new listing to start over.

    Args:
        fetch_page: Called with the continuation token (None for the first
            page) and returning the parsed page
    """

    def __init__(self, fetch_page: Callable[[str | None], ListingPage[ItemT]]) -> None:
        self._fetch_page = fetch_page
        self._buffer: deque[ItemT] = deque()
        self._continuation_token: str | None = None
        self._pages_fetched = 0
        self._exhausted = False

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __iter__(self) -> "PagedResponseIterator[ItemT]":
        return self

    def __next__(self) -> ItemT:
        while not self._buffer:
            page = self._next_page()
            if page is None:
                raise StopIteration
            self._buffer.extend(page.items)
        return self._buffer.popleft()

    def pages(self) -> Iterator[ListingPage[ItemT]]:
        """Iterate over the remaining pages instead of single items.

        Items already buffered from a partly consumed page are yielded
        first, as a page of their own.
        """
        if self._buffer:
            yield ListingPage(items=list(self._buffer), continuation_token=self._continuation_token)
            self._buffer.clear()

        while (page := self._next_page()) is not None:
            yield page

    def get_all(self) -> list[ItemT]:
        """Fetch every remaining page and return the items as a list."""
        return list(self)

    def _next_page(self) -> ListingPage[ItemT] | None:
        if self._exhausted:
            return None

        page = self._fetch_page(self._continuation_token)
        self._pages_fetched += 1
        self._continuation_token = page.continuation_token or None
        self._exhausted = self._continuation_token is None

        logger.debug(
            f"Fetched page {self._pages_fetched} with {len(page.items)} items "
            f"(last page: {self._exhausted})"
        )
        return page


class AsyncPagedResponseIterator(Generic[ItemT]):
    """Async counterpart of PagedResponseIterator.

    Example:
        >>> async with AsyncManagementClient(config) as client:
        ...     async for item in client.content_items.list():
        ...         print(item.name)
    """

    def __init__(
        self, fetch_page: Callable[[str | None], Awaitable[ListingPage[ItemT]]]
    ) -> None:
        self._fetch_page = fetch_page
        self._buffer: deque[ItemT] = deque()
        self._continuation_token: str | None = None
        self._pages_fetched = 0
        self._exhausted = False

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __aiter__(self) -> "AsyncPagedResponseIterator[ItemT]":
        return self

    async def __anext__(self) -> ItemT:
        while not self._buffer:
            page = await self._next_page()
            if page is None:
                raise StopAsyncIteration
            self._buffer.extend(page.items)
        return self._buffer.popleft()

    async def pages(self) -> AsyncIterator[ListingPage[ItemT]]:
        """Iterate over the remaining pages instead of single items."""
        if self._buffer:
            yield ListingPage(items=list(self._buffer), continuation_token=self._continuation_token)
            self._buffer.clear()

        while (page := await self._next_page()) is not None:
            yield page

    async def get_all(self) -> list[ItemT]:
        """Fetch every remaining page and return the items as a list."""
        return [item async for item in self]

    async def _next_page(self) -> ListingPage[ItemT] | None:
        if self._exhausted:
            return None

        page = await self._fetch_page(self._continuation_token)
        self._pages_fetched += 1
        self._continuation_token = page.continuation_token or None
        self._exhausted = self._continuation_token is None

        logger.debug(
            f"Fetched page {self._pages_fetched} with {len(page.items)} items "
            f"(last page: {self._exhausted})"
        )
        return page
