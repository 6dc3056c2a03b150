"""Lazy iteration over paginated listings.

Cursored listings (friends, followers, blocks, mutes, follow requests) hand out
one page at a time together with an opaque ``next_cursor``; the search
listing is paginated by page number instead. Both are exposed here as plain
Python iterators yielding one ``Response`` per account or ID:

    for resp in itertools.islice(friends_of("rustlang", creds).with_page_size(5), 5):
        print(resp.response.screen_name)

Each ``next()`` either pops an item buffered from the last page or performs
exactly one request. A failed request raises out of ``next()`` and leaves the
iterator where it was, so calling ``next()`` again repeats the same request.
Iterators are single-use and not thread-safe.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from social_graph import links
from social_graph.account import AccountSelector, account_params
from social_graph.auth import AnyCredentials
from social_graph.core.settings import settings
from social_graph.errors import ConfigurationError, StalledCursorError
from social_graph.parsing import decode_page, decode_single
from social_graph.schemas.common import NO_CURSOR, Cursor, IDCursor, Page, Response, UserCursor
from social_graph.schemas.user import TwitterUser

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from social_graph.transport import Transport

T = TypeVar("T")

# Configure logger for this module
logger = logging.getLogger(__name__)


class PageFetcher(Generic[T]):
    """Fetches single pages of one cursored listing.

    The envelope model decides the listing shape: ``UserCursor`` pages carry
    full user records, ``IDCursor`` pages carry bare numeric IDs. Listings
    without a page size option (blocks, mutes, follow requests) never send
    ``count``, whatever hint the iterator holds.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: str,
        envelope: type[Cursor],
        supports_page_size: bool = True,
    ) -> None:
        self.transport = transport
        self.endpoint = endpoint
        self.envelope = envelope
        self.supports_page_size = supports_page_size

    @classmethod
    def users(
        cls, transport: Transport, endpoint: str, supports_page_size: bool = True
    ) -> PageFetcher[TwitterUser]:
        return cls(transport, endpoint, UserCursor, supports_page_size)

    @classmethod
    def ids(
        cls, transport: Transport, endpoint: str, supports_page_size: bool = True
    ) -> PageFetcher[int]:
        return cls(transport, endpoint, IDCursor, supports_page_size)

    @staticmethod
    def build_params(
        cursor: int,
        page_size: int | None,
        account: AccountSelector | None,
    ) -> dict[str, str]:
        """Return the request parameters for one page.

        The start-of-list cursor is sent as no cursor at all, and listings
        about the authenticated user take no account parameter.
        """
        params: dict[str, str] = {}
        if cursor != NO_CURSOR:
            params["cursor"] = str(cursor)
        if page_size is not None:
            params["count"] = str(page_size)
        if account is not None:
            params.update(account_params(account))
        return params

    def fetch(
        self,
        cursor: int,
        page_size: int | None,
        account: AccountSelector | None,
        credentials: AnyCredentials,
    ) -> Page[T]:
        """Perform one request and decode the page it returns."""
        if not self.supports_page_size:
            page_size = None
        params = self.build_params(cursor, page_size, account)
        response = self.transport.get(self.endpoint, params, credentials)
        page = decode_page(response, self.envelope)
        logger.debug(
            "Fetched %d items from %s (cursor=%s, next_cursor=%d)",
            len(page.items),
            self.endpoint,
            params.get("cursor", "<none>"),
            page.next_cursor,
        )
        return page


class _PagedIterator(ABC, Generic[T]):
    """Buffering shared by cursor- and offset-paginated iterators."""

    def __init__(self, credentials: AnyCredentials, page_size: int | None) -> None:
        self._credentials = credentials
        self._page_size = page_size
        self._buffer: deque[Response[T]] = deque()
        self._started = False
        self._done = False

    @property
    def page_size(self) -> int | None:
        return self._page_size

    @property
    def started(self) -> bool:
        """True once the first request has been issued."""
        return self._started

    @property
    def done(self) -> bool:
        """True once the listing reported its end; buffered items may remain."""
        return self._done

    def with_page_size(self, page_size: int) -> Self:
        """Set the page size hint, only allowed before the first request.

        Listings without a page size option keep the hint but do not send it;
        only the returned pages are trusted.

        Raises:
            ConfigurationError: If iteration already started or ``page_size`` < 1.
        """
        if self._started:
            raise ConfigurationError("Page size cannot change after iteration has started")
        if page_size < 1:
            raise ConfigurationError(f"Page size must be positive, got {page_size}")
        self._page_size = page_size
        return self

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Response[T]:
        while not self._buffer:
            if self._done:
                raise StopIteration
            self._load()
        return self._buffer.popleft()

    @abstractmethod
    def _load(self) -> None:
        """Fetch the next page into the buffer, or mark the iterator done."""


class CursorIterator(_PagedIterator[T]):
    """Iterator over a cursored listing, fetching pages on demand."""

    def __init__(
        self,
        fetcher: PageFetcher[T],
        credentials: AnyCredentials,
        account: AccountSelector | None = None,
        page_size: int | None = None,
        max_empty_pages: int | None = None,
    ) -> None:
        super().__init__(credentials, page_size)
        self._fetcher = fetcher
        self._account = account
        if max_empty_pages is None:
            max_empty_pages = settings.max_empty_pages
        if max_empty_pages < 1:
            raise ConfigurationError(f"max_empty_pages must be positive, got {max_empty_pages}")
        self._max_empty_pages = max_empty_pages
        self._previous_cursor = NO_CURSOR
        self._next_cursor = NO_CURSOR
        self._empty_pages = 0

    @property
    def endpoint(self) -> str:
        return self._fetcher.endpoint

    @property
    def account(self) -> AccountSelector | None:
        return self._account

    @property
    def next_cursor(self) -> int:
        """Cursor the next request will use; 0 before the first and after the last page."""
        return self._next_cursor

    @property
    def previous_cursor(self) -> int:
        return self._previous_cursor

    def _fetch_page(self) -> Page[T]:
        self._started = True
        page = self._fetcher.fetch(
            self._next_cursor, self._page_size, self._account, self._credentials
        )
        # Only a successful fetch moves the iterator
        self._previous_cursor = page.previous_cursor
        self._next_cursor = page.next_cursor
        if page.is_last:
            self._done = True
        return page

    def _load(self) -> None:
        page = self._fetch_page()
        if page.items:
            self._empty_pages = 0
            self._buffer.extend(Response(page.rate_limit, item) for item in page.items)
            return
        if self._done:
            return

        self._empty_pages += 1
        if self._empty_pages >= self._max_empty_pages:
            stalled = self._empty_pages
            self._empty_pages = 0
            logger.warning(
                "%s returned %d empty pages in a row, stopping at cursor %d",
                self.endpoint,
                stalled,
                self._next_cursor,
            )
            raise StalledCursorError(self.endpoint, self._next_cursor, stalled)

    def pages(self) -> Iterator[Page[T]]:
        """Iterate over whole pages, empty ones included, until the listing ends.

        Only available on an iterator that has not been started, so pages and
        items cannot interleave out of server order.

        Raises:
            ConfigurationError: If ``next()`` or ``pages()`` already issued a request.
        """
        if self._started:
            raise ConfigurationError("pages() is only available before iteration has started")
        return self._iter_pages()

    def _iter_pages(self) -> Iterator[Page[T]]:
        while not self._done:
            yield self._fetch_page()


class SearchIterator(_PagedIterator[TwitterUser]):
    """Iterator over user search results, paginated by page number."""

    def __init__(
        self,
        transport: Transport,
        query: str,
        credentials: AnyCredentials,
        page_size: int | None = None,
    ) -> None:
        super().__init__(credentials, page_size or settings.search_page_size)
        self._transport = transport
        self._query = query
        self._page_number = 1

    @property
    def query(self) -> str:
        return self._query

    @property
    def page_number(self) -> int:
        """Page the next request will ask for, starting at 1."""
        return self._page_number

    def _params(self) -> dict[str, Any]:
        return {
            "q": self._query,
            "page": str(self._page_number),
            "count": str(self._page_size),
        }

    def _load(self) -> None:
        self._started = True
        response = self._transport.get(links.SEARCH, self._params(), self._credentials)
        result = decode_single(response, list[TwitterUser])
        logger.debug(
            "Fetched %d search results for %r (page=%d)",
            len(result.response),
            self._query,
            self._page_number,
        )

        if not result.response:
            self._done = True
            return
        self._page_number += 1
        self._buffer.extend(Response(result.rate_limit, user) for user in result.response)
