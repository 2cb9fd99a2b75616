"""Follow ``Link: <url>; rel="next"`` headers as one lazy sequence of pages.

The iterator is driven entirely by the caller: each ``next()`` performs at
most one blocking GET, and nothing is fetched ahead of time. Link-following
is unbounded unless ``max_hops`` is given, so a server whose next links form a
cycle will produce an endless sequence.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from simplehttp.core.errors import PaginationLimitError
from simplehttp.core.http import HTTPClient
from simplehttp.core.logging import get_logger
from simplehttp.models.response import HttpResponse
from simplehttp.utils.links import next_link


logger = get_logger(__name__)


class SequentialLinkIterator(Iterator[HttpResponse]):
    """Single-pass iterator over a resource paginated with next links.

    States: an initial response may be pending (not yet yielded); afterwards
    the iterator holds the most recently yielded response and the next link
    read from it. Once no next link is found the iterator is exhausted for
    good.
    """

    def __init__(
        self,
        initial: HttpResponse,
        client: HTTPClient,
        *,
        include_initial: bool = True,
        max_hops: int | None = None,
        case_sensitive: bool = True,
    ) -> None:
        if max_hops is not None and max_hops < 0:
            raise ValueError(f"max_hops must be >= 0, got {max_hops}")
        self._client = client
        self._current = initial
        self._pending = include_initial
        self._max_hops = max_hops
        self._case_sensitive = case_sensitive
        self._hops = 0
        self._next_url = next_link(initial.headers, case_sensitive=case_sensitive)

    @property
    def current(self) -> HttpResponse:
        """The most recently held response."""
        return self._current

    @property
    def hops(self) -> int:
        """Number of GET requests issued so far."""
        return self._hops

    def has_next(self) -> bool:
        """Whether another response can be produced. Never issues a request."""
        return self._pending or self._next_url is not None

    def __iter__(self) -> SequentialLinkIterator:
        return self

    def __next__(self) -> HttpResponse:
        if self._pending:
            self._pending = False
            return self._current

        url = self._next_url
        if url is None:
            raise StopIteration

        if self._max_hops is not None and self._hops >= self._max_hops:
            raise PaginationLimitError(self._max_hops, url)

        # Transport errors propagate and leave the state untouched
        response = self._client.get(url)

        self._hops += 1
        self._current = response
        self._next_url = next_link(
            response.headers, case_sensitive=self._case_sensitive
        )
        logger.debug(
            "next_link_followed",
            url=url,
            hop=self._hops,
            status_code=response.status_code,
            has_next=self._next_url is not None,
        )
        if self._next_url is None:
            logger.debug("pagination_exhausted", pages_fetched=self._hops)
        return response


def sequential_link_iterator(
    initial: HttpResponse,
    client: HTTPClient,
    *,
    include_initial: bool = True,
    max_hops: int | None = None,
    case_sensitive: bool = True,
) -> SequentialLinkIterator:
    """Create an iterator that starts from ``initial`` and follows next links.

    Args:
        initial: First page, already fetched; yielded first unless
            ``include_initial`` is false
        client: Client used for the follow-up GET requests; borrowed, not closed
        include_initial: Yield ``initial`` before any fetched page
        max_hops: Maximum number of GET requests; ``None`` means unbounded
        case_sensitive: Match the ``Link`` header name exactly

    Returns:
        A lazy, single-pass iterator of responses
    """
    return SequentialLinkIterator(
        initial,
        client,
        include_initial=include_initial,
        max_hops=max_hops,
        case_sensitive=case_sensitive,
    )


def follow_links(
    client: HTTPClient, url: str, **kwargs: Any
) -> SequentialLinkIterator:
    """GET ``url`` and iterate over it and every page it links to."""
    return sequential_link_iterator(client.get(url), client, **kwargs)


__all__ = [
    "SequentialLinkIterator",
    "follow_links",
    "sequential_link_iterator",
]
