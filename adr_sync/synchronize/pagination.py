"""Cursor-following merge of GraphQL connections fetched one or two at a time."""

from typing import Any, Awaitable, Callable, TypeVar

import structlog

from adr_sync.schemas.models import Connection
from adr_sync.synchronize.exceptions import PaginationLimitExceededError
from adr_sync.utils.constants import DEFAULT_MAX_PAGES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

A = TypeVar("A")
B = TypeVar("B")

FetchPage = Callable[[str | None], Awaitable[Connection[Any]]]
FetchPair = Callable[[str | None, str | None], Awaitable[tuple[Connection[Any], Connection[Any]]]]


async def _follow_pages(page: Connection[A], fetch_next: FetchPage, max_pages: int) -> list[A]:
    """Fetch the pages after `page` and return their nodes, excluding the nodes of `page` itself."""
    nodes: list[A] = []
    requests = 0
    while page.page_info.has_next_page:
        if requests >= max_pages:
            raise PaginationLimitExceededError(max_pages)
        requests += 1
        logger.debug("Fetching next page", end_cursor=page.page_info.end_cursor)
        page = await fetch_next(page.page_info.end_cursor)
        nodes.extend(page.nodes)
    return nodes


async def collect_pages(first: Connection[A], fetch_next: FetchPage, max_pages: int = DEFAULT_MAX_PAGES) -> list[A]:
    """Follow a single connection until its last page, concatenating nodes in page order."""
    return list(first.nodes) + await _follow_pages(first, fetch_next, max_pages)


async def merge_paginated_pair(
    first: Connection[A],
    second: Connection[B],
    fetch_pair: FetchPair,
    fetch_first: FetchPage,
    fetch_second: FetchPage,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> tuple[list[A], list[B]]:
    """Merge two connections that were fetched together in one request.

    While both connections have more pages, a combined request advances both
    cursors. Once only one of them has more pages, the cheaper single-field
    request is used for that one and the other list is final.
    """
    first_nodes: list[A] = list(first.nodes)
    second_nodes: list[B] = list(second.nodes)
    requests = 0
    while first.page_info.has_next_page and second.page_info.has_next_page:
        if requests >= max_pages:
            raise PaginationLimitExceededError(max_pages)
        requests += 1
        logger.debug(
            "Fetching next page of both connections",
            first_end_cursor=first.page_info.end_cursor,
            second_end_cursor=second.page_info.end_cursor,
        )
        first, second = await fetch_pair(first.page_info.end_cursor, second.page_info.end_cursor)
        first_nodes.extend(first.nodes)
        second_nodes.extend(second.nodes)

    if first.page_info.has_next_page:
        first_nodes.extend(await _follow_pages(first, fetch_first, max_pages - requests))
    elif second.page_info.has_next_page:
        second_nodes.extend(await _follow_pages(second, fetch_second, max_pages - requests))
    return first_nodes, second_nodes
