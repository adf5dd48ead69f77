"""Merge the pages of one logical query into a single result."""

import logging
from collections.abc import Sequence

from news_pages.data import OK_STATUS, Item, Page, UnifiedResult
from news_pages.errors import PartialFetchFailure

logger = logging.getLogger(__name__)


def merge_pages(pages: Sequence[Page], *, items_key: str) -> UnifiedResult:
    """Merge fetched pages into one result.

    Pages are ordered by their page index, not by the order they arrived in.
    A single page is passed through without merging.

    Args:
        pages: Pages of the same query, in any order.
        items_key: Payload key of the item list ("articles" or "sources").

    Returns:
        The unified result.

    Raises:
        ValueError: If no pages are given.
        PartialFetchFailure: If any page of a multi-page fetch is not "ok".
    """
    if not pages:
        raise ValueError("Cannot merge an empty set of pages")

    if len(pages) == 1:
        return UnifiedResult.from_page(pages[0], items_key=items_key)

    ordered = sorted(pages, key=lambda p: p.index)

    failed = [p for p in ordered if not p.ok]
    if failed:
        raise PartialFetchFailure(
            (p.index for p in failed),
            {p.index: p.error or f"status {p.status!r}" for p in failed},
        )

    first = ordered[0]
    for page in ordered[1:]:
        if page.total_results != first.total_results:
            logger.warning(
                "Page %d reports totalResults=%s but page %d reports %s; using %s",
                page.index,
                page.total_results,
                first.index,
                first.total_results,
                first.total_results,
            )

    items: list[Item] | None = []
    for page in ordered:
        if page.items is None:
            logger.warning("Page %d carries no %s", page.index, items_key)
            items = None
            break
        items.extend(page.items)

    return UnifiedResult(
        status=OK_STATUS,
        items_key=items_key,
        total_results=first.total_results,
        items=items,
        page_count=len(ordered),
    )
