"""Fetch one or many pages of a query from the remote service."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from news_pages.client.base import NewsClient
from news_pages.data import Page, UnifiedResult
from news_pages.endpoints import EndpointSpec, get_endpoint
from news_pages.errors import InvalidPageRequest
from news_pages.fetch.aggregator import merge_pages

logger = logging.getLogger(__name__)

PAGINATION_KEYS = ("page", "pageSize")


class PageFetcher:
    """Issue the page requests of a query and merge the responses.

    Multi-page queries are fanned out concurrently: every page request is
    scheduled before any is awaited, then all are joined before merging.

    Args:
        client: Remote service client shared by every request.
        fail_fast: If True, the first failed page cancels the others and its
            error propagates unchanged. If False, failures are recorded per
            page and reported together as ``PartialFetchFailure``.
    """

    def __init__(self, client: NewsClient, *, fail_fast: bool = True) -> None:
        self._client = client
        self._fail_fast = fail_fast

    async def fetch(
        self,
        endpoint: str | EndpointSpec,
        params: Mapping[str, Any],
        *,
        pages: int = 1,
    ) -> UnifiedResult:
        """Fetch ``pages`` pages of a query and return the unified result.

        Args:
            endpoint: Endpoint name or spec.
            params: Normalized query parameters.
            pages: Number of pages to fetch, starting from page 1.

        Returns:
            The unified result.

        Raises:
            InvalidPageRequest: If ``params["page"]`` or ``pages`` is below 1.
            PartialFetchFailure: If a page failed and ``fail_fast`` is False.
        """
        spec = endpoint if isinstance(endpoint, EndpointSpec) else get_endpoint(endpoint)
        page = params.get("page", 1)
        if page < 1:
            raise InvalidPageRequest(page)
        if pages < 1:
            raise InvalidPageRequest(pages, what="page count")

        if pages == 1:
            single = await self._fetch_page(spec, params, page)
            return UnifiedResult.from_page(single, items_key=spec.items_key)

        if not spec.paginated:
            msg = f"Endpoint {spec.name!r} does not support pagination"
            raise ValueError(msg)

        logger.debug("Fetching %d pages from %s", pages, spec.name)
        fetched = await self._fetch_all(spec, params, range(1, pages + 1))
        return merge_pages(fetched, items_key=spec.items_key)

    async def _fetch_all(
        self,
        spec: EndpointSpec,
        params: Mapping[str, Any],
        indices: range,
    ) -> list[Page]:
        tasks = [asyncio.ensure_future(self._fetch_page(spec, params, i)) for i in indices]

        if not self._fail_fast:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            pages: list[Page] = []
            for index, result in zip(indices, results, strict=True):
                if isinstance(result, BaseException):
                    logger.warning("Error fetching page %d of %s: %s", index, spec.name, result)
                    pages.append(Page.failed(index, result))
                else:
                    pages.append(result)
            return pages

        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _fetch_page(self, spec: EndpointSpec, params: Mapping[str, Any], index: int) -> Page:
        """Fetch a single page and tag it with its index."""
        request = dict(params)
        if spec.paginated:
            request["page"] = index
        else:
            for key in PAGINATION_KEYS:
                request.pop(key, None)

        logger.debug("Requesting %s page %d", spec.name, index)
        call = getattr(self._client, spec.method)
        payload = await call(request)
        return Page.from_payload(index, payload, items_key=spec.items_key)
