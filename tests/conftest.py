"""Shared fixtures: a stub remote service with controllable completion order."""

import asyncio
from typing import Any

import pytest


def article(name: str) -> dict[str, Any]:
    return {
        "source": {"id": None, "name": "Example"},
        "author": f"author {name}",
        "title": f"title {name}",
        "description": f"description {name}",
        "url": f"https://example.com/{name}",
        "publishedAt": "2026-10-01T10:00:00Z",
    }


class StubNewsClient:
    """In-memory NewsClient serving canned pages.

    Args:
        pages: Mapping of page index to payload (or exception to raise).
        delays: Mapping of page index to seconds to sleep before answering,
            used to force out-of-order completion.
    """

    def __init__(
        self,
        pages: dict[int, dict[str, Any] | BaseException],
        *,
        delays: dict[int, float] | None = None,
    ) -> None:
        self._pages = pages
        self._delays = delays or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.completed: list[int] = []
        self.cancelled: list[int] = []
        self.calls_before_first_completion: int | None = None
        self.closed = False

    async def __aenter__(self) -> "StubNewsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def sources(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._serve("sources", params)

    async def everything(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._serve("everything", params)

    async def top_headlines(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._serve("top_headlines", params)

    async def _serve(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((method, params))
        index = params.get("page", 1)
        try:
            await asyncio.sleep(self._delays.get(index, 0))
        except asyncio.CancelledError:
            self.cancelled.append(index)
            raise
        payload = self._pages[index]
        if isinstance(payload, BaseException):
            raise payload
        if self.calls_before_first_completion is None:
            self.calls_before_first_completion = len(self.calls)
        self.completed.append(index)
        return payload


@pytest.fixture
def three_pages() -> dict[int, dict[str, Any]]:
    """Three pages of two articles each, all reporting 50 total results."""
    names = ["a", "b", "c", "d", "e", "f"]
    return {
        i + 1: {
            "status": "ok",
            "totalResults": 50,
            "articles": [article(n) for n in names[i * 2 : i * 2 + 2]],
        }
        for i in range(3)
    }


@pytest.fixture
def make_stub() -> type[StubNewsClient]:
    """Factory for stub clients."""
    return StubNewsClient
