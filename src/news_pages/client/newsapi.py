"""NewsAPI client using httpx."""

from __future__ import annotations

import logging
import os
from types import TracebackType
from typing import Any

import httpx

from news_pages.endpoints import EVERYTHING, SOURCES, TOP_HEADLINES

logger = logging.getLogger(__name__)

NEWSAPI_BASE_URL = "https://newsapi.org/v2"
API_KEY_ENV = "NEWS_API_KEY"


class NewsAPIClient:
    """Query the NewsAPI ``/sources``, ``/everything`` and ``/top-headlines`` endpoints.

    A single ``httpx.AsyncClient`` is opened on first use and shared by every
    request, so concurrent page fetches reuse one connection pool. Use the
    client as an async context manager, or call :meth:`aclose` when done.

    Args:
        api_key: NewsAPI key (defaults to the ``NEWS_API_KEY`` env var).
        base_url: API root URL.
        timeout: Request timeout in seconds.
        api_key_env: Environment variable consulted when ``api_key`` is not given.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = NEWSAPI_BASE_URL,
        timeout: float = 30.0,
        api_key_env: str = API_KEY_ENV,
    ) -> None:
        self._api_key = api_key or os.environ.get(api_key_env)
        if not self._api_key:
            raise ValueError(f"NewsAPI key required. Pass api_key or set {api_key_env} env var.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> NewsAPIClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if one was opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def sources(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._get(SOURCES.path, params)

    async def everything(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._get(EVERYTHING.path, params)

    async def top_headlines(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._get(TOP_HEADLINES.path, params)

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"X-Api-Key": self._api_key},  # type: ignore[dict-item]
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue a GET request and return the decoded payload."""
        query = _encode_params(params)
        logger.debug("GET %s %s", path, query)
        response = await self._http().get(path, params=query)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            msg = f"Response from {path} is not valid JSON"
            raise httpx.DecodingError(msg, request=response.request) from e


def _encode_params(params: dict[str, Any]) -> dict[str, str | int]:
    """Flatten parameter values into query-string form.

    Lists become comma-separated strings and booleans lowercase words.
    """
    encoded: dict[str, str | int] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            encoded[key] = ",".join(str(v) for v in value)
        elif isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = value
    return encoded
