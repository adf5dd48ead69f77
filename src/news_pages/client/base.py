from typing import Any, Protocol


class NewsClient(Protocol):
    """Interface for the remote news search service.

    Each method takes a normalized parameter bag and returns the decoded JSON
    payload of a single page. Transport errors are raised, never swallowed.
    """

    async def sources(self, params: dict[str, Any]) -> dict[str, Any]:
        """List news sources, optionally filtered by language and category."""
        ...

    async def everything(self, params: dict[str, Any]) -> dict[str, Any]:
        """Search every indexed article."""
        ...

    async def top_headlines(self, params: dict[str, Any]) -> dict[str, Any]:
        """Search live top and breaking headlines."""
        ...
