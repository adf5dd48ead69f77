"""Core data models for News Pages."""

from dataclasses import dataclass, field
from typing import Any

from news_pages.errors import EmptyOrMalformedResult

OK_STATUS = "ok"

# A decoded item (article or source) exactly as the remote service returned it.
Item = dict[str, Any]


@dataclass(frozen=True)
class Page:
    """One remote response for a single page index.

    ``items`` is None when the payload did not carry the endpoint's item list.
    ``error`` is set when the fetch for this page raised and the failure was
    recorded instead of propagated.
    """

    index: int
    status: str
    total_results: int | None = None
    items: list[Item] | None = None
    error: str | None = None

    @classmethod
    def from_payload(cls, index: int, payload: dict[str, Any], *, items_key: str) -> "Page":
        """Build a page from a decoded JSON response.

        Raises:
            EmptyOrMalformedResult: If the payload is not a JSON object.
        """
        if not isinstance(payload, dict):
            raise EmptyOrMalformedResult(items_key)
        return cls(
            index=index,
            status=payload.get("status", ""),
            total_results=payload.get("totalResults"),
            items=payload.get(items_key),
        )

    @classmethod
    def failed(cls, index: int, exc: BaseException) -> "Page":
        """Build a page standing in for a fetch that raised."""
        return cls(index=index, status="error", error=f"{type(exc).__name__}: {exc}")

    @property
    def ok(self) -> bool:
        return self.status == OK_STATUS


@dataclass(frozen=True)
class UnifiedResult:
    """The merge of every fetched page of one logical query."""

    status: str
    items_key: str
    total_results: int | None = None
    items: list[Item] | None = None
    page_count: int = 1

    @classmethod
    def from_page(cls, page: Page, *, items_key: str) -> "UnifiedResult":
        """Wrap a single page without merging."""
        return cls(
            status=page.status,
            items_key=items_key,
            total_results=page.total_results,
            items=page.items,
            page_count=1,
        )

    @property
    def is_multi_page(self) -> bool:
        return self.page_count > 1

    def to_payload(self) -> dict[str, Any]:
        """Return the result in the remote service's own response shape."""
        payload: dict[str, Any] = {"status": self.status}
        if self.total_results is not None:
            payload["totalResults"] = self.total_results
        payload[self.items_key] = self.items
        return payload


@dataclass(frozen=True)
class ProjectedItem:
    """The rendered fields of one item, in display order."""

    fields: tuple[tuple[str, Any], ...]


@dataclass(frozen=True)
class ProjectionSummary:
    """Trailing count footer of a projection."""

    processed: int
    total_results: int | None = None


@dataclass(frozen=True)
class ProjectedView:
    """Display-only view of a result. Never persisted."""

    records: tuple[ProjectedItem, ...] = field(default_factory=tuple)
    summary: ProjectionSummary = field(default_factory=lambda: ProjectionSummary(processed=0))
