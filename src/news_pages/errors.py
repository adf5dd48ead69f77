"""Errors raised by the fetch, projection and persistence stages."""

from collections.abc import Iterable
from pathlib import Path


class NewsPagesError(Exception):
    """Base class for every error raised by News Pages itself."""


class InvalidPageRequest(NewsPagesError):
    """A page index or page count below 1 was requested."""

    def __init__(self, page: int, *, what: str = "page") -> None:
        self.page = page
        super().__init__(f"Invalid {what} {page!r}: must be 1 or greater")


class PartialFetchFailure(NewsPagesError):
    """One or more pages of a multi-page fetch failed."""

    def __init__(
        self,
        failed_indices: Iterable[int],
        reasons: dict[int, str] | None = None,
    ) -> None:
        self.failed_indices = tuple(sorted(failed_indices))
        self.reasons = reasons or {}
        pages = ", ".join(str(i) for i in self.failed_indices)
        msg = f"Failed to fetch page(s) {pages}"
        details = "; ".join(f"page {i}: {r}" for i, r in sorted(self.reasons.items()))
        if details:
            msg = f"{msg} ({details})"
        super().__init__(msg)


class EmptyOrMalformedResult(NewsPagesError):
    """The result carries no item collection."""

    def __init__(self, items_key: str) -> None:
        self.items_key = items_key
        super().__init__(f"No {items_key} present in the response")


class PersistenceError(NewsPagesError):
    """Writing the result to disk failed."""

    def __init__(self, destination: Path, reason: str) -> None:
        self.destination = destination
        super().__init__(f"Could not write result to {destination}: {reason}")
