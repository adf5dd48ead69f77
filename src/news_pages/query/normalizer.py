"""Query parameter normalization."""

from collections.abc import Mapping
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize_query(
    params: Mapping[str, Any],
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """Return a cleaned copy of a raw query parameter bag.

    Keys mapping to ``None`` are dropped so they never reach the query string.
    Falsy values such as ``0``, ``False`` and ``""`` are kept. ``page`` and
    ``pageSize`` are defaulted when absent. The input is never mutated, and
    normalizing an already normalized bag returns an equal bag.

    Args:
        params: Raw parameters, e.g. straight from the CLI.
        default_page_size: Page size used when ``pageSize`` is absent.

    Returns:
        A new dict with no ``None`` values and both pagination keys set.
    """
    cleaned = {key: value for key, value in params.items() if value is not None}
    cleaned.setdefault("page", DEFAULT_PAGE)
    cleaned.setdefault("pageSize", default_page_size)
    return cleaned
