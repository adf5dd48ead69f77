"""Data models for News Pages."""

from news_pages.data.models import (
    OK_STATUS,
    Item,
    Page,
    ProjectedItem,
    ProjectedView,
    ProjectionSummary,
    UnifiedResult,
)

__all__ = [
    "OK_STATUS",
    "Item",
    "Page",
    "ProjectedItem",
    "ProjectedView",
    "ProjectionSummary",
    "UnifiedResult",
]
