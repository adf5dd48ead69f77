"""News Pages: paginated NewsAPI queries from the command line."""

__version__ = "0.1.0"

from news_pages.client import NewsAPIClient, NewsClient
from news_pages.config import NewsPagesConfig, create_from_config, load_config
from news_pages.data import (
    Page,
    ProjectedItem,
    ProjectedView,
    ProjectionSummary,
    UnifiedResult,
)
from news_pages.endpoints import (
    ENDPOINTS,
    EVERYTHING,
    SOURCES,
    TOP_HEADLINES,
    EndpointSpec,
    get_endpoint,
)
from news_pages.errors import (
    EmptyOrMalformedResult,
    InvalidPageRequest,
    NewsPagesError,
    PartialFetchFailure,
    PersistenceError,
)
from news_pages.fetch import PageFetcher, merge_pages
from news_pages.output import persist, project, render
from news_pages.query import normalize_query

__all__ = [
    # Models
    "Page",
    "ProjectedItem",
    "ProjectedView",
    "ProjectionSummary",
    "UnifiedResult",
    # Endpoints
    "ENDPOINTS",
    "EVERYTHING",
    "EndpointSpec",
    "SOURCES",
    "TOP_HEADLINES",
    "get_endpoint",
    # Errors
    "EmptyOrMalformedResult",
    "InvalidPageRequest",
    "NewsPagesError",
    "PartialFetchFailure",
    "PersistenceError",
    # Clients
    "NewsAPIClient",
    "NewsClient",
    # Pipeline stages
    "PageFetcher",
    "merge_pages",
    "normalize_query",
    "persist",
    "project",
    "render",
    # Config
    "NewsPagesConfig",
    "create_from_config",
    "load_config",
]
