from news_pages.fetch.aggregator import merge_pages
from news_pages.fetch.fetcher import PageFetcher

__all__ = [
    "PageFetcher",
    "merge_pages",
]
