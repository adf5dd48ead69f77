from news_pages.client.base import NewsClient
from news_pages.client.newsapi import API_KEY_ENV, NEWSAPI_BASE_URL, NewsAPIClient

__all__ = [
    "API_KEY_ENV",
    "NEWSAPI_BASE_URL",
    "NewsAPIClient",
    "NewsClient",
]
