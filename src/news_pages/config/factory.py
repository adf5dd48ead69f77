"""Factory functions to create components from configuration."""

from news_pages.client.newsapi import NewsAPIClient
from news_pages.config.models import ApiConfig, NewsPagesConfig
from news_pages.fetch.fetcher import PageFetcher


def create_client(config: ApiConfig, *, api_key: str | None = None) -> NewsAPIClient:
    """Create a NewsAPI client from config."""
    return NewsAPIClient(
        api_key=api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        api_key_env=config.api_key_env,
    )


def create_from_config(
    config: NewsPagesConfig,
    *,
    api_key: str | None = None,
) -> tuple[NewsAPIClient, PageFetcher]:
    """Create the client and page fetcher from root config.

    Args:
        config: Root configuration.
        api_key: Explicit API key, overriding the environment.

    Returns:
        Tuple of (client, fetcher). The caller owns the client and closes it.

    Raises:
        ValueError: If no API key is available.
    """
    client = create_client(config.api, api_key=api_key)
    fetcher = PageFetcher(client, fail_fast=config.defaults.fail_fast)
    return (client, fetcher)
