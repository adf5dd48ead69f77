"""Configuration module for News Pages."""

from news_pages.config.factory import create_client, create_from_config
from news_pages.config.loader import get_default_config_path, load_config
from news_pages.config.models import (
    ApiConfig,
    DefaultsConfig,
    LoggingConfig,
    NewsPagesConfig,
)

__all__ = [
    "ApiConfig",
    "DefaultsConfig",
    "LoggingConfig",
    "NewsPagesConfig",
    "create_client",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
