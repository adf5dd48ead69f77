"""Pydantic configuration models for News Pages."""

from typing import Literal

from pydantic import BaseModel, Field

from news_pages.client.newsapi import API_KEY_ENV, NEWSAPI_BASE_URL
from news_pages.query.normalizer import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

# ============================================================
# Remote Service Config
# ============================================================


class ApiConfig(BaseModel):
    """Configuration for the NewsAPI client."""

    base_url: str = NEWSAPI_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    api_key_env: str = API_KEY_ENV

    model_config = {"frozen": True}


# ============================================================
# Query Defaults
# ============================================================


class DefaultsConfig(BaseModel):
    """Defaults applied to every query."""

    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    fail_fast: bool = True

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsPagesConfig(BaseModel):
    """Root configuration for News Pages."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
