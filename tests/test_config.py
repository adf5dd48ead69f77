"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pydantic
import pytest

from news_pages.client import NewsAPIClient
from news_pages.config import (
    ApiConfig,
    DefaultsConfig,
    LoggingConfig,
    NewsPagesConfig,
    create_client,
    create_from_config,
    get_default_config_path,
    load_config,
)
from news_pages.fetch import PageFetcher


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_api_config_defaults(self) -> None:
        config = ApiConfig()
        assert config.base_url == "https://newsapi.org/v2"
        assert config.timeout == 30.0
        assert config.api_key_env == "NEWS_API_KEY"

    def test_defaults_config_defaults(self) -> None:
        config = DefaultsConfig()
        assert config.page_size == 20
        assert config.fail_fast is True

    def test_logging_config_defaults(self) -> None:
        assert LoggingConfig().level == "INFO"

    def test_root_config_defaults(self) -> None:
        config = NewsPagesConfig()
        assert isinstance(config.api, ApiConfig)
        assert isinstance(config.defaults, DefaultsConfig)

    def test_page_size_above_service_maximum_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DefaultsConfig(page_size=101)

    def test_page_size_below_one_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DefaultsConfig(page_size=0)

    def test_models_are_frozen(self) -> None:
        config = DefaultsConfig()
        with pytest.raises(pydantic.ValidationError):
            config.page_size = 50  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        yaml_content = """
api:
  base_url: http://localhost:8080/v2
  timeout: 5
defaults:
  page_size: 100
  fail_fast: false
logging:
  level: DEBUG
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(Path(f.name))

        assert config.api.base_url == "http://localhost:8080/v2"
        assert config.api.timeout == 5.0
        assert config.defaults.page_size == 100
        assert config.defaults.fail_fast is False
        assert config.logging.level == "DEBUG"

    def test_load_empty_config_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == NewsPagesConfig()

    def test_load_config_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_load_config_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)

    def test_default_config_path_loads(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert load_config(path) == NewsPagesConfig()


class TestFactory:
    """Tests for factory functions."""

    def test_create_client(self) -> None:
        client = create_client(ApiConfig(base_url="http://localhost/v2/"), api_key="k")
        assert isinstance(client, NewsAPIClient)
        assert client._base_url == "http://localhost/v2"

    def test_create_client_without_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NEWS_API_KEY", raising=False)
        with pytest.raises(ValueError, match="NEWS_API_KEY"):
            create_client(ApiConfig())

    def test_create_from_config(self) -> None:
        config = NewsPagesConfig(defaults=DefaultsConfig(fail_fast=False))
        client, fetcher = create_from_config(config, api_key="k")
        assert isinstance(client, NewsAPIClient)
        assert isinstance(fetcher, PageFetcher)
        assert fetcher._client is client
        assert fetcher._fail_fast is False
