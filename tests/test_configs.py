"""
Test suite for settings loading.

System role: Verification of environment-driven configuration
"""

import pytest
from pydantic import ValidationError

from news_rag.configs.database import DatabaseSettings
from news_rag.configs.feeds import DEFAULT_SOURCES, FeedSettings
from news_rag.configs.generation import GenerationSettings
from news_rag.configs.settings import Settings


class TestDatabaseSettings:
    def test_should_build_asyncpg_url_from_fields(self, monkeypatch) -> None:
        monkeypatch.delenv("POSTGRES_URL", raising=False)
        settings = DatabaseSettings(host="db", port=5433, user="news", password="secret", db="corpus", sslmode="disable")

        assert settings.async_database_url == "postgresql+asyncpg://news:secret@db:5433/corpus"
        assert settings.is_sqlite is False

    def test_should_require_ssl_when_configured(self) -> None:
        settings = DatabaseSettings(host="db", user="news", password="secret", db="corpus", sslmode="require", url=None)

        assert settings.async_database_url.endswith("?ssl=require")

    def test_url_override_should_win(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "sqlite+aiosqlite:///./news.db")

        settings = DatabaseSettings()

        assert settings.async_database_url == "sqlite+aiosqlite:///./news.db"
        assert settings.is_sqlite is True


class TestGenerationSettings:
    def test_should_read_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("GEMINI_TEMPERATURE", "0.2")

        settings = GenerationSettings()

        assert settings.api_key == "env-key"
        assert settings.temperature == 0.2
        assert settings.model == "gemini-2.0-flash"


class TestFeedSettings:
    def test_defaults_should_list_reuters_feeds(self, monkeypatch) -> None:
        monkeypatch.delenv("FEEDS_SOURCES", raising=False)

        settings = FeedSettings()

        assert settings.sources == DEFAULT_SOURCES
        assert {source.name for source in settings.sources} == {"Reuters"}

    def test_sources_should_parse_from_json_environment(self, monkeypatch) -> None:
        monkeypatch.setenv(
            "FEEDS_SOURCES",
            '[{"name": "Wire", "url": "https://feeds.example.com/wire"}]',
        )
        monkeypatch.setenv("FEEDS_MAX_CONCURRENCY", "5")

        settings = FeedSettings()

        assert [source.url for source in settings.sources] == ["https://feeds.example.com/wire"]
        assert settings.max_concurrency == 5


class TestBaseSettings:
    def test_log_level_should_be_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")
