"""
Feed source configuration settings.

Fixed list of news feeds polled by the ingestion pipeline, plus fetch limits.

Dependencies: pydantic, pydantic_settings
System role: Ingestion source configuration
"""

from pydantic import BaseModel, Field
from pydantic_settings import SettingsConfigDict

from news_rag.configs.base import BaseSettings


class FeedSource(BaseModel):
    """A single configured feed endpoint."""

    name: str = Field(description="Source name stored on every ingested document")
    url: str = Field(description="Feed endpoint URL")


DEFAULT_SOURCES = [
    FeedSource(name="Reuters", url="https://feeds.reuters.com/reuters/businessNews"),
    FeedSource(name="Reuters", url="https://feeds.reuters.com/reuters/technologyNews"),
    FeedSource(name="Reuters", url="https://feeds.reuters.com/reuters/worldNews"),
    FeedSource(name="Reuters", url="https://feeds.reuters.com/reuters/politicsNews"),
    FeedSource(name="Reuters", url="https://feeds.reuters.com/reuters/sportsNews"),
]


class FeedSettings(BaseSettings):
    """News feed ingestion configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FEEDS_",
        case_sensitive=False,
        extra="ignore",
    )

    sources: list[FeedSource] = Field(
        default_factory=lambda: list(DEFAULT_SOURCES),
        description="Feed endpoints, JSON encoded when set from the environment",
    )
    max_items_per_feed: int = Field(default=10, description="Item blocks read per fetch")
    fetch_timeout: float = Field(default=10.0, description="Feed fetch timeout in seconds")
    max_concurrency: int = Field(default=3, description="Feeds fetched in parallel")
