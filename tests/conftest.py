"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database session, RSS payload factory,
fake feed client and fake chat model.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from langchain_core.messages import AIMessage


@pytest_asyncio.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with all tables created
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool

    from news_rag.boundary.db import models  # noqa: F401
    from news_rag.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


def _rss_item(item: dict) -> str:
    parts = ["<item>"]
    for tag in ("title", "link", "guid", "description", "pubDate"):
        if tag in item:
            parts.append(f"<{tag}>{item[tag]}</{tag}>")
    parts.append("</item>")
    return "".join(parts)


@pytest.fixture
def make_rss() -> Callable[[list[dict]], bytes]:
    """
    Provide a factory that renders RSS 2.0 payloads.

    Each item dict may carry title, link, guid, description and pubDate; values
    are inserted verbatim so callers control CDATA and escaping.
    """

    def _make(items: list[dict]) -> bytes:
        body = "".join(_rss_item(item) for item in items)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            '<rss version="2.0"><channel>'
            "<title>Test Feed</title>"
            "<link>https://news.example.com</link>"
            "<description>Test feed</description>"
            f"{body}"
            "</channel></rss>"
        ).encode("utf-8")

    return _make


@pytest.fixture
def sample_item() -> dict:
    """Provide a single well-formed RSS item."""
    return {
        "title": "Chipmaker announces record quarter",
        "link": "https://news.example.com/chipmaker-record-quarter",
        "description": "The chipmaker reported record revenue and earnings for the quarter.",
        "pubDate": "Tue, 10 Jun 2025 14:30:00 GMT",
    }


@pytest.fixture
def fake_llm() -> MagicMock:
    """Provide a chat model double whose ainvoke returns a fixed AIMessage."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="Generated answer."))
    return llm
