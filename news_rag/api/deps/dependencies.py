"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide collaborators
(generation client, feed client) are built once from settings and handed
to request-scoped services explicitly.

Dependencies: news_rag.configs, news_rag.application, news_rag.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.application.services import ChatService, IngestionService, SessionService
from news_rag.boundary.db import get_async_db
from news_rag.boundary.feeds.feed_client import FeedClient
from news_rag.configs import get_settings
from news_rag.core.generation_client import GenerationClient
from news_rag.core.retriever import Retriever


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._generation_client: GenerationClient | None = None
        self._feed_client: FeedClient | None = None

    @property
    def generation_client(self) -> GenerationClient:
        """Get cached generation client."""
        if self._generation_client is None:
            self._generation_client = GenerationClient.from_settings(get_settings().generation)
        return self._generation_client

    @property
    def feed_client(self) -> FeedClient:
        """Get cached feed client."""
        if self._feed_client is None:
            self._feed_client = FeedClient(timeout=get_settings().feeds.fetch_timeout)
        return self._feed_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._generation_client = None
        self._feed_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_chat_service(db: AsyncSession = Depends(get_async_db)) -> ChatService:
    """
    Get chat service instance with keyword retriever and generation client.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatService: Chat service for a single request
    """
    cache = get_service_cache()
    return ChatService(
        db=db,
        retriever=Retriever(db),
        generation_client=cache.generation_client,
    )


def get_ingestion_service(db: AsyncSession = Depends(get_async_db)) -> IngestionService:
    """
    Get ingestion service instance for the configured feeds.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        IngestionService: Ingestion service instance
    """
    cache = get_service_cache()
    return IngestionService.from_settings(
        db=db,
        settings=get_settings().feeds,
        feed_client=cache.feed_client,
    )
