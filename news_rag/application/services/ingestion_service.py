"""
Ingestion service.

Fetches every configured feed with bounded parallelism, normalizes and
deduplicates the accepted items, then writes them with one URL-keyed bulk
upsert. A failing source only loses its own contribution; success reflects
the bulk write alone.

Dependencies: news_rag.boundary.feeds, news_rag.boundary.db.CRUD
System role: Corpus ingestion use case orchestration
"""

import asyncio
import logging
from typing import Any, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.CRUD.document_crud import document_crud
from news_rag.boundary.feeds.feed_client import FeedClient
from news_rag.boundary.feeds.feed_parser import FeedItem, parse_feed
from news_rag.configs.feeds import FeedSource, FeedSettings
from news_rag.core.exceptions import FetchError, StoreError
from news_rag.models.ingest import IngestionResult

logger = logging.getLogger(__name__)


def to_document_row(item: FeedItem, source_name: str) -> dict[str, Any]:
    """
    Normalize a feed item into a documents table row.

    Args:
        item: Parsed feed item
        source_name: Name of the feed the item came from

    Returns:
        dict: Column values for DocumentCRUD.upsert_many
    """
    return {
        "title": item.title,
        "body": item.description,
        "url": item.link,
        "source": source_name,
        "published_at": item.published_at,
        "searchable_text": f"{item.title} {item.description}",
    }


class IngestionService:
    """Feed ingestion orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        feed_client: FeedClient,
        sources: Sequence[FeedSource],
        max_items_per_feed: int = 10,
        max_concurrency: int = 3,
    ) -> None:
        """
        Initialize ingestion service.

        Args:
            db: Async database session
            feed_client: Client used to download feeds
            sources: Configured feed endpoints
            max_items_per_feed: Cap on entries read per feed
            max_concurrency: Number of feeds fetched in parallel
        """
        self.db = db
        self.feed_client = feed_client
        self.sources = list(sources)
        self.max_items_per_feed = max_items_per_feed
        self.max_concurrency = max(1, max_concurrency)

    @classmethod
    def from_settings(
        cls,
        db: AsyncSession,
        settings: FeedSettings,
        feed_client: FeedClient | None = None,
    ) -> "IngestionService":
        """Build an ingestion service from feed settings."""
        return cls(
            db=db,
            feed_client=feed_client or FeedClient(timeout=settings.fetch_timeout),
            sources=settings.sources,
            max_items_per_feed=settings.max_items_per_feed,
            max_concurrency=settings.max_concurrency,
        )

    async def ingest(self) -> IngestionResult:
        """
        Run one ingestion pass over all configured sources.

        Returns:
            IngestionResult: Number of upserted documents, success flag of
            the bulk write, and the URLs of sources that failed
        """
        logger.info(f"Starting news ingestion from {len(self.sources)} sources")

        semaphore = asyncio.Semaphore(self.max_concurrency)
        per_source = await asyncio.gather(
            *(self._collect_source(source, semaphore) for source in self.sources)
        )

        failed_sources = [source.url for source, rows in zip(self.sources, per_source) if rows is None]

        # Later duplicates of a URL replace earlier ones within a single run
        rows_by_url: dict[str, dict[str, Any]] = {}
        for rows in per_source:
            for row in rows or []:
                rows_by_url[row["url"]] = row
        rows = list(rows_by_url.values())

        logger.info(f"Found {len(rows)} articles")

        try:
            count = await document_crud.upsert_many(self.db, rows)
            await self.db.commit()
        except SQLAlchemyError as e:
            try:
                await self.db.rollback()
            except SQLAlchemyError as rollback_error:
                logger.error(f"Rollback after failed bulk write also failed: {rollback_error}")
            error = StoreError(f"Failed to store articles: {e}", operation="upsert")
            logger.error(f"Ingestion bulk write failed: {error.message}")
            return IngestionResult(
                count=0,
                success=False,
                message=error.message,
                failed_sources=failed_sources,
            )

        logger.info(f"Successfully ingested {count} articles")
        return IngestionResult(
            count=count,
            success=True,
            message="News ingestion completed successfully",
            failed_sources=failed_sources,
        )

    async def _collect_source(
        self,
        source: FeedSource,
        semaphore: asyncio.Semaphore,
    ) -> list[dict[str, Any]] | None:
        """
        Fetch and parse one source.

        Returns:
            Normalized rows, or None if the source failed
        """
        async with semaphore:
            logger.info(f"Fetching RSS from: {source.url}")
            try:
                payload = await self.feed_client.fetch(source.url)
                items = parse_feed(payload, max_items=self.max_items_per_feed)
            except FetchError as e:
                logger.error(f"Error fetching RSS from {source.url}: {e}")
                return None
            except Exception:
                logger.exception(f"Unexpected error ingesting {source.url}")
                return None

        logger.info(f"Parsed {len(items)} items from {source.url}")
        return [to_document_row(item, source.name) for item in items]
