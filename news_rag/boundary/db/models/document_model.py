"""
Document ORM model.

Represents an ingested news article. The canonical URL is the
deduplication key for ingestion upserts.

Dependencies: sqlalchemy, news_rag.boundary.db.base
System role: Article persistence for keyword retrieval
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from news_rag.boundary.db.base import Base, UUIDMixin, TimestampMixin


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model for ingested news articles.

    Rows are created and replaced only by the ingestion pipeline; chat never
    mutates them. searchable_text is the title and body joined by a space.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Article headline
        body: Cleaned article description
        url: Canonical article URL (unique)
        source: Feed source name (e.g. "Reuters")
        published_at: Publish time from the feed, None if unparseable
        searchable_text: Title + body blob used for keyword matching
        created_at: First ingestion timestamp (UTC), drives recency ordering
        updated_at: Last upsert timestamp (UTC)
    """

    __tablename__ = "documents"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(String(2048), nullable=False, unique=True, index=True)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
    searchable_text: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<DocumentModel(id={self.id}, url={self.url!r})>"
