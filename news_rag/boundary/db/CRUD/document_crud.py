"""
Document CRUD operations.

Bulk URL-keyed upsert for ingestion and disjunctive keyword search for
retrieval.

Dependencies: sqlalchemy, news_rag.boundary.db.models
System role: Article persistence operations
"""

import uuid
from typing import Any, Sequence

from sqlalchemy import or_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.base import utc_now
from news_rag.boundary.db.models.document_model import DocumentModel
from news_rag.boundary.db.CRUD.base_crud import BaseCRUD

# Columns replaced when an already-ingested URL shows up again
UPSERT_COLUMNS = ("title", "body", "source", "published_at", "searchable_text", "updated_at")


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with the ingestion upsert and keyword search.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    @staticmethod
    def _insert_for(session: AsyncSession):
        dialect = session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert
        if dialect == "sqlite":
            return sqlite.insert
        raise NotImplementedError(f"Upsert not supported for dialect {dialect!r}")

    async def upsert_many(
        self,
        session: AsyncSession,
        documents: Sequence[dict[str, Any]],
    ) -> int:
        """
        Insert or update documents keyed by URL in a single statement.

        Existing URLs get title, body, source, published_at and
        searchable_text replaced; id and created_at are preserved.

        Args:
            session: Async database session
            documents: Dicts with title, body, url, source, published_at,
                searchable_text

        Returns:
            Number of rows written
        """
        if not documents:
            return 0

        now = utc_now()
        rows = [
            {
                "id": uuid.uuid4(),
                "created_at": now,
                "updated_at": now,
                **doc,
            }
            for doc in documents
        ]

        insert = self._insert_for(session)
        stmt = insert(DocumentModel).values(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=["url"],
            set_={column: getattr(stmt.excluded, column) for column in UPSERT_COLUMNS},
        )
        await session.execute(stmt)
        return len(rows)

    async def search_keywords(
        self,
        session: AsyncSession,
        keywords: Sequence[str],
        limit: int = 5,
    ) -> Sequence[DocumentModel]:
        """
        Find documents containing any keyword, newest first.

        A keyword matches when it is a case-insensitive substring of the
        title, body or searchable text. LIKE wildcards inside keywords are
        escaped.

        Args:
            session: Async database session
            keywords: Lowercased search terms, must be non-empty
            limit: Maximum number of documents to return

        Returns:
            Matching documents ordered by created_at descending
        """
        conditions = [
            column.icontains(keyword, autoescape=True)
            for keyword in keywords
            for column in (
                DocumentModel.title,
                DocumentModel.body,
                DocumentModel.searchable_text,
            )
        ]
        stmt = (
            select(DocumentModel)
            .where(or_(*conditions))
            .order_by(DocumentModel.created_at.desc(), DocumentModel.id)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


document_crud = DocumentCRUD()
