"""
Keyword relevance retrieval.

Coarse high-recall filter: any salient query term appearing anywhere in an
article counts as a match, newest articles first. A vector-similarity
retriever can replace this class as long as it keeps the
retrieve(query) -> list[DocumentModel] shape.

Dependencies: news_rag.boundary.db
System role: RAG retrieval business logic
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.CRUD.document_crud import document_crud
from news_rag.boundary.db.models.document_model import DocumentModel

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5
MIN_KEYWORD_LENGTH = 3

STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "its", "may", "new", "now", "old", "see", "two", "who", "boy",
    "did", "man", "men", "way", "why",
})


def extract_keywords(query: str) -> list[str]:
    """
    Extract salient search terms from a free-text query.

    Lowercases, splits on whitespace, drops terms shorter than three
    characters and stop words. Order and duplicates are kept.

    Args:
        query: Raw user message

    Returns:
        list[str]: Search terms, possibly empty
    """
    return [
        token
        for token in query.lower().split()
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    ]


class Retriever:
    """Keyword retriever over the document store."""

    def __init__(self, db: AsyncSession, top_k: int = DEFAULT_TOP_K) -> None:
        """
        Initialize retriever.

        Args:
            db: Async database session
            top_k: Maximum number of documents returned per query
        """
        self.db = db
        self.top_k = top_k

    async def retrieve(self, query: str) -> list[DocumentModel]:
        """
        Retrieve the most recent documents matching any query keyword.

        Args:
            query: Raw user message

        Returns:
            list[DocumentModel]: At most top_k documents, newest first; empty
            without a store query when no keyword survives filtering
        """
        keywords = extract_keywords(query)
        if not keywords:
            logger.info("No searchable keywords in query, skipping retrieval")
            return []

        documents = await document_crud.search_keywords(self.db, keywords, limit=self.top_k)
        logger.info(
            f"Found {len(documents)} relevant articles",
            extra={"keywords": keywords},
        )
        return list(documents)
