"""
Citation extraction and formatting.

Builds source snapshots from retrieved articles. Only title, url and
source are copied so stored history never changes when an article is
re-ingested.

Dependencies: news_rag.models
System role: Citation formatting business logic
"""

from typing import Sequence

from news_rag.core.prompt_builder import ArticleLike
from news_rag.models.citation import SourceCitation


class CitationBuilder:
    """Citation building business logic."""

    def build_citations(self, documents: Sequence[ArticleLike]) -> list[SourceCitation]:
        """
        Build citations from retrieved documents, preserving order.

        Args:
            documents: Retrieved articles

        Returns:
            list[SourceCitation]: One citation per document
        """
        return [self.format_citation(doc) for doc in documents]

    def format_citation(self, document: ArticleLike) -> SourceCitation:
        """
        Snapshot a single document.

        Args:
            document: Retrieved article

        Returns:
            SourceCitation: title, url and source of the article
        """
        return SourceCitation(
            title=document.title,
            url=document.url,
            source=document.source,
        )
