"""
Core business logic module.

Contains the exception hierarchy, keyword retrieval, prompt construction,
citation snapshots and the generation client.
"""

from news_rag.core.exceptions import (
    NewsRagException,
    ValidationError,
    SessionNotFoundError,
    StoreError,
    FetchError,
    ParseError,
    GenerationError,
)

__all__ = [
    "NewsRagException",
    "ValidationError",
    "SessionNotFoundError",
    "StoreError",
    "FetchError",
    "ParseError",
    "GenerationError",
]
