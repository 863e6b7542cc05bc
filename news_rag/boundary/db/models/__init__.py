"""
Database models package.

Exports:
  - DocumentModel: Ingested news article
  - SessionModel: Conversation scope
  - ChatMessageModel: Single chat turn

Dependencies: sqlalchemy, news_rag.boundary.db.base
System role: Database model definitions for domain entities
"""

from news_rag.boundary.db.models.document_model import DocumentModel
from news_rag.boundary.db.models.session_model import SessionModel
from news_rag.boundary.db.models.message_model import ChatMessageModel

__all__ = [
    "DocumentModel",
    "SessionModel",
    "ChatMessageModel",
]
