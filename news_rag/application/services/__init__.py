"""
Application services.

Exports:
  - SessionService: Session lifecycle and message history
  - IngestionService: Feed ingestion into the document store
  - ChatService: Retrieval-augmented chat turn orchestration
"""

from news_rag.application.services.session_service import SessionService
from news_rag.application.services.ingestion_service import IngestionService
from news_rag.application.services.chat_service import ChatService

__all__ = [
    "SessionService",
    "IngestionService",
    "ChatService",
]
