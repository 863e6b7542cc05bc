"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin, UUIDMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(), init_models()
  - DocumentModel, SessionModel, ChatMessageModel: Core domain entities
  - document_crud, session_crud, message_crud: CRUD operation singletons

Dependencies: sqlalchemy, news_rag.configs
System role: Persistent storage for articles, sessions and chat transcripts
"""

from news_rag.boundary.db.base import Base, TimestampMixin, UUIDMixin
from news_rag.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    init_models,
)
from news_rag.boundary.db.models import ChatMessageModel, DocumentModel, SessionModel
from news_rag.boundary.db.CRUD import (
    BaseCRUD,
    DocumentCRUD,
    MessageCRUD,
    SessionCRUD,
    document_crud,
    message_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "init_models",
    # Models
    "DocumentModel",
    "SessionModel",
    "ChatMessageModel",
    # CRUD classes
    "BaseCRUD",
    "DocumentCRUD",
    "MessageCRUD",
    "SessionCRUD",
    # CRUD singletons
    "document_crud",
    "message_crud",
    "session_crud",
]
