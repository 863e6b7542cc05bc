"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from news_rag.boundary.db.CRUD import session_crud, message_crud, document_crud

    found = await session_crud.exists(db, session_id)
"""

from news_rag.boundary.db.CRUD.base_crud import BaseCRUD
from news_rag.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from news_rag.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from news_rag.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "MessageCRUD",
    "message_crud",
    "DocumentCRUD",
    "document_crud",
]
