"""
Session CRUD operations.

Dependencies: sqlalchemy, news_rag.boundary.db.models
System role: Session persistence operations
"""

from news_rag.boundary.db.models.session_model import SessionModel
from news_rag.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)


session_crud = SessionCRUD()
