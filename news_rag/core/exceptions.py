"""
Exception hierarchy for the news RAG service.

Critical-path errors (validation, store) surface to the caller; advisory-path
errors (fetch, parse, generation) are raised internally and absorbed by the
component that owns the fallback.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class NewsRagException(Exception):
    """Base exception for all news RAG application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(NewsRagException):
    """Raised when request input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SessionNotFoundError(NewsRagException):
    """Raised when a chat turn references a session that was never created."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Session not found: {session_id}", details)


class StoreError(NewsRagException):
    """Raised when the document store is unreachable or rejects a write."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Store operation that failed (insert, upsert, delete, query)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class FetchError(NewsRagException):
    """Raised when a single feed source cannot be fetched."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)


class ParseError(NewsRagException):
    """Raised when a single feed item cannot be parsed."""

    pass


class GenerationError(NewsRagException):
    """Raised when the generative backend is unreachable or replies badly."""

    pass
