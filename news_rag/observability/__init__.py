"""
Observability module.

Provides logging configuration and request logging middleware.
"""

from news_rag.observability.logger import configure_logging
from news_rag.observability.middleware import RequestLoggingMiddleware

__all__ = ["configure_logging", "RequestLoggingMiddleware"]
