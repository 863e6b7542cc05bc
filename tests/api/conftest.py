"""
Router test fixtures.

Builds the application with mocked services injected through
dependency_overrides; no database or network is touched.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from news_rag.api.deps import get_chat_service, get_ingestion_service, get_session_service
from news_rag.main import create_app


@pytest.fixture
def session_service() -> MagicMock:
    service = MagicMock()
    service.create_session = AsyncMock()
    service.get_history = AsyncMock(return_value=[])
    service.clear_history = AsyncMock(return_value=None)
    return service


@pytest.fixture
def chat_service() -> MagicMock:
    service = MagicMock()
    service.process_chat = AsyncMock()
    return service


@pytest.fixture
def ingestion_service() -> MagicMock:
    service = MagicMock()
    service.ingest = AsyncMock()
    return service


@pytest.fixture
def app(session_service, chat_service, ingestion_service) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_session_service] = lambda: session_service
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    app.dependency_overrides[get_ingestion_service] = lambda: ingestion_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
