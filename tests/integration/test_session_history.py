"""
Integration tests for SessionService against in-memory SQLite.

System role: Verification of session-scoped history semantics
"""

import uuid

import pytest

from news_rag.application.services.session_service import SessionService


class TestSessionHistory:
    """Test suite for history ordering and clearing."""

    @pytest.mark.asyncio
    async def test_create_session_should_persist_row(self, test_async_db) -> None:
        service = SessionService(test_async_db)

        session_id = await service.create_session()

        assert isinstance(session_id, uuid.UUID)
        assert await service.session_exists(session_id) is True
        assert await service.session_exists(uuid.uuid4()) is False

    @pytest.mark.asyncio
    async def test_history_should_follow_insertion_order(self, test_async_db) -> None:
        service = SessionService(test_async_db)
        session_id = await service.create_session()

        for i in range(6):
            await service.add_message(session_id, f"message {i}", is_user=i % 2 == 0)

        history = await service.get_history(session_id)

        assert [m.body for m in history] == [f"message {i}" for i in range(6)]
        assert [m.is_user for m in history] == [True, False, True, False, True, False]

    @pytest.mark.asyncio
    async def test_assistant_sources_should_round_trip(self, test_async_db) -> None:
        service = SessionService(test_async_db)
        session_id = await service.create_session()
        sources = [{"title": "A headline", "url": "https://news.example.com/a", "source": "Reuters"}]

        await service.add_message(session_id, "answer", is_user=False, sources=sources)

        history = await service.get_history(session_id)
        assert history[0].sources == sources

    @pytest.mark.asyncio
    async def test_unknown_session_should_have_empty_history(self, test_async_db) -> None:
        service = SessionService(test_async_db)

        assert list(await service.get_history(uuid.uuid4())) == []

    @pytest.mark.asyncio
    async def test_clear_should_empty_history_and_be_idempotent(self, test_async_db) -> None:
        service = SessionService(test_async_db)
        session_id = await service.create_session()
        for i in range(4):
            await service.add_message(session_id, f"message {i}", is_user=True)

        await service.clear_history(session_id)
        assert list(await service.get_history(session_id)) == []

        await service.clear_history(session_id)
        assert list(await service.get_history(session_id)) == []
        assert await service.session_exists(session_id) is True

    @pytest.mark.asyncio
    async def test_sessions_should_be_isolated(self, test_async_db) -> None:
        service = SessionService(test_async_db)
        first = await service.create_session()
        second = await service.create_session()
        await service.add_message(first, "only in first", is_user=True)
        await service.add_message(second, "only in second", is_user=True)

        await service.clear_history(first)

        assert list(await service.get_history(first)) == []
        assert [m.body for m in await service.get_history(second)] == ["only in second"]
