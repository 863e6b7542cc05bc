"""
Test suite for ChatService.

Collaborators are mocked so each step of a chat turn can be observed
and forced to fail independently.

System role: Verification of chat turn orchestration
"""

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from news_rag.application.services.chat_service import ChatService, parse_session_id
from news_rag.core.exceptions import SessionNotFoundError, StoreError, ValidationError
from news_rag.models.citation import SourceCitation

SESSION_ID = uuid.UUID("11111111-2222-3333-4444-555555555555")

ARTICLE = SimpleNamespace(
    title="Chipmaker announces record quarter",
    source="Reuters",
    body="The chipmaker reported record revenue and earnings for the quarter.",
    url="https://news.example.com/chipmaker-record-quarter",
)


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def session_service(events) -> MagicMock:
    service = MagicMock()
    service.session_exists = AsyncMock(return_value=True)

    async def add_message(session_id, body, is_user, sources=None):
        events.append("store_user" if is_user else "store_bot")

    service.add_message = AsyncMock(side_effect=add_message)
    return service


@pytest.fixture
def retriever(events) -> MagicMock:
    retriever = MagicMock()

    async def retrieve(query):
        events.append("retrieve")
        return [ARTICLE]

    retriever.retrieve = AsyncMock(side_effect=retrieve)
    return retriever


@pytest.fixture
def generation_client(events) -> MagicMock:
    client = MagicMock()

    async def generate(prompt):
        events.append("generate")
        return "Record revenue, according to Reuters."

    client.generate = AsyncMock(side_effect=generate)
    return client


@pytest.fixture
def chat_service(session_service, retriever, generation_client) -> ChatService:
    return ChatService(
        db=AsyncMock(),
        retriever=retriever,
        generation_client=generation_client,
        session_service=session_service,
    )


class TestParseSessionId:
    """Test suite for parse_session_id()."""

    def test_should_parse_valid_uuid(self) -> None:
        assert parse_session_id(f"  {SESSION_ID}  ") == SESSION_ID

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_id_should_raise(self, raw) -> None:
        with pytest.raises(ValidationError, match="Session ID is required"):
            parse_session_id(raw)

    def test_malformed_id_should_raise(self) -> None:
        with pytest.raises(ValidationError, match="Invalid session ID"):
            parse_session_id("not-a-uuid")


class TestProcessChat:
    """Test suite for ChatService.process_chat()."""

    @pytest.mark.asyncio
    async def test_should_run_steps_in_order(self, chat_service, events) -> None:
        result = await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        assert events == ["store_user", "retrieve", "generate", "store_bot"]
        assert result.response == "Record revenue, according to Reuters."
        assert result.sources == [
            SourceCitation(
                title=ARTICLE.title,
                url=ARTICLE.url,
                source="Reuters",
            )
        ]

    @pytest.mark.asyncio
    async def test_should_store_citation_snapshots_with_bot_turn(self, chat_service, session_service) -> None:
        await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        bot_call = session_service.add_message.await_args_list[1]
        assert bot_call.kwargs["is_user"] is False
        assert bot_call.kwargs["sources"] == [
            {"title": ARTICLE.title, "url": ARTICLE.url, "source": "Reuters"}
        ]

    @pytest.mark.asyncio
    async def test_prompt_should_contain_retrieved_context(self, chat_service, generation_client) -> None:
        await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        prompt = generation_client.generate.await_args.args[0]
        assert f"Title: {ARTICLE.title}" in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message", [None, "", "   \n"])
    async def test_blank_message_should_raise_before_any_work(self, chat_service, events, message) -> None:
        with pytest.raises(ValidationError, match="Message is required"):
            await chat_service.process_chat(str(SESSION_ID), message)

        assert events == []

    @pytest.mark.asyncio
    async def test_unknown_session_should_raise_before_any_work(
        self, chat_service, session_service, events
    ) -> None:
        session_service.session_exists.return_value = False

        with pytest.raises(SessionNotFoundError):
            await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        assert events == []

    @pytest.mark.asyncio
    async def test_user_store_failure_should_abort_turn(self, chat_service, session_service, events) -> None:
        session_service.add_message.side_effect = StoreError("database unavailable", operation="insert")

        with pytest.raises(StoreError):
            await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        assert "retrieve" not in events
        assert "generate" not in events

    @pytest.mark.asyncio
    async def test_retrieval_failure_should_fall_back_to_empty_context(
        self, chat_service, retriever, generation_client
    ) -> None:
        retriever.retrieve.side_effect = RuntimeError("search backend down")

        result = await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        prompt = generation_client.generate.await_args.args[0]
        assert "No relevant news articles were found" in prompt
        assert result.sources == []
        chat_service.db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bot_store_failure_should_still_respond(self, chat_service, session_service) -> None:
        session_service.add_message.side_effect = [None, StoreError("disk full", operation="insert")]

        result = await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        assert result.response == "Record revenue, according to Reuters."
        assert session_service.add_message.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_rollback_after_retrieval_error_should_still_respond(
        self, chat_service, retriever, generation_client
    ) -> None:
        lost = OperationalError("SELECT", {}, Exception("connection lost"))
        retriever.retrieve.side_effect = lost
        chat_service.db.rollback.side_effect = lost

        result = await chat_service.process_chat(str(SESSION_ID), "chipmaker earnings")

        assert result.sources == []
        assert result.response == "Record revenue, according to Reuters."
        prompt = generation_client.generate.await_args.args[0]
        assert "No relevant news articles were found" in prompt
