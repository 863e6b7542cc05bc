"""
Test suite for the fail-soft generation client.

System role: Verification that generation never raises to callers
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage

from news_rag.configs.generation import GenerationSettings
from news_rag.core.generation_client import FALLBACK_RESPONSE, GenerationClient


class TestGenerate:
    """Test suite for GenerationClient.generate()."""

    @pytest.mark.asyncio
    async def test_should_return_model_text(self, fake_llm) -> None:
        client = GenerationClient(llm=fake_llm)

        assert await client.generate("prompt") == "Generated answer."
        fake_llm.ainvoke.assert_awaited_once_with("prompt")

    @pytest.mark.asyncio
    async def test_should_flatten_content_parts(self) -> None:
        llm = MagicMock()
        llm.ainvoke = AsyncMock(
            return_value=AIMessage(content=["Part one. ", {"type": "text", "text": "Part two."}])
        )

        assert await GenerationClient(llm=llm).generate("prompt") == "Part one. Part two."

    @pytest.mark.asyncio
    async def test_without_backend_should_return_fallback(self) -> None:
        client = GenerationClient(llm=None)

        assert client.configured is False
        assert await client.generate("prompt") == FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_backend_error_should_return_fallback(self) -> None:
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=RuntimeError("quota exceeded"))

        assert await GenerationClient(llm=llm).generate("prompt") == FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_timeout_should_return_fallback(self) -> None:
        async def slow_reply(prompt: str) -> AIMessage:
            await asyncio.sleep(1)
            return AIMessage(content="too late")

        llm = MagicMock()
        llm.ainvoke = slow_reply

        assert await GenerationClient(llm=llm, timeout=0.01).generate("prompt") == FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_empty_reply_should_return_fallback(self) -> None:
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="   "))

        assert await GenerationClient(llm=llm).generate("prompt") == FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_reply_without_content_should_return_fallback(self) -> None:
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=object())

        assert await GenerationClient(llm=llm).generate("prompt") == FALLBACK_RESPONSE


class TestFromSettings:
    """Test suite for GenerationClient.from_settings()."""

    def test_without_api_key_should_not_build_backend(self) -> None:
        with patch("news_rag.core.generation_client.ChatGoogleGenerativeAI") as chat_cls:
            client = GenerationClient.from_settings(GenerationSettings(api_key=None, timeout=5.0))

        chat_cls.assert_not_called()
        assert client.configured is False
        assert client.timeout == 5.0

    def test_with_api_key_should_pass_sampling_settings(self) -> None:
        settings = GenerationSettings(api_key="test-key")

        with patch("news_rag.core.generation_client.ChatGoogleGenerativeAI") as chat_cls:
            client = GenerationClient.from_settings(settings)

        assert client.configured is True
        kwargs = chat_cls.call_args.kwargs
        assert kwargs["model"] == "gemini-2.0-flash"
        assert kwargs["google_api_key"] == "test-key"
        assert kwargs["temperature"] == 0.7
        assert kwargs["top_p"] == 0.8
        assert kwargs["top_k"] == 40
        assert kwargs["max_output_tokens"] == 1024
