"""
Generation client for the external language model.

Wraps Gemini behind a prompt-in, text-out call that never raises: a
missing API key, backend error, timeout or empty reply all degrade to a
fixed fallback answer.

Dependencies: langchain_google_genai, news_rag.configs
System role: LLM adapter for the chat orchestrator
"""

import asyncio
import logging
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from news_rag.configs.generation import GenerationSettings
from news_rag.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = (
    "I understand you're asking about news. I couldn't find specific articles "
    "matching your query. Please try asking about business, technology, world "
    "news, politics, or sports."
)


def _extract_text(content: Any) -> str:
    """Flatten a chat model reply into plain text."""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts).strip()
    raise GenerationError(f"Unexpected reply content type: {type(content).__name__}")


class GenerationClient:
    """Fail-soft text generation client."""

    def __init__(
        self,
        llm: BaseChatModel | None = None,
        timeout: float = 30.0,
        fallback: str = FALLBACK_RESPONSE,
    ) -> None:
        """
        Initialize generation client.

        Args:
            llm: Chat model to call, None when no backend is configured
            timeout: Upper bound on a single generation call in seconds
            fallback: Text returned whenever generation fails
        """
        self._llm = llm
        self.timeout = timeout
        self.fallback = fallback

    @classmethod
    def from_settings(cls, settings: GenerationSettings) -> "GenerationClient":
        """
        Build a client from generation settings.

        Without an API key the client has no backend (configured is False)
        and always answers with the fallback text.

        Args:
            settings: Gemini configuration

        Returns:
            GenerationClient: Configured client
        """
        if not settings.api_key:
            return cls(llm=None, timeout=settings.timeout)

        llm = ChatGoogleGenerativeAI(
            model=settings.model,
            google_api_key=settings.api_key,
            temperature=settings.temperature,
            top_p=settings.top_p,
            top_k=settings.top_k,
            max_output_tokens=settings.max_output_tokens,
            timeout=settings.timeout,
            max_retries=0,
        )
        return cls(llm=llm, timeout=settings.timeout)

    @property
    def configured(self) -> bool:
        """Whether a backend is available."""
        return self._llm is not None

    async def generate(self, prompt: str) -> str:
        """
        Generate a response for the prompt.

        Args:
            prompt: Fully built generation prompt

        Returns:
            str: Model reply, or the fallback text on any failure
        """
        if self._llm is None:
            return self.fallback

        try:
            return await self._invoke(prompt)
        except GenerationError as e:
            logger.error(f"Generation failed, using fallback response: {e}")
            return self.fallback

    async def _invoke(self, prompt: str) -> str:
        try:
            reply = await asyncio.wait_for(self._llm.ainvoke(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise GenerationError(f"Backend timed out after {self.timeout}s") from e
        except Exception as e:
            raise GenerationError(f"Backend call failed: {type(e).__name__}: {e}") from e

        text = _extract_text(getattr(reply, "content", None))
        if not text:
            raise GenerationError("Backend returned an empty reply")
        return text
