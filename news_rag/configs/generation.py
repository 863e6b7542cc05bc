"""
Generative backend configuration settings.

Gemini credentials and fixed sampling parameters. A missing API key is
valid and makes the generation client answer with its fallback text.

Dependencies: pydantic, pydantic_settings
System role: LLM backend configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from news_rag.configs.base import BaseSettings


class GenerationSettings(BaseSettings):
    """Gemini generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default="gemini-2.0-flash", description="Gemini model name")
    temperature: float = Field(default=0.7, description="Sampling temperature")
    top_p: float = Field(default=0.8, description="Nucleus sampling limit")
    top_k: int = Field(default=40, description="Top-k sampling limit")
    max_output_tokens: int = Field(default=1024, description="Maximum generated tokens")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
