"""
Shared settings base.

Every settings class reads the process environment and an optional .env
file; unknown keys are ignored so one .env can serve all of them.

Dependencies: pydantic, pydantic_settings
System role: Common fields and loading rules for all settings classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings base with the fields shared by every config module."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="Deployment name, informational")
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
