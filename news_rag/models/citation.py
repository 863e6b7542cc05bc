"""
Citation domain model.

Immutable snapshot of an article cited by an assistant answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, Field


class SourceCitation(BaseModel):
    """Citation model for source attribution."""

    title: str = Field(description="Article headline")
    url: str = Field(description="Canonical article URL")
    source: str = Field(description="Feed source name")
