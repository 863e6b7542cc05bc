"""
API contracts.

Pydantic request and response schemas for chat, session and ingestion
endpoints.
"""
