"""News RAG chat service."""
