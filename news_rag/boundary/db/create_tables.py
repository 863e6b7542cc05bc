"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, news_rag.configs
System role: Database schema initialization

Usage:
    python -m news_rag.boundary.db.create_tables
"""

import asyncio

from news_rag.boundary.db.connection import get_async_engine, init_models


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.
    """
    await init_models()
    await get_async_engine().dispose()
    print("All tables created successfully.")


if __name__ == "__main__":
    asyncio.run(create_all_tables())
