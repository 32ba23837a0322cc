"""Async Session Factory: provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Same engine options as DatabaseSessionManager (SQLite FK pragma included)
    - Meant for scripts such as the seed command

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI contexts
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from app.infrastructure.database import enable_sqlite_foreign_keys


def create_session_factory(
    database_url: str,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    enable_sqlite_foreign_keys(engine)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
