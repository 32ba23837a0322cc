"""Database Package: declarative base, script session factory, and seed data.

Invariants:
    - Single async engine per process for the API (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests and local runs
"""
