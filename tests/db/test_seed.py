"""Seed Data: replaces existing rows and covers every status."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.domain_types import TaskStatus
from app.db.base import Base
from app.db.seed import SEED_USERS, seed
from app.infrastructure.database import enable_sqlite_foreign_keys
from app.models.task import Task
from app.models.user import User


async def test_seed_is_repeatable_and_covers_all_statuses():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        await seed(factory)
        users = await seed(factory)
        assert [u.email for u in users] == [email for email, _, _ in SEED_USERS]

        async with factory() as db:
            user_count = await db.scalar(select(func.count()).select_from(User))
            statuses = set((await db.execute(select(Task.status))).scalars())
            task_count = await db.scalar(select(func.count()).select_from(Task))
        assert user_count == 3
        assert task_count == sum(len(tasks) for _, _, tasks in SEED_USERS)
        assert statuses == {s.value for s in TaskStatus}
    finally:
        await engine.dispose()
