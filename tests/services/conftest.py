"""Service test fixtures: async DB, FastAPI test client, seeded users, fake repository.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - fake_tasks is a dict-backed TaskRepository for pure service tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.core.domain_types import TaskStatus
from app.db.base import Base
from app.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from app.models.task import Task
from app.models.user import User
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _insert_user(db: AsyncSession, email: str, name: str) -> User:
    user = User(email=email, name=name)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def alice(test_db):
    return await _insert_user(test_db, "alice@example.com", "Alice")


@pytest.fixture
async def bob(test_db):
    return await _insert_user(test_db, "bob@example.com", "Bob")


@pytest.fixture
def headers_for():
    """Build the x-user-id header for a seeded user."""
    def _headers(user: User) -> dict[str, str]:
        return {"x-user-id": str(user.id)}
    return _headers


@pytest.fixture
def insert_task(test_db):
    """Insert a task directly, bypassing the API. created_at offset in seconds."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)

    async def _insert(
        owner: User,
        title: str,
        status: TaskStatus = TaskStatus.TODO,
        offset: int = 0,
        description: str | None = None,
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            status=status.value,
            user_id=owner.id,
            created_at=base + timedelta(seconds=offset),
        )
        test_db.add(task)
        await test_db.commit()
        await test_db.refresh(task)
        return task

    return _insert


# ─── Pure service fakes ─────────────────────────────────────────

class FakeTaskRepository:
    """Dict-backed TaskRepository; records every call for assertions."""

    def __init__(self):
        self.rows: dict[uuid.UUID, SimpleNamespace] = {}
        self.calls: list[str] = []
        self._clock = 0

    def add(self, user_id, title="Task", status=TaskStatus.TODO, description=None):
        self._clock += 1
        now = datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=self._clock)
        row = SimpleNamespace(
            id=uuid.uuid4(), title=title, description=description,
            status=status.value, user_id=user_id,
            created_at=now, updated_at=now,
        )
        self.rows[row.id] = row
        return row

    async def find_by_id(self, task_id):
        self.calls.append("find_by_id")
        return self.rows.get(task_id)

    async def find_by_user_id(self, user_id, status=None):
        self.calls.append("find_by_user_id")
        found = [
            r for r in self.rows.values()
            if r.user_id == user_id and (status is None or r.status == status.value)
        ]
        return sorted(found, key=lambda r: r.created_at, reverse=True)

    async def create(self, user_id, title, description, status):
        self.calls.append("create")
        return self.add(user_id, title, status, description)

    async def update(self, task, changes):
        self.calls.append("update")
        for name, value in changes.items():
            setattr(task, name, value)
        return task

    async def delete(self, task):
        self.calls.append("delete")
        self.rows.pop(task.id)

    async def archive(self, task):
        self.calls.append("archive")
        task.status = TaskStatus.ARCHIVED.value
        return task


@pytest.fixture
def fake_tasks():
    return FakeTaskRepository()
