"""Seed Data: wipes users/tasks and inserts three demo users with sample tasks.

Usage::

    python -m app.db.seed

Invariants:
    - Tasks deleted before users (FK order), then users recreated
    - Every TaskStatus value appears at least once in the seeded data
"""

import asyncio
import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config import get_settings
from app.core.domain_types import TaskStatus
from app.db.session import create_session_factory
from app.infrastructure.observability import setup_logging
from app.models.task import Task
from app.models.user import User

logger = logging.getLogger(__name__)

SEED_USERS: list[tuple[str, str, list[tuple[str, str, TaskStatus]]]] = [
    ("alice@example.com", "Alice Johnson", [
        ("Setup development environment",
         "Install Python, Docker, and IDE", TaskStatus.DONE),
        ("Review API documentation",
         "Go through the API specs and requirements", TaskStatus.IN_PROGRESS),
        ("Write unit tests",
         "Add test coverage for the service layer", TaskStatus.TODO),
        ("Old project cleanup",
         "Archive files from the previous project", TaskStatus.ARCHIVED),
    ]),
    ("bob@example.com", "Bob Smith", [
        ("Database migration",
         "Update schema and run migrations", TaskStatus.TODO),
        ("Fix authentication bug",
         "Users cannot login with special characters in password",
         TaskStatus.IN_PROGRESS),
        ("Deploy to staging",
         "Push latest changes to staging environment", TaskStatus.DONE),
    ]),
    ("charlie@example.com", "Charlie Brown", [
        ("Code review",
         "Review pull requests from team members", TaskStatus.TODO),
        ("Update dependencies",
         "Upgrade packages to latest versions", TaskStatus.TODO),
    ]),
]


async def seed(session_factory: async_sessionmaker[AsyncSession]) -> list[User]:
    """Replace all users and tasks with the demo data set."""
    async with session_factory() as db:
        await db.execute(delete(Task))
        await db.execute(delete(User))

        users = []
        for email, name, tasks in SEED_USERS:
            user = User(email=email, name=name)
            user.tasks = [
                Task(title=title, description=description, status=status.value)
                for title, description, status in tasks
            ]
            db.add(user)
            users.append(user)
        await db.commit()

    for user in users:
        logger.info(f"Seeded {user.name}: {user.id}")
    return users


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    session_factory = create_session_factory(settings.database_url)
    try:
        await seed(session_factory)
    finally:
        await session_factory.kw["bind"].dispose()
    logger.info("Database seeded successfully")


if __name__ == "__main__":
    asyncio.run(main())
