"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach a real database or leak stack traces into envelopes
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
