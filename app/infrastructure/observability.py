"""Structured Logging: JSON formatter, setup, and request logging middleware.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (method, path, status_code, error_code, severity, ...) surfaced when present
    - JSON format in production, human-readable text when log_format="text"
    - setup_logging is idempotent: repeated calls never stack handlers

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Request logging as pure ASGI-level HTTP middleware: sees every request,
      including ones rejected before routing
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_KEYS = (
    "method", "path", "status_code", "duration_ms",
    "error_code", "severity", "category", "user_id", "task_id",
)

request_logger = logging.getLogger("app.request")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name("task_tracker")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "task_tracker":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


async def log_requests(request: Request, call_next):
    """HTTP middleware: one log line on arrival, one on completion."""
    extra = {"method": request.method, "path": request.url.path}
    request_logger.info("Incoming request", extra=extra)
    started = time.perf_counter()
    response = await call_next(request)
    request_logger.info(
        "Request completed",
        extra={
            **extra,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response
