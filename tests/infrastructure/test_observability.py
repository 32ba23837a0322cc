"""Structured Logging: JSON shape, extras, idempotent setup."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.test"
    assert payload["message"] == "hello world"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(
            error_code="NOT_FOUND", severity="warning", status_code=404,
            secret="nope",
        ),
    ))
    assert payload["error_code"] == "NOT_FOUND"
    assert payload["severity"] == "warning"
    assert payload["status_code"] == 404
    assert "secret" not in payload


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "task_tracker"]
    assert len(ours) == 1
    assert logging.root.level == logging.INFO
