"""Domain Types: status enum values double as the wire format."""

from app.core.domain_types import DEFAULT_TASK_STATUS, TaskStatus


def test_task_status_values():
    assert [s.value for s in TaskStatus] == ["TODO", "IN_PROGRESS", "DONE", "ARCHIVED"]


def test_default_status_is_todo():
    assert DEFAULT_TASK_STATUS is TaskStatus.TODO


def test_status_is_str_compatible():
    assert TaskStatus("DONE") == "DONE"
