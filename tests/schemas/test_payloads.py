"""Request payload schemas — defaults apply only when a field is omitted."""

import pytest
from pydantic import ValidationError

from task_api.schemas.project import ProjectCreate, ProjectUpdate
from task_api.schemas.task import TaskCreate, TaskUpdate
from task_api.schemas.user import UserPayload


def test_user_payload_fields_optional():
    assert UserPayload().model_dump() == {"name": None, "email": None}


def test_project_create_defaults_status():
    assert ProjectCreate(title="P1", user_id=1).status == "active"


def test_project_create_keeps_explicit_null_status():
    assert ProjectCreate(title="P1", user_id=1, status=None).status is None


def test_project_update_has_no_owner():
    assert "user_id" not in ProjectUpdate(user_id=5).model_dump()


def test_task_create_defaults():
    task = TaskCreate(title="T1", project_id=1)
    assert task.status == "pending"
    assert task.priority == "medium"
    assert task.assigned_to is None
    assert task.due_date is None


def test_task_create_keeps_due_date_string():
    task = TaskCreate(title="T1", project_id=1, due_date="2026-11-01T09:30:00-05:00")
    assert task.due_date == "2026-11-01T09:30:00-05:00"


def test_free_text_fields_accept_numbers():
    assert UserPayload(name=42, email="a@x.com").name == 42
    assert ProjectCreate(title=3.5, user_id=1).title == 3.5


def test_task_create_rejects_non_integer_project_id():
    with pytest.raises(ValidationError):
        TaskCreate(title="T1", project_id="abc")


def test_task_update_has_no_defaults():
    assert TaskUpdate().model_dump() == {
        "title": None, "description": None, "status": None,
        "priority": None, "assigned_to": None, "due_date": None,
    }
