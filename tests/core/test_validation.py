"""Presence validation — falsy values count as missing."""

import pytest

from task_api.core.errors import MissingFieldsError
from task_api.core.validation import require_fields


def test_all_present_passes():
    require_fields({"name": "Ana", "email": "a@x.com"}, ["name", "email"], "msg")


@pytest.mark.parametrize("payload", [
    {"name": "Ana"},
    {"name": "Ana", "email": None},
    {"name": "Ana", "email": ""},
])
def test_absent_or_empty_field_is_missing(payload):
    with pytest.raises(MissingFieldsError) as exc_info:
        require_fields(payload, ["name", "email"], "Name and email are required")
    assert exc_info.value.fields == ["email"]
    assert exc_info.value.message == "Name and email are required"


def test_zero_id_is_missing():
    with pytest.raises(MissingFieldsError):
        require_fields({"title": "P1", "user_id": 0}, ["title", "user_id"], "msg")


def test_every_missing_field_reported():
    with pytest.raises(MissingFieldsError) as exc_info:
        require_fields({}, ["title", "project_id"], "msg")
    assert exc_info.value.fields == ["title", "project_id"]
