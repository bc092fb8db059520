"""User schemas — wire names, presence checks, and domain conversion.

Invariants:
    - Request bodies accept camelCase phoneNumber
    - missing_fields treats absent, null, empty string, 0 and false identically
    - Field values are not type-checked
    - Responses dump by alias (phoneNumber, hasNext)
"""

import pytest

from user_api.core.domain_types import PagedResult, User, UserId
from user_api.schemas.user import (
    PagedUsersResponse, UserCreate, UserResponse, UserUpdate,
)


# --- UserCreate ---------------------------------------------------------------

def test_create_accepts_camel_case_phone_number():
    body = UserCreate.model_validate({
        "username": "testuser", "email": "test@example.com",
        "phoneNumber": "1234567890",
    })
    assert body.phone_number == "1234567890"
    assert body.missing_fields() == []


@pytest.mark.parametrize("payload, missing", [
    ({}, ["username", "email", "phoneNumber"]),
    ({"username": "test"}, ["email", "phoneNumber"]),
    ({"username": None, "email": None, "phoneNumber": None},
     ["username", "email", "phoneNumber"]),
    ({"username": "", "email": "", "phoneNumber": ""},
     ["username", "email", "phoneNumber"]),
    ({"username": 0, "email": False, "phoneNumber": 0.0},
     ["username", "email", "phoneNumber"]),
    ({"username": "test", "email": "test@example.com", "phoneNumber": ""},
     ["phoneNumber"]),
])
def test_create_reports_missing_fields(payload, missing):
    assert UserCreate.model_validate(payload).missing_fields() == missing


def test_create_keeps_non_string_values():
    body = UserCreate.model_validate({
        "username": 123, "email": "a@b.c", "phoneNumber": 5551234,
    })
    assert body.username == 123
    assert body.phone_number == 5551234
    assert body.missing_fields() == []


def test_create_treats_empty_containers_as_present():
    body = UserCreate.model_validate({
        "username": [], "email": {}, "phoneNumber": True,
    })
    assert body.missing_fields() == []


def test_from_body_reads_non_object_as_empty():
    assert UserCreate.from_body(["username"]).missing_fields() == [
        "username", "email", "phoneNumber",
    ]
    assert UserCreate.from_body(None) == UserCreate()


def test_create_ignores_unknown_fields():
    body = UserCreate.model_validate({"username": "a", "role": "admin"})
    assert not hasattr(body, "role")


# --- UserUpdate ---------------------------------------------------------------

def test_update_to_changes_keeps_absent_fields_as_none():
    changes = UserUpdate.model_validate({"username": "updated"}).to_changes()
    assert changes.username == "updated"
    assert changes.email is None
    assert changes.phone_number is None


# --- Responses ----------------------------------------------------------------

def test_user_response_dumps_camel_case():
    user = User(
        id=UserId("u-1"), username="testuser",
        email="test@example.com", phone_number="1234567890",
    )
    assert UserResponse.from_domain(user).model_dump(by_alias=True) == {
        "id": "u-1",
        "username": "testuser",
        "email": "test@example.com",
        "phoneNumber": "1234567890",
    }


def test_paged_response_dumps_has_next():
    result = PagedResult(data=[], total=15, page=2, limit=10, has_next=False)
    dumped = PagedUsersResponse.from_domain(result).model_dump(by_alias=True)
    assert dumped == {
        "data": [], "total": 15, "page": 2, "limit": 10, "hasNext": False,
    }
