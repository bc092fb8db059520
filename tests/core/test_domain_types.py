"""Domain Types — verifies partial-update semantics and value objects.

Tests:
    - UserChanges applies only non-None fields
    - Empty strings are real values, not "no change"
    - PaginationParams offset arithmetic
"""

from user_api.core.domain_types import (
    PagedResult, PaginationParams, User, UserChanges, UserId,
)


def _user() -> User:
    return User(
        id=UserId("u-1"), username="testuser",
        email="test@example.com", phone_number="1234567890",
    )


def test_empty_changes_leave_user_unchanged():
    assert UserChanges().apply_to(_user()) == _user()


def test_partial_changes_touch_only_supplied_fields():
    updated = UserChanges(username="updateduser").apply_to(_user())
    assert updated.username == "updateduser"
    assert updated.email == "test@example.com"
    assert updated.phone_number == "1234567890"
    assert updated.id == "u-1"


def test_empty_string_replaces_value():
    assert UserChanges(email="").apply_to(_user()).email == ""


def test_changes_keep_non_string_values():
    assert UserChanges(username=0).apply_to(_user()).username == 0


def test_pagination_offset():
    assert PaginationParams(page=1, limit=10).offset == 0
    assert PaginationParams(page=2, limit=5).offset == 5


def test_paged_result_defaults_are_empty_first_page():
    result = PagedResult()
    assert result.data == []
    assert result.total == 0
    assert result.has_next is False
