"""User Schemas — Pydantic request/response contracts for the /users endpoints.

Invariants:
    - Request bodies accept camelCase wire names (phoneNumber) and nothing is required:
      presence is checked by the create handler, not by Pydantic
    - Request field values are not type-checked; they are forwarded as received
    - A body that is not a JSON object reads as an empty one
    - Responses always serialize by alias (phoneNumber, hasNext)
    - ErrorResponse is the only non-2xx body shape

Design Decisions:
    - Optional Any fields over required str ones: a missing, null, empty, 0 or false
      field must produce the handler's 400 "Missing required fields", not a framework
      validation error
    - from_domain constructors keep the dataclass -> wire mapping in one place
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from user_api.core.domain_types import PagedResult, User, UserChanges


def _is_blank(value: Any) -> bool:
    """JSON falsiness: null, false, "" and 0. Empty arrays and objects are present."""
    if value is None or value is False or value == "":
        return True
    return type(value) in (int, float) and value == 0


class _UserBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: Any = None
    email: Any = None
    phone_number: Any = Field(None, alias="phoneNumber")

    @classmethod
    def from_body(cls, body: Any):
        """Read a decoded JSON body; anything but an object has no fields."""
        return cls.model_validate(body if isinstance(body, dict) else {})


class UserCreate(_UserBody):
    """Create body: fields optional here, presence checked by the handler."""

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent, null, false, 0 or empty."""
        return [
            name for name, value in (
                ("username", self.username),
                ("email", self.email),
                ("phoneNumber", self.phone_number),
            )
            if _is_blank(value)
        ]


class UserUpdate(_UserBody):
    """Update body: every field optional, absent or null means unchanged."""

    def to_changes(self) -> UserChanges:
        return UserChanges(
            username=self.username,
            email=self.email,
            phone_number=self.phone_number,
        )


class UserResponse(BaseModel):
    """Public user representation."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: Any
    email: Any
    phone_number: Any = Field(alias="phoneNumber")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            phone_number=user.phone_number,
        )


class PagedUsersResponse(BaseModel):
    """Listing envelope, forwarded field-for-field from the user service."""
    model_config = ConfigDict(populate_by_name=True)

    data: list[UserResponse]
    total: int
    page: int
    limit: int
    has_next: bool = Field(alias="hasNext")

    @classmethod
    def from_domain(cls, result: PagedResult) -> "PagedUsersResponse":
        return cls(
            data=[UserResponse.from_domain(u) for u in result.data],
            total=result.total,
            page=result.page,
            limit=result.limit,
            has_next=result.has_next,
        )


class ErrorResponse(BaseModel):
    """Uniform error body."""
    error: str
    status: int
