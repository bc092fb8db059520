"""User Request Handlers — validate input, call the user service, return an Outcome.

Invariants:
    - Every handler returns exactly one Outcome and never raises
    - create_user makes no service call when a required field is missing/null/empty/0/false
    - body is the decoded JSON as received; a non-object body has no fields
    - A None/False result from the service becomes UserNotFoundError (404)
    - Any exception from the service is forwarded unchanged in meaning:
      same message, same status (or none → 500 at the translator)
    - No retry, no local recovery

Design Decisions:
    - Handlers separated from FastAPI routes: testable without an HTTP client,
      routes stay one line each
    - Outcome over raise: the route collapses it via render() at one boundary
"""

import logging
from typing import Any

from fastapi import status

from user_api.core.domain_types import PaginationParams, UserId
from user_api.core.errors import ApiError, MissingFieldsError, UserNotFoundError
from user_api.core.outcome import Failure, Outcome, Success
from user_api.schemas.user import (
    PagedUsersResponse, UserCreate, UserResponse, UserUpdate,
)
from user_api.services.user_service import UserService

logger = logging.getLogger(__name__)


def _service_failure(handler: str, exc: Exception) -> Failure:
    """Wrap a user service exception for the error translator."""
    error = ApiError.from_exception(exc)
    logger.error(
        f"User service failed in {handler}: {error.message}",
        extra={
            "handler": handler,
            "error_code": error.code,
            "status_code": error.http_status,
        },
    )
    return Failure(error)


async def create_user(
    service: UserService, body: Any,
) -> Outcome:
    request = UserCreate.from_body(body)
    missing = request.missing_fields()
    if missing:
        logger.warning(f"Create rejected, missing fields: {', '.join(missing)}")
        return Failure(MissingFieldsError(missing))
    try:
        user = await service.add_user(
            request.username, request.email, request.phone_number,
        )
    except Exception as e:
        return _service_failure("create_user", e)
    return Success(UserResponse.from_domain(user), status.HTTP_201_CREATED)


async def list_users(
    service: UserService, params: PaginationParams,
) -> Outcome:
    """params must already be normalized (core.pagination)."""
    try:
        result = await service.get_all_users(params)
    except Exception as e:
        return _service_failure("list_users", e)
    return Success(PagedUsersResponse.from_domain(result))


async def get_user(service: UserService, user_id: str) -> Outcome:
    try:
        user = await service.get_user_by_id(UserId(user_id))
    except Exception as e:
        return _service_failure("get_user", e)
    if user is None:
        return Failure(UserNotFoundError(user_id))
    return Success(UserResponse.from_domain(user))


async def update_user(
    service: UserService, user_id: str, body: Any,
) -> Outcome:
    changes = UserUpdate.from_body(body).to_changes()
    try:
        user = await service.update_user(UserId(user_id), changes)
    except Exception as e:
        return _service_failure("update_user", e)
    if user is None:
        return Failure(UserNotFoundError(user_id))
    return Success(UserResponse.from_domain(user))


async def delete_user(service: UserService, user_id: str) -> Outcome:
    try:
        deleted = await service.delete_user(UserId(user_id))
    except Exception as e:
        return _service_failure("delete_user", e)
    if not deleted:
        return Failure(UserNotFoundError(user_id))
    return Success(None, status.HTTP_204_NO_CONTENT)
