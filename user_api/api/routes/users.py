"""User Routes — CRUD endpoints for the user directory.

Invariants:
    - Routes only extract input and render the handler's Outcome
    - Path ids are opaque strings (unknown ids → 404, never 422)
    - page/limit arrive as raw strings and are normalized, never rejected
    - Bodies arrive as decoded JSON of any shape; only malformed JSON is rejected here

Design Decisions:
    - Handlers live in api/user_handlers.py: routes stay free of branching
    - response_model/responses declared for OpenAPI only; render() builds the response
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from user_api.api import user_handlers
from user_api.api.dependencies import get_user_service
from user_api.api.responses import render
from user_api.core.pagination import normalize_pagination
from user_api.schemas.user import (
    ErrorResponse, PagedUsersResponse, UserResponse,
)
from user_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_SERVER_ERROR,
    },
)
async def create_user(
    body: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Create a user from username, email and phoneNumber."""
    return render(await user_handlers.create_user(service, body))


@router.get(
    "", response_model=PagedUsersResponse, responses=_SERVER_ERROR,
)
async def list_users(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    service: UserService = Depends(get_user_service),
) -> Response:
    """List users, paginated (page >= 1, 1 <= limit <= 100)."""
    params = normalize_pagination(page, limit)
    return render(await user_handlers.list_users(service, params))


@router.get(
    "/{user_id}", response_model=UserResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
) -> Response:
    return render(await user_handlers.get_user(service, user_id))


@router.put(
    "/{user_id}", response_model=UserResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def update_user(
    user_id: str,
    body: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Partial update: fields left out of the body are unchanged."""
    return render(await user_handlers.update_user(service, user_id, body))


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_user(
    user_id: str, service: UserService = Depends(get_user_service),
) -> Response:
    return render(await user_handlers.delete_user(service, user_id))
