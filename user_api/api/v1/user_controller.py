"""
User Controller
===============

FastAPI controller for user CRUD endpoints.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status
from pymongo.errors import PyMongoError

from user_api.api.v1.dependencies import get_user_service
from user_api.api.v1.errors import ApiError
from user_api.application.dto.user_dto import ErrorResponse, UserIdResponse, UserResponse
from user_api.application.services.user_service import UserService
from user_api.domain.exceptions import UserDomainError, UserNotFoundError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])

NOT_FOUND_MESSAGE = "User not found"

_USER_EXAMPLE = {"name": "Al", "email": "A@X.com", "age": 30}


def _not_found() -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


def _store_failure(message: str, error: PyMongoError, status_code: int = status.HTTP_400_BAD_REQUEST) -> ApiError:
    logger.error(f"{message}: {error}", exc_info=True)
    return ApiError(status_code, message, str(error))


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a user",
    description="""
    Validate the candidate fields and store a new user.

    - name is trimmed and must keep at least 2 characters
    - email is trimmed, lowercased and must be unique
    - age is optional and must be a non-negative integer
    """
)
def create_user(
    payload: Dict[str, Any] = Body(..., examples=[_USER_EXAMPLE]),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user."""
    try:
        user = service.create_user(payload)
    except UserDomainError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Failed to create user", str(e))
    except PyMongoError as e:
        raise _store_failure("Failed to create user", e)

    return UserResponse.from_entity(user)


@router.get(
    "",
    response_model=List[UserResponse],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List users",
    description="Get every stored user. There is no pagination."
)
def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List all users."""
    try:
        users = service.list_users()
    except PyMongoError as e:
        raise _store_failure("Failed to fetch users", e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return [UserResponse.from_entity(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserIdResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Look up a user by ID",
    description="Confirm that a user exists and echo its id."
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserIdResponse:
    """Get a specific user by ID."""
    try:
        user = service.get_user(user_id)
    except UserNotFoundError:
        raise _not_found()
    except UserDomainError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Failed to get user", str(e))
    except PyMongoError as e:
        raise _store_failure("Failed to get user", e)

    return UserIdResponse(message="User found", id=user.id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a user",
    description="Replace the supplied fields of a user. Omitted fields keep their values; age may be set to null."
)
def update_user(
    user_id: str,
    payload: Optional[Dict[str, Any]] = Body(None, examples=[{"age": 31}]),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user."""
    try:
        user = service.update_user(user_id, payload or {})
    except UserNotFoundError:
        raise _not_found()
    except UserDomainError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Failed to update user", str(e))
    except PyMongoError as e:
        raise _store_failure("Failed to update user", e)

    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    response_model=UserIdResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a user",
    description="Remove a user permanently."
)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserIdResponse:
    """Delete a user."""
    try:
        deleted_id = service.delete_user(user_id)
    except UserNotFoundError:
        raise _not_found()
    except UserDomainError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Failed to delete user", str(e))
    except PyMongoError as e:
        raise _store_failure("Failed to delete user", e)

    return UserIdResponse(message="User deleted", id=deleted_id)
