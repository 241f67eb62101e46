"""User API router with CRUD operations."""

from fastapi import APIRouter, Depends, status
from loguru import logger
from starlette.responses import PlainTextResponse

from src.user_api.api.http.deps import get_user_service
from src.user_api.core.services import UserService
from src.user_api.entities.user import UserDto

router = APIRouter(prefix="/api/v1/users", tags=["users"])

USER_DELETED_MESSAGE = "User deleted successfully."


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserDto,
    user_service: UserService = Depends(get_user_service),
) -> UserDto:
    """Create a new user."""
    logger.info("Received request to create user")
    created_user = user_service.create_user(user)
    logger.info("Responding with created user, ID: {}", created_user.id)
    return created_user


@router.get("/{user_id}", response_model=UserDto)
def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> UserDto:
    """Get a user by ID."""
    logger.info("Received request to get user by ID: {}", user_id)
    return user_service.get_user_by_id(user_id)


@router.get("", response_model=list[UserDto])
def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[UserDto]:
    """List all users."""
    logger.info("Received request to get all users")
    users = user_service.get_all_users()
    logger.info("Responding with a list of {} users", len(users))
    return users


@router.put("/{user_id}", response_model=UserDto)
def update_user(
    user_id: int,
    user: UserDto,
    user_service: UserService = Depends(get_user_service),
) -> UserDto:
    """Replace a user's first name, last name and email."""
    logger.info("Received request to update user with ID: {}", user_id)
    return user_service.update_user(user_id, user)


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Delete a user."""
    logger.info("Received request to delete user with ID: {}", user_id)
    user_service.delete_user(user_id)
    return PlainTextResponse(USER_DELETED_MESSAGE)
