"""User API: thin read-only routes delegating to UserRepository."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_user_repo
from app.application.interfaces import IUserRepository
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.user import UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> list[UserResponse]:
    """List all users in primary-key order."""
    users = await user_repo.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> UserResponse:
    """Get user by id."""
    user = await user_repo.get_user(user_id)
    if user is None:
        raise ResourceNotFoundException("User", user_id)
    return UserResponse.model_validate(user)
