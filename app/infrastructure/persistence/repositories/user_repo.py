"""User repository. Interface methods return application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, first_name=u.first_name, last_name=u.last_name)


class UserRepository(BaseRepository[User]):
    """User repository: list_users, get_user, create_user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def list_users(self) -> list[UserResult]:
        return [_user_to_result(u) for u in await self.get_all()]

    async def get_user(self, user_id: int) -> UserResult | None:
        user = await self.get_by_id(user_id)
        return _user_to_result(user) if user is not None else None

    async def create_user(self, first_name: str, last_name: str) -> UserResult:
        """Insert a user; Id is assigned by the store."""
        user = await self.create(User(first_name=first_name, last_name=last_name))
        return _user_to_result(user)
