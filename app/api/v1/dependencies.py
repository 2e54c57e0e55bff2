"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and repositories. Routes depend
only on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import UserRepository


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository bound to the request-scoped session."""
    return UserRepository(db)
