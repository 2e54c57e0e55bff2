"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.user import UserResult


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def list_users(self) -> list[UserResult]:
        """Return all users in primary-key order."""

    async def get_user(self, user_id: int) -> UserResult | None:
        """Return user by ID, or None."""
