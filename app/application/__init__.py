"""Application layer: DTOs and interfaces.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.dtos import UserResult
from app.application.interfaces import IUserRepository

__all__ = ["IUserRepository", "UserResult"]
