"""Application DTOs (no ORM dependency)."""

from app.application.dtos.user import UserResult

__all__ = ["UserResult"]
