"""Persistence models: ORM entities."""

from app.infrastructure.persistence.models.user import User

__all__ = ["User"]
