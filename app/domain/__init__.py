"""Domain layer: exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserListException,
)

__all__ = [
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UserListException",
]
