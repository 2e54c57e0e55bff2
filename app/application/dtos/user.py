"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of list_users, get_user)."""

    id: int
    first_name: str
    last_name: str
