"""User API schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
