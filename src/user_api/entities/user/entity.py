"""User domain entity."""

from pydantic import Field

from src.user_api.entities._base import Entity


class User(Entity):
    """User entity representing a person in the system.

    Name fields are optional at the schema level; ``email`` is unique across
    all users, which the ``users`` table enforces.
    """

    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")
