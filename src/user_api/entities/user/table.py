"""User database table model."""

from sqlmodel import Field

from src.user_api.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "users"

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = Field(default=None, unique=True)
