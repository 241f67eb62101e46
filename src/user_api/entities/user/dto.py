"""Wire representation of a user."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserDto(BaseModel):
    """User data exchanged with API clients.

    Serialized with camelCase keys (``firstName``); snake_case keys are
    accepted on input as well.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = Field(default=None, description="Identifier assigned on create")
    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")
