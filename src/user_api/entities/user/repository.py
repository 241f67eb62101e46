"""User repository."""

from src.user_api.entities._repository import CrudRepository
from src.user_api.entities.user.entity import User
from src.user_api.entities.user.table import UserTable


class UserRepository(CrudRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable
