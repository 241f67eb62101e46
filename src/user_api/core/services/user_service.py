from loguru import logger

from src.user_api.core.exceptions import ResourceNotFoundError
from src.user_api.entities.user import User, UserDto, UserRepository


class UserService:
    """Business operations on users.

    Enforces existence checks and converts between ``UserDto`` and ``User``.
    Email uniqueness is left to the storage layer; ``ResourceConflictError``
    from the repository propagates unchanged.
    """

    def __init__(self, repository: UserRepository):
        self._repository = repository

    def create_user(self, user_dto: UserDto) -> UserDto:
        """Persist a new user and return it with its generated id."""
        logger.info("Attempting to create a new user with email: {}", user_dto.email)
        saved_user = self._repository.save(self._to_entity(user_dto))
        logger.info("Successfully created user with ID: {}", saved_user.id)
        return self._to_dto(saved_user)

    def get_user_by_id(self, user_id: int) -> UserDto:
        logger.info("Attempting to find user with ID: {}", user_id)
        user = self._find_or_raise(user_id)
        logger.info("Successfully found user with ID: {}", user_id)
        return self._to_dto(user)

    def get_all_users(self) -> list[UserDto]:
        logger.info("Attempting to retrieve all users.")
        users = self._repository.find_all()
        logger.info("Successfully retrieved {} users.", len(users))
        return [self._to_dto(user) for user in users]

    def update_user(self, user_id: int, user_dto: UserDto) -> UserDto:
        """Replace first name, last name and email of an existing user."""
        logger.info("Attempting to update user with ID: {}", user_id)
        existing_user = self._find_or_raise(user_id)

        existing_user.first_name = user_dto.first_name
        existing_user.last_name = user_dto.last_name
        existing_user.email = user_dto.email

        updated_user = self._repository.save(existing_user)
        logger.info("Successfully updated user with ID: {}", user_id)
        return self._to_dto(updated_user)

    def delete_user(self, user_id: int) -> None:
        # Existence check and delete are separate round-trips; a concurrent
        # delete of the same id between them makes the second a no-op.
        logger.info("Attempting to delete user with ID: {}", user_id)
        if not self._repository.exists_by_id(user_id):
            logger.error("User not found for deletion with ID: {}", user_id)
            raise ResourceNotFoundError(f"User not found with id: {user_id}")
        self._repository.delete_by_id(user_id)
        logger.info("Successfully deleted user with ID: {}", user_id)

    def _find_or_raise(self, user_id: int) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            logger.error("User not found with ID: {}", user_id)
            raise ResourceNotFoundError(f"User not found with id: {user_id}")
        return user

    @staticmethod
    def _to_dto(user: User) -> UserDto:
        return UserDto(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )

    @staticmethod
    def _to_entity(user_dto: UserDto) -> User:
        # The id is generated by the database; any supplied value is ignored
        return User(
            first_name=user_dto.first_name,
            last_name=user_dto.last_name,
            email=user_dto.email,
        )
