"""Get User Use Case"""
from user_api.domain.exceptions import UserNotFoundError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class GetUserUseCase:
    """Use case for looking up one user by id."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    def execute(self, user_id: str) -> User:
        """
        Raises:
            InvalidUserIdError: If user_id is malformed
            UserNotFoundError: If no user has this id
        """
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
