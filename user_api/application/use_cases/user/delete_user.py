"""
Delete User Use Case
====================

Business use case for removing a user permanently (no soft delete).
"""
import logging

from user_api.domain.exceptions import UserNotFoundError
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    def execute(self, user_id: str) -> str:
        """
        Execute the delete user use case.

        Args:
            user_id: Unique user identifier

        Returns:
            The id of the deleted user

        Raises:
            InvalidUserIdError: If user_id is malformed
            UserNotFoundError: If no user has this id
        """
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)

        logger.info(f"User {user_id} deleted")
        return user_id
