"""
Update User Use Case
====================

Business use case for replacing some or all editable fields of a user.
"""
import logging
from typing import Any, Mapping

from user_api.domain.exceptions import UserNotFoundError
from user_api.domain.models.user import User, validate_changes
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user.

    Only the supplied fields are re-validated; the rest keep their stored values.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize use case with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository

    def execute(self, user_id: str, payload: Mapping[str, Any]) -> User:
        """
        Execute the update user use case.

        Args:
            user_id: Unique user identifier
            payload: Partial user fields

        Returns:
            Updated user entity

        Raises:
            UserValidationError: If a supplied field fails validation
            DuplicateEmailError: If the new email belongs to another user
            InvalidUserIdError: If user_id is malformed
            UserNotFoundError: If no user has this id
        """
        changes = validate_changes(payload, partial=True)
        updated = self._repository.update(user_id, changes)
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info(f"User {user_id} updated ({', '.join(sorted(changes)) or 'no fields'})")
        return updated
