"""
Create User Use Case
====================

Business use case for registering a new user.
"""
import logging
from typing import Any, Mapping

from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.

    Validates the candidate fields, then lets the repository assign the id
    and timestamps.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize use case with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository

    def execute(self, payload: Mapping[str, Any]) -> User:
        """
        Execute the create user use case.

        Args:
            payload: Candidate user fields (name, email, age)

        Returns:
            Stored user entity

        Raises:
            UserValidationError: If a field fails validation
            DuplicateEmailError: If the email is already registered
        """
        user = User.from_payload(payload)
        created = self._repository.create(user)
        logger.info(f"User {created.id} created")
        return created
