"""
User Service
============

Application service that coordinates user-related operations.
This service orchestrates the user use cases.
"""
from typing import Any, List, Mapping

from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.application.use_cases.user.create_user import CreateUserUseCase
from user_api.application.use_cases.user.get_user import GetUserUseCase
from user_api.application.use_cases.user.list_users import ListUsersUseCase
from user_api.application.use_cases.user.update_user import UpdateUserUseCase
from user_api.application.use_cases.user.delete_user import DeleteUserUseCase


class UserService:
    """
    Application service for user operations.

    This service coordinates multiple use cases and provides
    a high-level interface for user management.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize service with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository
        self._create_use_case = CreateUserUseCase(user_repository)
        self._get_use_case = GetUserUseCase(user_repository)
        self._list_use_case = ListUsersUseCase(user_repository)
        self._update_use_case = UpdateUserUseCase(user_repository)
        self._delete_use_case = DeleteUserUseCase(user_repository)

    def create_user(self, payload: Mapping[str, Any]) -> User:
        """
        Create a user.

        Args:
            payload: Candidate user fields

        Returns:
            Stored user entity
        """
        return self._create_use_case.execute(payload)

    def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this id
        """
        return self._get_use_case.execute(user_id)

    def list_users(self) -> List[User]:
        """List every user."""
        return self._list_use_case.execute()

    def update_user(self, user_id: str, payload: Mapping[str, Any]) -> User:
        """
        Update the supplied fields of a user.

        Args:
            user_id: Unique user identifier
            payload: Partial user fields

        Returns:
            Updated user entity
        """
        return self._update_use_case.execute(user_id, payload)

    def delete_user(self, user_id: str) -> str:
        """
        Delete a user.

        Returns:
            The id of the deleted user
        """
        return self._delete_use_case.execute(user_id)

    def is_store_available(self) -> bool:
        """Check that the backing store answers."""
        return self._repository.ping()
