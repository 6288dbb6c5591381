"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from user_api.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    Implementations own the id and the createdAt/updatedAt timestamps,
    and enforce email uniqueness.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user: Validated, unsaved user entity

        Returns:
            Stored user with id and timestamps assigned

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """
        Find every stored user.

        Returns:
            List of user entities, oldest first
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by its ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity if found, None otherwise

        Raises:
            InvalidUserIdError: If user_id is not a well-formed id
        """
        pass

    @abstractmethod
    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """
        Replace the given fields of a user.

        Args:
            user_id: Unique user identifier
            changes: Validated field values; an age of None clears the age

        Returns:
            Updated user entity, or None if no user has this id

        Raises:
            InvalidUserIdError: If user_id is not a well-formed id
            DuplicateEmailError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Args:
            user_id: Unique user identifier

        Returns:
            True if user was found and deleted, False otherwise

        Raises:
            InvalidUserIdError: If user_id is not a well-formed id
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Check that the backing store answers."""
        pass
