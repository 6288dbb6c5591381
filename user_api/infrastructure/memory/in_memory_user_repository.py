"""In-memory User Repository for local runs and tests."""
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from bson import ObjectId

from user_api.domain.constants.user_fields import UserFields
from user_api.domain.exceptions import DuplicateEmailError, InvalidUserIdError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.utils.datetime_utils import now


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of User repository.

    Mirrors MongoUserRepository: ids are ObjectId hex strings, malformed ids
    raise InvalidUserIdError and emails are unique. Entities are copied on the
    way in and out so callers never share state with the store.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = repo.create(User.create("Al", "A@X.com", 30))
        >>> repo.find_by_id(user.id).email
        'a@x.com'
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _check_id(user_id: str) -> str:
        if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
            raise InvalidUserIdError(str(user_id))
        return user_id

    def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            user.email == email and user_id != exclude_id
            for user_id, user in self._users.items()
        )

    def create(self, user: User) -> User:
        """Save a new user in memory."""
        with self._lock:
            if self._email_taken(user.email):
                raise DuplicateEmailError(user.email)

            timestamp = now()
            stored = replace(
                user,
                id=str(ObjectId()),
                created_at=timestamp,
                updated_at=timestamp,
            )
            self._users[stored.id] = stored
            return replace(stored)

    def find_all(self) -> List[User]:
        """Return every user in insertion order."""
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by id.

        Returns:
            User entity or None if not found
        """
        self._check_id(user_id)
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """Apply validated changes to a stored user."""
        self._check_id(user_id)
        with self._lock:
            stored = self._users.get(user_id)
            if stored is None:
                return None

            email = changes.get(UserFields.EMAIL)
            if email is not None and self._email_taken(email, exclude_id=user_id):
                raise DuplicateEmailError(email)

            stored.apply_changes(changes)
            stored.updated_at = now()
            return replace(stored)

    def delete(self, user_id: str) -> bool:
        """Delete user by id.

        Returns:
            True if user was deleted, False if it did not exist
        """
        self._check_id(user_id)
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def ping(self) -> bool:
        return True
