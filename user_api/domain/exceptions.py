"""User domain exceptions."""
from typing import Mapping


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UserValidationError(UserDomainError, ValueError):
    """A candidate record broke one or more field rules."""

    @classmethod
    def from_errors(cls, errors: Mapping[str, str]) -> "UserValidationError":
        """Build a single error that reports every failing field."""
        details = ", ".join(f"{field}: {reason}" for field, reason in errors.items())
        return cls(f"User validation failed: {details}")


class DuplicateEmailError(UserValidationError):
    """Another user already owns this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email '{email}' is already registered")


class InvalidUserIdError(UserDomainError, ValueError):
    """The identifier is not a well-formed store id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Invalid user id: '{user_id}'")


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, user_id: str):
        """Initialize with user identifier.

        Args:
            user_id: User ID that was not found
        """
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class DatabaseConnectionError(Exception):
    """The document store could not be reached or is not connected."""

    pass
