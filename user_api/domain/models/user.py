"""
User Model
==========

Domain model representing a user record, plus the field rules every
record must satisfy before it is persisted.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from user_api.domain.constants.user_fields import UserFields
from user_api.domain.exceptions import UserValidationError

NAME_MIN_LENGTH = 2
# largest integer a BSON document can hold (int64)
AGE_MAX = 2 ** 63 - 1

_AGE_MESSAGE = "must be a non-negative integer"


def _clean_name(value: Any) -> str:
    if value is None:
        raise ValueError("is required")
    if not isinstance(value, str):
        raise ValueError("must be a string")
    name = value.strip()
    if not name:
        raise ValueError("is required")
    if len(name) < NAME_MIN_LENGTH:
        raise ValueError(
            f"'{name}' is shorter than the minimum allowed length ({NAME_MIN_LENGTH})"
        )
    return name


def _clean_email(value: Any) -> str:
    if value is None:
        raise ValueError("is required")
    if not isinstance(value, str):
        raise ValueError("must be a string")
    email = value.strip().lower()
    if not email:
        raise ValueError("is required")
    return email


def _clean_age(value: Any) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; True is not an age
    if isinstance(value, bool):
        raise ValueError(_AGE_MESSAGE)

    if isinstance(value, int):
        age = value
    elif isinstance(value, float) and value.is_integer():
        age = int(value)
    elif isinstance(value, str):
        try:
            age = int(value.strip())
        except ValueError:
            raise ValueError(_AGE_MESSAGE) from None
    else:
        raise ValueError(_AGE_MESSAGE)

    if age < 0:
        raise ValueError(f"{age} is less than the minimum allowed value (0)")
    if age > AGE_MAX:
        raise ValueError(f"is more than the maximum allowed value ({AGE_MAX})")
    return age


_CLEANERS: Dict[str, Callable[[Any], Any]] = {
    UserFields.NAME: _clean_name,
    UserFields.EMAIL: _clean_email,
    UserFields.AGE: _clean_age,
}


def validate_changes(candidate: Mapping[str, Any], partial: bool = True) -> Dict[str, Any]:
    """
    Validate and normalize user fields.

    Only name, email and age are looked at; anything else in the candidate
    (ids, timestamps, unknown keys) is dropped.

    Args:
        candidate: Raw field values, usually a decoded JSON body
        partial: When True only the supplied fields are checked (updates).
            When False missing fields count as null (creation).

    Returns:
        Normalized values for the checked fields

    Raises:
        UserValidationError: If any field fails; every failing field is reported
    """
    cleaned: Dict[str, Any] = {}
    errors: Dict[str, str] = {}

    for field_name, cleaner in _CLEANERS.items():
        if field_name not in candidate and partial:
            continue
        try:
            cleaned[field_name] = cleaner(candidate.get(field_name))
        except ValueError as e:
            errors[field_name] = f"Path `{field_name}` {e}"

    if errors:
        raise UserValidationError.from_errors(errors)
    return cleaned


@dataclass
class User:
    """
    User domain model.

    id and the timestamps stay None until the record has been stored;
    the repository assigns them.
    """
    name: str
    email: str
    age: Optional[int] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, name: Any, email: Any, age: Any = None) -> "User":
        """Build a new, unsaved user after validating every field."""
        return cls.from_payload(
            {UserFields.NAME: name, UserFields.EMAIL: email, UserFields.AGE: age}
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "User":
        """Build a new, unsaved user from a request body."""
        cleaned = validate_changes(payload, partial=False)
        return cls(
            name=cleaned[UserFields.NAME],
            email=cleaned[UserFields.EMAIL],
            age=cleaned[UserFields.AGE],
        )

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """Apply already-validated field changes in place."""
        for field_name in UserFields.EDITABLE:
            if field_name in changes:
                setattr(self, field_name, changes[field_name])
