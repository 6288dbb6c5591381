"""
User DTO
========

Pydantic models for user API responses.
Field names match the JSON contract (createdAt/updatedAt in camelCase).
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from user_api.domain.models.user import User
from user_api.utils.datetime_utils import to_iso


class UserResponse(BaseModel):
    """DTO for user data."""
    id: str
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "6650c7a2f1d3b45e8c9a0b12",
                "name": "Al",
                "email": "a@x.com",
                "age": 30,
                "createdAt": "2025-12-20T09:11:50.840Z",
                "updatedAt": "2025-12-20T09:11:50.840Z",
            }
        },
    )

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return to_iso(value)

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserIdResponse(BaseModel):
    """DTO for single-user lookups and deletions."""
    message: str
    id: str


class ErrorResponse(BaseModel):
    """DTO for every error body."""
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """DTO for the health endpoint."""
    status: str
    database: str
