"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from user_api.domain.constants.user_fields import UserFields
from user_api.domain.exceptions import DuplicateEmailError, InvalidUserIdError
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository
from user_api.infrastructure.db.mongo_connection import MongoConnection
from user_api.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Documents use the store's ObjectId as _id; the API exposes it as a
    hex string. Email uniqueness comes from a unique index created by
    ensure_indexes() at startup.
    """

    COLLECTION_NAME = "users"
    EMAIL_INDEX_NAME = "email_1"

    def __init__(self, connection: MongoConnection, collection_name: str = COLLECTION_NAME):
        """Initialize repository with a (possibly not yet opened) connection."""
        self._connection = connection
        self._collection_name = collection_name

    @property
    def _collection(self) -> Collection:
        # Resolved per call: the connection is only opened at startup
        return self._connection.get_collection(self._collection_name)

    @staticmethod
    def _to_object_id(user_id: str) -> ObjectId:
        if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
            raise InvalidUserIdError(str(user_id))
        return ObjectId(user_id)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=str(doc[UserFields.MONGO_ID]),
            name=doc[UserFields.NAME],
            email=doc[UserFields.EMAIL],
            age=doc.get(UserFields.AGE),
            created_at=doc.get(UserFields.CREATED_AT),
            updated_at=doc.get(UserFields.UPDATED_AT),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document (without _id)."""
        doc = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }
        if user.age is not None:
            doc[UserFields.AGE] = user.age
        return doc

    def ensure_indexes(self) -> None:
        """Create the unique email index if it does not exist yet."""
        self._collection.create_index(
            [(UserFields.EMAIL, ASCENDING)],
            unique=True,
            name=self.EMAIL_INDEX_NAME,
        )
        logger.info(f"Ensured unique index '{self.EMAIL_INDEX_NAME}' on '{self._collection_name}'")

    def create(self, user: User) -> User:
        """Create a new user."""
        timestamp = now()
        user.created_at = timestamp
        user.updated_at = timestamp

        doc = self._to_document(user)
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user.email) from e

        user.id = str(result.inserted_id)
        return user

    def find_all(self) -> List[User]:
        """Find every stored user."""
        docs = self._collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by its ID."""
        doc = self._collection.find_one({UserFields.MONGO_ID: self._to_object_id(user_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """Replace the given fields of a user."""
        object_id = self._to_object_id(user_id)

        to_set = {
            field: value
            for field, value in changes.items()
            if field in UserFields.EDITABLE and value is not None
        }
        to_set[UserFields.UPDATED_AT] = now()
        update: Dict[str, Any] = {"$set": to_set}
        if UserFields.AGE in changes and changes[UserFields.AGE] is None:
            update["$unset"] = {UserFields.AGE: ""}

        try:
            result = self._collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateEmailError(changes.get(UserFields.EMAIL, "")) from e

        if not result:
            return None
        return self._to_entity(result)

    def delete(self, user_id: str) -> bool:
        """Delete a user."""
        result = self._collection.delete_one({UserFields.MONGO_ID: self._to_object_id(user_id)})
        return result.deleted_count > 0

    def ping(self) -> bool:
        return self._connection.ping()
