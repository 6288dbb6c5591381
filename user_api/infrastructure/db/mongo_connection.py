"""
MongoDB Connection
==================

Explicitly constructed MongoDB connection with a connect/close lifecycle.
The DI container creates one instance and opens it at application startup.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from user_api.domain.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns a single MongoClient and the application database handle.

    MongoClient is thread-safe and pools sockets, so one instance is shared
    by every request.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """
        Open the client and verify the server answers a ping.

        Raises:
            DatabaseConnectionError: If the URI is invalid or the server is unreachable
        """
        if self._client is not None:
            return  # Already connected

        client: Optional[MongoClient] = None
        try:
            client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                tz_aware=True,
            )
            client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                client.close()
            logger.error(f"❌ MongoDB connection error: {e}")
            raise DatabaseConnectionError(f"MongoDB connection failed: {e}") from e

        self._client = client
        self._database = client[self._database_name]
        logger.info(f"✅ Connected to MongoDB: {self._database_name}")

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            raise DatabaseConnectionError("MongoDB connection is not open")
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def ping(self) -> bool:
        """Check that the server still answers."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
