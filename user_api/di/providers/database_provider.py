from typing import TYPE_CHECKING

from user_api.core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_CONNECTION = "mongo_connection"
MONGODB_BACKEND = "mongodb"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB connection when the mongodb backend is selected.

        The connection is only constructed here; it is opened by the startup
        hook and closed by the shutdown hook.
        """
        settings: Settings = container.get(Settings)
        if settings.user_repository != MONGODB_BACKEND:
            return

        if not settings.mongo_uri:
            raise RuntimeError("❌ MONGO_URI not set. Please configure it in your .env file.")

        connection = MongoConnection(
            uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            server_selection_timeout_ms=settings.mongo_timeout_ms,
        )
        container.register_singleton(MONGO_CONNECTION, connection)
        container.add_startup_hook(connection.connect)
        container.add_shutdown_hook(connection.close)
