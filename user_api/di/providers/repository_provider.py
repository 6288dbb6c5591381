from typing import TYPE_CHECKING

from user_api.core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.memory.in_memory_user_repository import InMemoryUserRepository
from .database_provider import MONGO_CONNECTION, MONGODB_BACKEND

if TYPE_CHECKING:
    from ..base_container import BaseContainer

INMEMORY_BACKEND = "inmemory"


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the UserRepository implementation chosen by USER_REPOSITORY.

        Raises:
            ValueError: If USER_REPOSITORY names an unknown backend
        """
        settings: Settings = container.get(Settings)
        backend = settings.user_repository

        if backend == MONGODB_BACKEND:
            repository = MongoUserRepository(
                container.get(MONGO_CONNECTION),
                collection_name=settings.users_collection,
            )
            # Runs after the connection's own startup hook
            container.add_startup_hook(repository.ensure_indexes)
        elif backend == INMEMORY_BACKEND:
            repository = InMemoryUserRepository()
        else:
            raise ValueError(
                f"Invalid USER_REPOSITORY value: {backend}. "
                f"Expected '{MONGODB_BACKEND}' or '{INMEMORY_BACKEND}'"
            )

        container.register_singleton(UserRepository, repository)
