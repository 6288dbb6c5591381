"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider, MONGO_CONNECTION
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider

__all__ = [
    "DatabaseProvider",
    "MONGO_CONNECTION",
    "RepositoryProvider",
    "UserProvider",
]
