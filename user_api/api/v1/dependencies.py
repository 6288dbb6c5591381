"""
Request Dependencies
====================

Resolve services from the container that create_application() stored on
app.state, so every request shares the same explicitly built instances.
"""
from fastapi import Request

from user_api.application.services.user_service import UserService
from user_api.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """Get the application's DI container."""
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    """
    Get user service instance (singleton per application).

    Returns:
        UserService instance
    """
    return get_container(request).get(UserService)
