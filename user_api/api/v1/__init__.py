"""
API v1 Package
===============

Version 1 API controllers.
"""
from .user_controller import router as user_router
from .errors import register_exception_handlers

__all__ = ["user_router", "register_exception_handlers"]
