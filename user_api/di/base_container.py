# Standard library imports
import logging
from typing import Any, Callable, Dict, List, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')

logger = logging.getLogger(__name__)


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self._startup_hooks: List[Callable[[], None]] = []
        self._shutdown_hooks: List[Callable[[], None]] = []

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]
        raise ValueError(f"No registration found for {interface}")

    def add_startup_hook(self, hook: Callable[[], None]) -> None:
        """Run hook when the application starts (in registration order)"""
        self._startup_hooks.append(hook)

    def add_shutdown_hook(self, hook: Callable[[], None]) -> None:
        """Run hook when the application stops (in reverse registration order)"""
        self._shutdown_hooks.append(hook)

    def startup(self) -> None:
        """Run startup hooks. The first failure propagates and aborts startup."""
        for hook in self._startup_hooks:
            hook()

    def shutdown(self) -> None:
        """Run shutdown hooks; a failing hook is logged and the rest still run."""
        for hook in reversed(self._shutdown_hooks):
            try:
                hook()
            except Exception:
                logger.exception(f"Shutdown hook {hook!r} failed")
