"""Process-scoped dependency registry."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict

from ..exceptions import ActionInitError, DependencyResolutionError

if TYPE_CHECKING:
    from .actions.base import ActionInitializer, BaseAction

logger = logging.getLogger(__name__)

Factory = Callable[["Container"], Any]

_SINGLETON = "singleton"
_TRANSIENT = "transient"


class Container:
    """Registry of named dependencies.

    Factories take the container and resolve what they need from it, so
    construction is deferred until something asks for the dependency.
    """

    def __init__(self):
        self._factories: Dict[str, tuple] = {}
        self._instances: Dict[str, Any] = {}

    def register_instance(self, name: str, value: Any) -> None:
        self._factories.pop(name, None)
        self._instances[name] = value

    def register_singleton(self, name: str, factory: Factory) -> None:
        self._instances.pop(name, None)
        self._factories[name] = (_SINGLETON, factory)

    def register_transient(self, name: str, factory: Factory) -> None:
        self._instances.pop(name, None)
        self._factories[name] = (_TRANSIENT, factory)

    def is_registered(self, name: str) -> bool:
        return name in self._instances or name in self._factories

    def resolve(self, name: str) -> Any:
        if name in self._instances:
            return self._instances[name]

        if name not in self._factories:
            raise DependencyResolutionError(name, "not registered")

        lifetime, factory = self._factories[name]
        try:
            value = factory(self)
        except DependencyResolutionError:
            raise
        except Exception as e:
            raise DependencyResolutionError(name, str(e)) from e

        if lifetime == _SINGLETON:
            self._instances[name] = value
        logger.debug("resolved %s (%s)", name, lifetime)
        return value

    def initializer(self, name: str) -> "ActionInitializer":
        """Return a zero-argument factory that builds the named action on call."""
        def initialize() -> "BaseAction":
            try:
                return self.resolve(name)
            except DependencyResolutionError as e:
                raise ActionInitError(name, e) from e
        return initialize
