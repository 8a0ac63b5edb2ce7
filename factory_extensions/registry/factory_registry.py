"""
Factory Registry

This module provides the exact-name store of factory_boy factories that the
name resolver consults, and the RegisteredFactory wrapper that runs a factory
under a build strategy.
"""

import importlib
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Union

import factory
from factory.base import BaseFactory

from factory_extensions.core.errors import FactoryDefinitionError, FactoryNotRegisteredError
from factory_extensions.core.strategies import Strategy

logger = logging.getLogger(__name__)


class RegisteredFactory:
    """A factory_boy factory class registered under an exact name."""

    def __init__(self, name: str, factory_class: type):
        self.name = name
        self.factory_class = factory_class

    def materialize(self, strategy: Strategy, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """
        Run the factory under a strategy.

        Args:
            strategy: Which output to produce
            overrides: Attribute values applied on top of the factory defaults

        Returns:
            An instance for BUILD and CREATE, a dict for ATTRIBUTES_FOR
        """
        overrides = dict(overrides or {})

        if strategy == Strategy.BUILD:
            return self.factory_class.build(**overrides)
        if strategy == Strategy.CREATE:
            return self.factory_class.create(**overrides)
        if strategy == Strategy.ATTRIBUTES_FOR:
            return factory.build(dict, FACTORY_CLASS=self.factory_class, **overrides)

        raise ValueError(f"Unknown strategy: {strategy!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegisteredFactory):
            return NotImplemented
        return self.name == other.name and self.factory_class is other.factory_class

    def __hash__(self) -> int:
        return hash((self.name, self.factory_class))

    def __repr__(self) -> str:
        return f"RegisteredFactory(name={self.name!r}, factory_class={self.factory_class.__name__})"


def _check_factory_class(name: str, factory_class: Any) -> None:
    if not isinstance(factory_class, type) or not issubclass(factory_class, BaseFactory):
        raise FactoryDefinitionError(
            f"Factory '{name}' must be a factory_boy factory class, got {factory_class!r}",
            details={'name': name}
        )
    if factory_class._meta.abstract:
        raise FactoryDefinitionError(
            f"Factory '{name}' is abstract and cannot be registered",
            details={'name': name}
        )


class FactoryRegistry:
    """
    Registry mapping exact names to factory_boy factories.

    Factories are registered either directly or by dotted import path; path
    registrations are imported on first lookup.
    """

    def __init__(self, allow_replacement: bool = False):
        self._factories: Dict[str, RegisteredFactory] = {}
        self._lazy_paths: Dict[str, str] = {}
        self._lock = threading.RLock()
        self.allow_replacement = allow_replacement

    def register(self, name: str, factory_class: type) -> RegisteredFactory:
        """
        Register a factory class under an exact name.

        Raises:
            FactoryDefinitionError: If the name is empty, already taken, or the
                class is not a concrete factory_boy factory
        """
        if not isinstance(name, str) or not name.strip():
            raise FactoryDefinitionError(f"Invalid factory name: {name!r}")

        _check_factory_class(name, factory_class)

        with self._lock:
            self._check_available(name)
            registered = RegisteredFactory(name, factory_class)
            self._factories[name] = registered
            self._lazy_paths.pop(name, None)

        logger.debug(f"Registered factory: {name} -> {factory_class.__name__}")
        return registered

    def register_path(self, name: str, dotted_path: str) -> None:
        """Register a factory by 'package.module.FactoryClass' path, imported on first lookup."""
        if not isinstance(name, str) or not name.strip():
            raise FactoryDefinitionError(f"Invalid factory name: {name!r}")

        with self._lock:
            self._check_available(name)
            self._lazy_paths[name] = dotted_path
            self._factories.pop(name, None)

        logger.debug(f"Registered factory path: {name} -> {dotted_path}")

    def register_factory(self, name: str) -> Callable[[type], type]:
        """Class decorator form of register()."""
        def decorator(factory_class: type) -> type:
            self.register(name, factory_class)
            return factory_class
        return decorator

    def _check_available(self, name: str) -> None:
        if self.allow_replacement:
            return
        if name in self._factories or name in self._lazy_paths:
            raise FactoryDefinitionError(
                f"Factory '{name}' is already registered",
                details={'name': name}
            )

    def lookup_by_exact_name(self, name: str) -> RegisteredFactory:
        """
        Get a registered factory by its exact name.

        Raises:
            FactoryNotRegisteredError: If nothing is registered under the name
            FactoryDefinitionError: If a path registration cannot be imported
        """
        registered = self._factories.get(name)
        if registered is not None:
            return registered

        with self._lock:
            if name in self._factories:
                return self._factories[name]
            if name not in self._lazy_paths:
                raise FactoryNotRegisteredError(name)

            factory_class = self._import_path(name, self._lazy_paths[name])
            _check_factory_class(name, factory_class)
            registered = RegisteredFactory(name, factory_class)
            self._factories[name] = registered
            del self._lazy_paths[name]

        logger.debug(f"Imported factory: {name} -> {factory_class.__name__}")
        return registered

    @staticmethod
    def _import_path(name: str, dotted_path: str) -> type:
        module_path, _, attr = dotted_path.rpartition('.')
        if not module_path:
            raise FactoryDefinitionError(
                f"Factory '{name}' has an invalid import path: {dotted_path!r}",
                details={'name': name, 'path': dotted_path}
            )
        try:
            module = importlib.import_module(module_path)
            return getattr(module, attr)
        except (ImportError, AttributeError) as e:
            raise FactoryDefinitionError(
                f"Factory '{name}' could not be imported from {dotted_path!r}: {e}",
                details={'name': name, 'path': dotted_path}
            ) from e

    def unregister(self, name: str) -> None:
        """Remove a registration; unknown names raise FactoryNotRegisteredError."""
        with self._lock:
            if name in self._factories:
                del self._factories[name]
            elif name in self._lazy_paths:
                del self._lazy_paths[name]
            else:
                raise FactoryNotRegisteredError(name)
        logger.debug(f"Unregistered factory: {name}")

    def has_factory(self, name: str) -> bool:
        """Check if a factory is registered under an exact name."""
        return name in self._factories or name in self._lazy_paths

    def get_factory_names(self) -> List[str]:
        """Get a sorted list of every registered name."""
        with self._lock:
            return sorted(set(self._factories) | set(self._lazy_paths))

    def clear(self) -> None:
        """Clear all registrations. Useful for testing."""
        with self._lock:
            self._factories.clear()
            self._lazy_paths.clear()
        logger.debug("Factory registry cleared")

    def __contains__(self, name: str) -> bool:
        return self.has_factory(name)

    def __len__(self) -> int:
        return len(self.get_factory_names())

    def __repr__(self) -> str:
        return f"FactoryRegistry(factories={len(self)})"


# Global registry instance
_registry = FactoryRegistry()


def get_registry() -> FactoryRegistry:
    """Get the global factory registry instance."""
    return _registry


def register_factories(factories: Dict[str, Union[type, str]], registry: Optional[FactoryRegistry] = None) -> None:
    """
    Register several factories at once.

    Args:
        factories: Mapping of name -> factory class or dotted import path
        registry: Target registry, the global one by default
    """
    if registry is None:
        registry = get_registry()

    for name, target in factories.items():
        if isinstance(target, str):
            registry.register_path(name, target)
        else:
            registry.register(name, target)

    logger.info(f"Registered {len(factories)} factories")
