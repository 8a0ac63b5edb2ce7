"""
Generation Dispatcher Service

Public build / generate / generate_strict / attributes operations. Each
resolves a factory by naming convention, runs it under a strategy and hands
the result to an optional callback before returning it.
"""

from typing import Any, Callable, Dict, Optional, Sequence

from factory_extensions.config_factory import ResolverConfig
from factory_extensions.core.errors import ValidationFailed
from factory_extensions.core.naming import modifier_tokens
from factory_extensions.core.strategies import Strategy
from factory_extensions.registry.factory_registry import FactoryRegistry, RegisteredFactory
from .base_service import BaseService
from .name_resolver import NameResolver

Callback = Optional[Callable[[Any], Any]]


class GenerationDispatcher(BaseService):
    """
    Dispatches generation requests to resolved factories.

    - build: unsaved instance
    - generate: instance saved best-effort with ``save()``; failures do not raise
    - generate_strict: instance from the factory's create strategy; failures raise
    - attributes: dict of attribute values, no instance constructed

    The callback receives the produced value after any persistence attempt.
    Its return value is ignored.
    """

    def __init__(
        self,
        registry: FactoryRegistry,
        resolver: Optional[NameResolver] = None,
        config: Optional[ResolverConfig] = None
    ):
        self.registry = registry
        self.resolver = resolver
        super().__init__(config)

    def _initialize(self) -> None:
        if self.resolver is None:
            self.resolver = NameResolver(self.registry, self._config)
        self.record_persistence_errors = self.get_config_value('record_persistence_errors', True)

    def _resolve(self, base_name: str, modifiers: Sequence[Any]) -> RegisteredFactory:
        return self.resolver.resolve(base_name, modifier_tokens(modifiers))

    @staticmethod
    def _finish(value: Any, callback: Callback) -> Any:
        if callback is not None:
            callback(value)
        return value

    def build(
        self,
        base_name: str,
        modifiers: Sequence[Any] = (),
        overrides: Optional[Dict[str, Any]] = None,
        callback: Callback = None
    ) -> Any:
        """Create an unsaved instance."""
        registered = self._resolve(base_name, modifiers)
        instance = registered.materialize(Strategy.BUILD, overrides)
        return self._finish(instance, callback)

    def generate(
        self,
        base_name: str,
        modifiers: Sequence[Any] = (),
        overrides: Optional[Dict[str, Any]] = None,
        callback: Callback = None
    ) -> Any:
        """
        Create an instance and save it without raising on invalid data.

        The instance is built, then ``save()`` is called on it. A
        ValidationFailed raised by ``save()`` is logged and, when
        ``record_persistence_errors`` is enabled, stored on the instance as
        ``persistence_error``.
        """
        registered = self._resolve(base_name, modifiers)
        instance = registered.materialize(Strategy.BUILD, overrides)

        try:
            instance.save()
        except ValidationFailed as e:
            self.log_warning(
                f"Could not save instance from factory {registered.name}",
                exception=e, factory_name=registered.name
            )
            if self.record_persistence_errors:
                instance.persistence_error = e

        return self._finish(instance, callback)

    def generate_strict(
        self,
        base_name: str,
        modifiers: Sequence[Any] = (),
        overrides: Optional[Dict[str, Any]] = None,
        callback: Callback = None
    ) -> Any:
        """
        Create a saved instance through the factory's create strategy.

        Raises:
            ValidationFailed: If persistence rejects the instance
        """
        registered = self._resolve(base_name, modifiers)
        instance = registered.materialize(Strategy.CREATE, overrides)
        return self._finish(instance, callback)

    def attributes(
        self,
        base_name: str,
        modifiers: Sequence[Any] = (),
        overrides: Optional[Dict[str, Any]] = None,
        callback: Callback = None
    ) -> Dict[str, Any]:
        """Return the factory's attributes as a dict, overrides applied."""
        registered = self._resolve(base_name, modifiers)
        attrs = registered.materialize(Strategy.ATTRIBUTES_FOR, overrides)
        return self._finish(attrs, callback)

    gen = generate
    gen_strict = generate_strict
    attrs = attributes
