"""
Service Container - Dependency Injection Container for factory-extensions
Manages service creation and dependencies.
"""

from typing import Dict, Any, List, Optional, Callable
import logging

logger = logging.getLogger(__name__)


class ServiceDefinition:
    """Definition of how a service should be created"""

    def __init__(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None
    ):
        self.name = name
        self.factory = factory
        self.dependencies = dependencies or []


class CircularDependencyError(Exception):
    """Raised when circular dependency is detected"""
    pass


class ServiceNotFoundError(Exception):
    """Raised when requested service is not registered"""
    pass


class ServiceContainer:
    """
    Dependency Injection Container for managing services and their dependencies.

    Features:
    - Dependency resolution by service name
    - Circular dependency detection
    - One shared instance per service
    - External (pre-built) dependencies
    """

    def __init__(self):
        self._services: Dict[str, ServiceDefinition] = {}
        self._instances: Dict[str, Any] = {}
        self._creating: List[str] = []  # creation stack, for circular detection

    def register(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None
    ) -> 'ServiceContainer':
        """
        Register a service with the container.

        Args:
            name: Service name for retrieval
            factory: Class or function to create the service
            dependencies: Service names passed positionally to the factory

        Returns:
            Self for method chaining
        """
        if name in self._services:
            raise ValueError(f"Service '{name}' is already registered")

        if not callable(factory):
            raise ValueError(f"Factory for '{name}' must be callable")

        self._services[name] = ServiceDefinition(
            name=name,
            factory=factory,
            dependencies=dependencies
        )
        return self

    def configure_services(self) -> 'ServiceContainer':
        """
        Register the resolver services with their dependencies.
        'FactoryRegistry' and 'ResolverConfig' are external dependencies.
        """
        from factory_extensions.services.name_resolver import NameResolver
        from factory_extensions.services.generation_dispatcher import GenerationDispatcher

        self.register('NameResolver', NameResolver, dependencies=['FactoryRegistry', 'ResolverConfig'])
        self.register(
            'GenerationDispatcher', GenerationDispatcher,
            dependencies=['FactoryRegistry', 'NameResolver', 'ResolverConfig']
        )
        return self

    def set_external_dependency(self, name: str, instance: Any) -> 'ServiceContainer':
        """Set an external dependency that's created outside the container."""
        self._instances[name] = instance
        return self

    def get(self, name: str) -> Any:
        """
        Get a service instance, creating it if necessary.

        Raises:
            ServiceNotFoundError: If service is not registered
            CircularDependencyError: If circular dependency detected
        """
        if name in self._instances:
            return self._instances[name]

        if name not in self._services:
            raise ServiceNotFoundError(f"Service '{name}' is not registered")

        return self._create_service(name)

    def _create_service(self, name: str) -> Any:
        """
        Create a service instance with dependency injection.
        """
        if name in self._creating:
            cycle = ' -> '.join(self._creating + [name])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")

        self._creating.append(name)

        try:
            service_def = self._services[name]
            dependencies = [self.get(dep_name) for dep_name in service_def.dependencies]

            instance = service_def.factory(*dependencies)
            self._instances[name] = instance

            logger.debug(f"Created service: {name}")
            return instance

        finally:
            self._creating.remove(name)

    def has_service(self, name: str) -> bool:
        """Check if a service is registered or provided externally"""
        return name in self._services or name in self._instances

    def validate_dependencies(self) -> Dict[str, List[str]]:
        """
        Validate all service dependencies can be resolved.

        Returns:
            Dictionary mapping service names to lists of missing dependencies
        """
        issues = {}

        for name, service_def in self._services.items():
            missing_deps = [dep for dep in service_def.dependencies if not self.has_service(dep)]
            if missing_deps:
                issues[name] = missing_deps

        return issues

    def clear(self) -> 'ServiceContainer':
        """Clear all services and instances (useful for testing)"""
        self._services.clear()
        self._instances.clear()
        self._creating.clear()
        return self

    def __repr__(self) -> str:
        return f"ServiceContainer(services={len(self._services)}, instances={len(self._instances)})"


# Global container instance
_app_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global service container, configuring it on first use"""
    global _app_container
    if _app_container is None:
        _app_container = ServiceContainer()
        configure_container()
    return _app_container


def configure_container(registry=None, config=None) -> ServiceContainer:
    """
    Configure the global service container.

    Args:
        registry: FactoryRegistry to resolve against, the global registry by default
        config: ResolverConfig, the loaded global config (or defaults) by default

    Returns:
        Configured service container
    """
    from factory_extensions.config_factory import ConfigError, ResolverConfig, get_config
    from factory_extensions.registry.factory_registry import get_registry

    global _app_container
    if _app_container is None:
        _app_container = ServiceContainer()
    container = _app_container
    container.clear()

    if config is None:
        try:
            config = get_config()
        except ConfigError:
            config = ResolverConfig()

    if registry is None:
        registry = get_registry()
        registry.allow_replacement = config.allow_factory_replacement

    container.set_external_dependency('FactoryRegistry', registry)
    container.set_external_dependency('ResolverConfig', config)
    container.configure_services()

    issues = container.validate_dependencies()
    if issues:
        raise ValueError(f"Service dependency issues: {issues}")

    logger.debug("Service container configured")
    return container


def reset_container() -> None:
    """Reset the global container (useful for testing)"""
    global _app_container
    if _app_container is not None:
        _app_container.clear()
    _app_container = None


def get_default_dispatcher():
    """Get the GenerationDispatcher from the global container"""
    return get_container().get('GenerationDispatcher')
