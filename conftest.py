"""
Global pytest configuration and fixtures.
Provides registry and dispatcher fixtures with a clean global state per test.
"""

import pytest

from factory_extensions.config_factory import ResolverConfig, reset_config
from factory_extensions.container import configure_container, reset_container
from factory_extensions.registry import get_registry
from factory_extensions.services import GenerationDispatcher, NameResolver
from tests.factories.dog_factory import create_dog_registry


@pytest.fixture(scope="function", autouse=True)
def reset_global_state():
    """Reset the global container, configuration and registry around each test."""
    reset_container()
    reset_config()
    get_registry().clear()
    get_registry().allow_replacement = False

    yield

    reset_container()
    reset_config()
    get_registry().clear()
    get_registry().allow_replacement = False


@pytest.fixture(scope="function")
def config():
    """Default resolver configuration."""
    return ResolverConfig()


@pytest.fixture(scope="function")
def dog_registry():
    """Registry holding dog, awesome_dog, dog_with_toys and awesome_dog_with_toys."""
    return create_dog_registry()


@pytest.fixture(scope="function")
def resolver(dog_registry, config):
    """NameResolver over the dog registry."""
    return NameResolver(dog_registry, config)


@pytest.fixture(scope="function")
def dispatcher(dog_registry, resolver, config):
    """GenerationDispatcher over the dog registry."""
    return GenerationDispatcher(dog_registry, resolver, config)


@pytest.fixture(scope="function")
def container(dog_registry, config):
    """Global service container wired to the dog registry."""
    return configure_container(registry=dog_registry, config=config)
