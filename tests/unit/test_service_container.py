"""
Tests for the dependency injection container and its global wiring.
"""

import pytest

from factory_extensions.config_factory import ResolverConfig, load_config_from_dict, override_config
from factory_extensions.container import (
    CircularDependencyError, ServiceContainer, ServiceNotFoundError,
    configure_container, get_container, get_default_dispatcher, reset_container
)
from factory_extensions.registry import get_registry
from factory_extensions.services import GenerationDispatcher, NameResolver


class TestServiceContainer:
    """Test ServiceContainer registration and resolution"""

    def test_register_and_get(self):
        container = ServiceContainer()
        container.register('thing', dict)

        assert container.get('thing') == {}

    def test_instances_are_shared(self):
        container = ServiceContainer().register('thing', object)

        assert container.get('thing') is container.get('thing')

    def test_dependencies_passed_in_order(self):
        container = ServiceContainer()
        container.set_external_dependency('a', 1)
        container.set_external_dependency('b', 2)
        container.register('pair', lambda a, b: (a, b), dependencies=['a', 'b'])

        assert container.get('pair') == (1, 2)

    def test_duplicate_registration(self):
        container = ServiceContainer().register('thing', object)

        with pytest.raises(ValueError, match="already registered"):
            container.register('thing', object)

    def test_non_callable_factory(self):
        with pytest.raises(ValueError, match="must be callable"):
            ServiceContainer().register('thing', 42)

    def test_missing_service(self):
        with pytest.raises(ServiceNotFoundError):
            ServiceContainer().get('missing')

    def test_circular_dependency(self):
        container = ServiceContainer()
        container.register('a', lambda b: b, dependencies=['b'])
        container.register('b', lambda a: a, dependencies=['a'])

        with pytest.raises(CircularDependencyError, match="a -> b -> a"):
            container.get('a')

    def test_validate_dependencies(self):
        container = ServiceContainer().register('a', lambda b: b, dependencies=['b'])

        assert container.validate_dependencies() == {'a': ['b']}

    def test_clear(self):
        container = ServiceContainer().register('thing', object)
        container.clear()

        assert not container.has_service('thing')

        with pytest.raises(ServiceNotFoundError):
            container.get('thing')


class TestGlobalContainer:
    """Test the global container wiring"""

    def test_configure_with_registry(self, container, dog_registry):
        dispatcher = container.get('GenerationDispatcher')

        assert isinstance(dispatcher, GenerationDispatcher)
        assert dispatcher.registry is dog_registry
        assert dispatcher.resolver is container.get('NameResolver')
        assert isinstance(dispatcher.resolver, NameResolver)

    def test_default_dispatcher_uses_global_registry(self):
        dispatcher = get_default_dispatcher()

        assert dispatcher.registry is get_registry()
        assert get_default_dispatcher() is dispatcher

    def test_uses_loaded_config(self):
        config = load_config_from_dict({'name_separator': '-'})

        dispatcher = get_default_dispatcher()

        assert dispatcher.config is config
        assert dispatcher.resolver.separator == '-'

    def test_default_dispatcher_sees_later_overrides(self):
        load_config_from_dict({})
        resolver = get_default_dispatcher().resolver
        assert resolver.candidate_names('dog', ['a']) == ('a_dog', 'dog_a')

        override_config('name_separator', '-')

        assert get_default_dispatcher().resolver is resolver
        assert resolver.candidate_names('dog', ['a']) == ('a-dog', 'dog-a')

    def test_global_registry_follows_replacement_setting(self):
        configure_container(config=ResolverConfig(allow_factory_replacement=True))

        assert get_registry().allow_replacement is True

    def test_reset_container(self):
        first = get_container()
        reset_container()

        assert get_container() is not first
