"""
Unit tests for NameResolver.

Tests candidate name construction, registry walking, and error propagation.
"""

import pytest
from enum import Enum
from unittest.mock import Mock

from factory_extensions.config_factory import ResolverConfig, load_config_from_dict, override_config
from factory_extensions.core.errors import (
    ErrorCode, FactoryDefinitionError, FactoryNotRegisteredError,
    InvalidModifierError, NotFoundError, ResolutionError, UnsupportedArityError
)
from factory_extensions.registry import FactoryRegistry
from factory_extensions.services.name_resolver import NameResolver
from tests.factories.dog_factory import (
    AwesomeDogFactory, AwesomeDogWithToysFactory, DogFactory, DogWithToysFactory
)


class Trait(Enum):
    AWESOME = 'awesome'
    WITH_TOYS = 'with_toys'


class TestCandidateNames:
    """Test candidate name construction"""

    def test_no_modifiers(self, resolver):
        assert resolver.candidate_names('dog') == ('dog',)

    def test_one_modifier_tries_prefix_then_suffix(self, resolver):
        assert resolver.candidate_names('dog', ['admin']) == ('admin_dog', 'dog_admin')

    def test_two_modifiers_try_both_orderings(self, resolver):
        assert resolver.candidate_names('user', ['admin', 'with_profile']) == (
            'admin_user_with_profile',
            'with_profile_user_admin'
        )

    def test_identical_modifiers_collapse_to_one_candidate(self, resolver):
        assert resolver.candidate_names('dog', ['big', 'big']) == ('big_dog_big',)

    def test_candidates_are_deterministic(self, resolver):
        first = resolver.candidate_names('dog', ('awesome', 'with_toys'))
        second = resolver.candidate_names('dog', ('awesome', 'with_toys'))
        assert first == second

    def test_enum_modifiers_use_their_value(self, resolver):
        assert resolver.candidate_names('dog', [Trait.AWESOME]) == ('awesome_dog', 'dog_awesome')

    def test_custom_separator(self, dog_registry):
        resolver = NameResolver(dog_registry, ResolverConfig(name_separator='-'))
        assert resolver.candidate_names('dog', ['a', 'b']) == ('a-dog-b', 'b-dog-a')

    def test_separator_follows_config_override(self, dog_registry):
        load_config_from_dict({})
        resolver = NameResolver(dog_registry)
        assert resolver.candidate_names('dog', ['a']) == ('a_dog', 'dog_a')

        override_config('name_separator', '-')

        assert resolver.candidate_names('dog', ['a']) == ('a-dog', 'dog-a')

    def test_string_modifier_is_one_token(self, resolver):
        assert resolver.candidate_names('dog', 'ab') == ('ab_dog', 'dog_ab')
        assert resolver.resolve('dog', 'awesome').factory_class is AwesomeDogFactory

    def test_three_modifiers_unsupported(self, resolver):
        with pytest.raises(UnsupportedArityError) as exc_info:
            resolver.candidate_names('dog', ['one', 'two', 'three'])

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_ARITY
        assert str(exc_info.value) == "Don't know how to find factory for dog with [one, two, three]"

    def test_blank_modifier_rejected(self, resolver):
        with pytest.raises(InvalidModifierError):
            resolver.candidate_names('dog', ['  '])

    def test_blank_base_name_rejected(self, resolver):
        with pytest.raises(InvalidModifierError):
            resolver.candidate_names('', [])


class TestResolve:
    """Test resolution against the dog registry"""

    def test_resolve_base_name(self, resolver):
        assert resolver.resolve('dog').factory_class is DogFactory

    def test_resolve_prefix(self, resolver):
        assert resolver.resolve('dog', ['awesome']).factory_class is AwesomeDogFactory

    def test_resolve_suffix(self, resolver):
        assert resolver.resolve('dog', ['with_toys']).factory_class is DogWithToysFactory

    def test_resolve_prefix_and_suffix(self, resolver):
        registered = resolver.resolve('dog', ['awesome', 'with_toys'])
        assert registered.name == 'awesome_dog_with_toys'
        assert registered.factory_class is AwesomeDogWithToysFactory

    def test_resolve_reversed_modifiers(self, resolver):
        registered = resolver.resolve('dog', ['with_toys', 'awesome'])
        assert registered.name == 'awesome_dog_with_toys'

    def test_prefix_preferred_when_both_registered(self, dog_registry, resolver):
        dog_registry.register('dog_awesome', DogFactory)

        assert resolver.resolve('dog', ['awesome']).name == 'awesome_dog'

    def test_suffix_only_registration(self, dog_registry, resolver):
        dog_registry.register('dog_small', DogFactory)

        assert resolver.resolve('dog', ['small']).name == 'dog_small'

    def test_not_found_lists_modifiers(self, resolver):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve('dog', ['grumpy'])

        error = exc_info.value
        assert str(error) == "Could not find factory for dog with [grumpy]"
        assert error.code == ErrorCode.FACTORY_NOT_FOUND
        assert error.details['candidates'] == ['grumpy_dog', 'dog_grumpy']

    def test_not_found_for_unregistered_base(self):
        resolver = NameResolver(FactoryRegistry(), ResolverConfig())

        with pytest.raises(NotFoundError, match=r"Could not find factory for cat with \[\]"):
            resolver.resolve('cat')

    def test_resolution_errors_are_lookup_errors(self, resolver):
        with pytest.raises(LookupError):
            resolver.resolve('cat')
        with pytest.raises(ResolutionError):
            resolver.resolve('dog', ['one', 'two', 'three'])


class TestRegistryInteraction:
    """Test how the resolver uses the registry contract"""

    def _mock_registry(self, side_effect):
        registry = Mock(spec=FactoryRegistry)
        registry.lookup_by_exact_name.side_effect = side_effect
        return registry

    def test_too_many_modifiers_never_touch_registry(self, config):
        registry = self._mock_registry(FactoryNotRegisteredError('x'))
        resolver = NameResolver(registry, config)

        with pytest.raises(UnsupportedArityError):
            resolver.resolve('dog', ['one', 'two', 'three'])

        registry.lookup_by_exact_name.assert_not_called()

    def test_walks_candidates_in_order(self, config):
        found = Mock()
        registry = self._mock_registry([FactoryNotRegisteredError('admin_user'), found])
        resolver = NameResolver(registry, config)

        assert resolver.resolve('user', ['admin']) is found
        assert [c.args[0] for c in registry.lookup_by_exact_name.call_args_list] == ['admin_user', 'user_admin']

    def test_stops_at_first_hit(self, config):
        found = Mock()
        registry = self._mock_registry([found])
        resolver = NameResolver(registry, config)

        assert resolver.resolve('user', ['admin']) is found
        registry.lookup_by_exact_name.assert_called_once_with('admin_user')

    def test_other_registry_failures_propagate_immediately(self, config):
        failure = FactoryDefinitionError("broken registration")
        registry = self._mock_registry([failure, Mock()])
        resolver = NameResolver(registry, config)

        with pytest.raises(FactoryDefinitionError) as exc_info:
            resolver.resolve('user', ['admin'])

        assert exc_info.value is failure
        registry.lookup_by_exact_name.assert_called_once_with('admin_user')

    def test_unrelated_exceptions_keep_their_identity(self, config):
        registry = self._mock_registry(RuntimeError("registry down"))
        resolver = NameResolver(registry, config)

        with pytest.raises(RuntimeError, match="registry down"):
            resolver.resolve('user')
