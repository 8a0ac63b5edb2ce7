"""
Class extensions exposing factory generation on model classes.

Usage:

    class User(FactoryExtensions):
        ...

    @registry.register_factory('user')
    class UserFactory(factory.Factory):
        class Meta:
            model = User
        name = 'Bob Smith'

    @registry.register_factory('admin_user')
    class AdminUserFactory(UserFactory):
        is_admin = True

    User.build()                                  # unsaved instance
    User.generate(overrides={'name': 'Johnny'})   # saved with save(), never raises
    User.generate_strict()                        # saved by the factory, raises ValidationFailed
    User.attributes()                             # dict of attributes
    User.generate('admin')                        # resolves admin_user
    User.generate('admin', 'with_profile')        # resolves admin_user_with_profile

Classes that cannot change their bases can use ``extend(cls)`` instead.
"""

from typing import Any, Callable, Dict, Optional

from factory_extensions.container.service_container import get_default_dispatcher
from factory_extensions.core.naming import underscore


class FactoryExtensions:
    """
    Mixin adding build/generate/generate_strict/attributes classmethods.

    ``factory_name`` overrides the base name derived from the class name and
    ``factory_dispatcher`` overrides the dispatcher from the global container.
    """

    factory_name: Optional[str] = None
    factory_dispatcher = None

    @classmethod
    def factory_base_name(cls) -> str:
        return getattr(cls, 'factory_name', None) or underscore(cls.__name__)

    @classmethod
    def _get_factory_dispatcher(cls):
        dispatcher = getattr(cls, 'factory_dispatcher', None)
        if dispatcher is None:
            dispatcher = get_default_dispatcher()
        return dispatcher

    @classmethod
    def build(cls, *modifiers: Any, overrides: Optional[Dict[str, Any]] = None,
              callback: Optional[Callable[[Any], Any]] = None) -> Any:
        """Create an unsaved instance."""
        return cls._get_factory_dispatcher().build(cls.factory_base_name(), modifiers, overrides, callback)

    @classmethod
    def generate(cls, *modifiers: Any, overrides: Optional[Dict[str, Any]] = None,
                 callback: Optional[Callable[[Any], Any]] = None) -> Any:
        """Create an instance saved with save(), without raising on invalid data."""
        return cls._get_factory_dispatcher().generate(cls.factory_base_name(), modifiers, overrides, callback)

    @classmethod
    def generate_strict(cls, *modifiers: Any, overrides: Optional[Dict[str, Any]] = None,
                        callback: Optional[Callable[[Any], Any]] = None) -> Any:
        """Create a saved instance, raising ValidationFailed on invalid data."""
        return cls._get_factory_dispatcher().generate_strict(cls.factory_base_name(), modifiers, overrides, callback)

    @classmethod
    def attributes(cls, *modifiers: Any, overrides: Optional[Dict[str, Any]] = None,
                   callback: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
        """Return a dict of attributes from the resolved factory."""
        return cls._get_factory_dispatcher().attributes(cls.factory_base_name(), modifiers, overrides, callback)

    gen = generate
    gen_strict = generate_strict
    attrs = attributes


_EXTENSION_METHODS = (
    'factory_base_name', '_get_factory_dispatcher',
    'build', 'generate', 'generate_strict', 'attributes',
    'gen', 'gen_strict', 'attrs'
)


def extend(cls: type = None, *, dispatcher=None, factory_name: Optional[str] = None):
    """
    Attach the FactoryExtensions classmethods to an existing class.

    Works as a plain call, ``extend(Dog)``, or as a decorator with or without
    arguments, ``@extend(factory_name='hound')``.
    """
    def apply(target: type) -> type:
        for method_name in _EXTENSION_METHODS:
            method = FactoryExtensions.__dict__[method_name]
            setattr(target, method_name, classmethod(method.__func__))
        if dispatcher is not None or not hasattr(target, 'factory_dispatcher'):
            target.factory_dispatcher = dispatcher
        if factory_name is not None or not hasattr(target, 'factory_name'):
            target.factory_name = factory_name
        return target

    if cls is None:
        return apply
    return apply(cls)
