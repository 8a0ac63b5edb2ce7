"""
factory-extensions

Naming-convention lookup of factory_boy factories with build, generate,
generate_strict and attributes shortcuts for model classes.
"""

from factory_extensions.core import (
    ErrorCode,
    FactoryExtensionsError,
    ResolutionError,
    UnsupportedArityError,
    NotFoundError,
    InvalidModifierError,
    FactoryNotRegisteredError,
    FactoryDefinitionError,
    ValidationFailed,
    Strategy,
    underscore,
)
from factory_extensions.registry import (
    FactoryRegistry,
    RegisteredFactory,
    PersistentFactory,
    get_registry,
    register_factories,
)
from factory_extensions.services import NameResolver, GenerationDispatcher
from factory_extensions.container import get_default_dispatcher
from factory_extensions.extensions import FactoryExtensions, extend

__version__ = '0.2.0'

__all__ = [
    'ErrorCode',
    'FactoryExtensionsError',
    'ResolutionError',
    'UnsupportedArityError',
    'NotFoundError',
    'InvalidModifierError',
    'FactoryNotRegisteredError',
    'FactoryDefinitionError',
    'ValidationFailed',
    'Strategy',
    'underscore',
    'FactoryRegistry',
    'RegisteredFactory',
    'PersistentFactory',
    'get_registry',
    'register_factories',
    'NameResolver',
    'GenerationDispatcher',
    'get_default_dispatcher',
    'FactoryExtensions',
    'extend',
]
