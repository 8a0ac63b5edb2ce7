"""
Registry package holding factory_boy factories by exact name.
"""

from .factory_registry import FactoryRegistry, RegisteredFactory, get_registry, register_factories
from .persistent_factory import PersistentFactory

__all__ = [
    'FactoryRegistry',
    'RegisteredFactory',
    'get_registry',
    'register_factories',
    'PersistentFactory'
]
