"""
Services package for factory-extensions.
"""

from .base_service import BaseService
from .name_resolver import NameResolver
from .generation_dispatcher import GenerationDispatcher

__all__ = [
    'BaseService',
    'NameResolver',
    'GenerationDispatcher'
]
