"""
Container package for dependency injection.
"""

from .service_container import (
    ServiceContainer,
    ServiceNotFoundError,
    CircularDependencyError,
    get_container,
    configure_container,
    reset_container,
    get_default_dispatcher
)

__all__ = [
    'ServiceContainer',
    'ServiceNotFoundError',
    'CircularDependencyError',
    'get_container',
    'configure_container',
    'reset_container',
    'get_default_dispatcher'
]
