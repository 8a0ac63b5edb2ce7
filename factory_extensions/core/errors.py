"""
Core error definitions for factory-extensions

Provides error codes and the exception hierarchy shared by the registry,
the name resolver and the generation dispatcher.
"""

from enum import Enum
from typing import Dict, Optional, Sequence


class ErrorCode(Enum):
    """Standardized error codes for the package."""

    # Resolution Errors
    UNSUPPORTED_ARITY = "UNSUPPORTED_ARITY"
    FACTORY_NOT_FOUND = "FACTORY_NOT_FOUND"
    INVALID_MODIFIER = "INVALID_MODIFIER"

    # Registry Errors
    FACTORY_NOT_REGISTERED = "FACTORY_NOT_REGISTERED"
    INVALID_FACTORY_DEFINITION = "INVALID_FACTORY_DEFINITION"

    # Persistence Errors
    VALIDATION_FAILED = "VALIDATION_FAILED"


class FactoryExtensionsError(Exception):
    """Base exception carrying an error code, a message and optional details."""

    code = ErrorCode.FACTORY_NOT_FOUND

    def __init__(self, message: str, details: Optional[Dict] = None, code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ResolutionError(FactoryExtensionsError, LookupError):
    """Raised when no factory can be resolved for a base name and modifiers."""
    pass


class UnsupportedArityError(ResolutionError):
    """More than one prefix and one suffix were supplied."""

    code = ErrorCode.UNSUPPORTED_ARITY


class NotFoundError(ResolutionError):
    """Every candidate name missed the registry."""

    code = ErrorCode.FACTORY_NOT_FOUND


class InvalidModifierError(ResolutionError):
    """A base name or modifier token was empty."""

    code = ErrorCode.INVALID_MODIFIER


class FactoryNotRegisteredError(FactoryExtensionsError, LookupError):
    """Raised by the registry when no factory is registered under an exact name."""

    code = ErrorCode.FACTORY_NOT_REGISTERED

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Factory not registered: {name}", details={'name': name})


class FactoryDefinitionError(FactoryExtensionsError):
    """Raised when a factory registration is malformed."""

    code = ErrorCode.INVALID_FACTORY_DEFINITION


class ValidationFailed(FactoryExtensionsError):
    """Raised when persistence rejects a constructed instance."""

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, instance=None, errors: Optional[Dict] = None):
        self.instance = instance
        self.errors = errors or {}
        super().__init__(message, details={'errors': self.errors})


def format_modifiers(modifiers: Sequence) -> str:
    """Render modifier tokens the way error messages list them: ``[one, two]``."""
    return '[' + ', '.join(str(m) for m in modifiers) + ']'
