"""
Core definitions shared across factory-extensions.
"""

from .errors import (
    ErrorCode,
    FactoryExtensionsError,
    ResolutionError,
    UnsupportedArityError,
    NotFoundError,
    InvalidModifierError,
    FactoryNotRegisteredError,
    FactoryDefinitionError,
    ValidationFailed,
)
from .strategies import Strategy
from .naming import underscore, token_text, modifier_tokens

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
    'token_text',
    'modifier_tokens',
]
