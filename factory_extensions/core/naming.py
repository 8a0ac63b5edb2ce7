"""
Naming helpers for deriving factory base names from class names.
"""

import re
from enum import Enum
from typing import Any, Tuple

_ACRONYM_BOUNDARY = re.compile(r'([A-Z]+)([A-Z][a-z])')
_WORD_BOUNDARY = re.compile(r'([a-z\d])([A-Z])')


def underscore(name: str) -> str:
    """
    Convert a CamelCase identifier to lower_snake_case.

    Examples:
        >>> underscore('Dog')
        'dog'
        >>> underscore('AdminUser')
        'admin_user'
        >>> underscore('HTTPServer')
        'http_server'
    """
    name = _ACRONYM_BOUNDARY.sub(r'\1_\2', name)
    name = _WORD_BOUNDARY.sub(r'\1_\2', name)
    return name.replace('-', '_').lower()


def token_text(token: Any) -> str:
    """Return the text of a modifier token; Enum members contribute their value."""
    if isinstance(token, Enum):
        token = token.value
    return str(token)


def modifier_tokens(modifiers: Any) -> Tuple[Any, ...]:
    """
    Normalize modifiers to a tuple of tokens.

    A lone string or Enum member is one modifier, never a sequence of characters.
    """
    if modifiers is None:
        return ()
    if isinstance(modifiers, (str, Enum)):
        return (modifiers,)
    return tuple(modifiers)
