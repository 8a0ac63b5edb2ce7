"""
Build Strategy Enumeration

Defines the output modes a registered factory can be asked for.
"""

from enum import Enum


class Strategy(Enum):
    """Factory build strategy enumeration."""
    BUILD = "build"
    CREATE = "create"
    ATTRIBUTES_FOR = "attributes_for"
