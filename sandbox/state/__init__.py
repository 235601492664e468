"""
Stateful containers
"""

from .arrays import IntegerStringArrayStore
from .string_map import ReversibleStringMap

__all__ = [
    "IntegerStringArrayStore",
    "ReversibleStringMap",
]
