"""
String helpers shared by both containers.
"""

from __future__ import annotations

from typing import Any


def require_str(value: Any, *, name: str = "value") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def reverse_text(text: str) -> str:
    """Character-wise reversal ("abc" -> "cba")."""
    return require_str(text, name="text")[::-1]


def canonical_text(obj: Any) -> str:
    """
    Canonical textual form of an arbitrary object.

    Strings pass through unchanged; everything else goes through ``str()``.
    """
    if isinstance(obj, str):
        return obj
    return str(obj)


def fold(text: str) -> str:
    """Case-fold for case-insensitive comparison."""
    return text.casefold()


def upper(text: str) -> str:
    return text.upper()
