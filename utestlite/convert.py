"""Conversion of arbitrary values to text for assertion messages."""

from __future__ import annotations

import numbers
from typing import Any

__all__ = ["convert_to_string", "str_for_assert", "str_contains"]


def _has_own_text_form(value: Any) -> bool:
    """Tell whether the value's type renders itself as text."""
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def convert_to_string(value: Any) -> str:
    """Return a readable text form of ``value``.

    Booleans become ``true``/``false``, integers their decimal form and
    real numbers a fixed six-decimal form. Strings pass unchanged. Other
    values use their own text form when their type defines one; otherwise
    the type name and identity are shown as ``[Name at 0x...]``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{float(value):f}"
    if _has_own_text_form(value):
        return str(value)
    return f"[{type(value).__qualname__} at {hex(id(value))}]"


def str_for_assert(value: Any) -> str:
    """Return ``value`` as text for use in string assertions.

    Text passes unchanged, byte strings are widened one character per
    byte, and anything else goes through :func:`convert_to_string`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("latin-1")
    return convert_to_string(value)


def str_contains(text: Any, substr: Any) -> bool:
    """Tell whether the text form of ``text`` contains that of ``substr``."""
    return str_for_assert(substr) in str_for_assert(text)