"""Assertion helpers that raise :class:`AssertionFailure` with the caller's location."""

from __future__ import annotations

import sys
from typing import Any, Callable, NoReturn, Optional

from .convert import convert_to_string, str_contains, str_for_assert
from .errors import AssertionFailure

__all__ = [
    "assert_true",
    "assert_false",
    "assert_equals",
    "assert_not_equals",
    "assert_str_equals",
    "assert_str_not_equals",
    "assert_str_contains",
    "assert_str_not_contains",
    "assert_gt",
    "assert_gte",
    "assert_lt",
    "assert_lte",
    "assert_null",
    "assert_not_null",
    "assert_throws",
    "assert_does_not_throw",
]


def _fail(message: str) -> NoReturn:
    """Raise a failure located at the code that called the assertion."""
    # Frame 0 is this helper, frame 1 the assertion, frame 2 its caller.
    frame = sys._getframe(2)
    code = frame.f_code
    raise AssertionFailure(message, code.co_filename, frame.f_lineno, code.co_name)


def _with_msg(prefix: str, msg: Optional[str]) -> str:
    """Build the leading part of a message, naming ``msg`` when given."""
    return f"{prefix}, '{msg}': " if msg else f"{prefix}: "


def _describe(value: Any, expression: Optional[str]) -> str:
    return expression if expression is not None else repr(value)


def assert_true(condition: Any, msg: Optional[str] = None, expression: Optional[str] = None) -> None:
    """Fail unless ``condition`` is truthy."""
    if not condition:
        if msg:
            _fail(f"assertion failed, '{msg}'")
        shown = expression if expression is not None else convert_to_string(condition)
        _fail(f"condition is false: '{shown}'")


def assert_false(condition: Any, msg: Optional[str] = None, expression: Optional[str] = None) -> None:
    """Fail if ``condition`` is truthy."""
    if condition:
        if msg:
            _fail(f"assertion failed, '{msg}'")
        shown = expression if expression is not None else convert_to_string(condition)
        _fail(f"condition is true: '{shown}'")


def assert_equals(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail if ``x != y``."""
    if x != y:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} != {convert_to_string(y)}")


def assert_not_equals(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail if ``x == y``."""
    if x == y:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} == {convert_to_string(y)}")


def assert_str_equals(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail unless the text forms of ``x`` and ``y`` are equal."""
    sx, sy = str_for_assert(x), str_for_assert(y)
    if sx != sy:
        _fail(f'{_with_msg("String assertion failed", msg)}"{sx}" != "{sy}"')


def assert_str_not_equals(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail if the text forms of ``x`` and ``y`` are equal."""
    sx, sy = str_for_assert(x), str_for_assert(y)
    if sx == sy:
        _fail(f'{_with_msg("String assertion failed", msg)}"{sx}" == "{sy}"')


def assert_str_contains(text: Any, substr: Any, msg: Optional[str] = None) -> None:
    """Fail unless ``text`` contains ``substr``."""
    if not str_contains(text, substr):
        _fail(f'{_with_msg("String assertion failed", msg)}'
              f'"{str_for_assert(text)}" does not contain "{str_for_assert(substr)}"')


def assert_str_not_contains(text: Any, substr: Any, msg: Optional[str] = None) -> None:
    """Fail if ``text`` contains ``substr``."""
    if str_contains(text, substr):
        _fail(f'{_with_msg("String assertion failed", msg)}'
              f'"{str_for_assert(text)}" contains "{str_for_assert(substr)}"')


def assert_gt(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail unless ``x > y``."""
    if not x > y:
        relation = "is not greater than or equal to" if msg else "is not greater than"
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} {relation} {convert_to_string(y)}")


def assert_gte(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail unless ``x >= y``."""
    if not x >= y:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} is not greater than or equal to {convert_to_string(y)}")


def assert_lt(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail unless ``x < y``."""
    if not x < y:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} is not less than {convert_to_string(y)}")


def assert_lte(x: Any, y: Any, msg: Optional[str] = None) -> None:
    """Fail unless ``x <= y``."""
    if not x <= y:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"{convert_to_string(x)} is not less than or equal to {convert_to_string(y)}")


def assert_null(value: Any, msg: Optional[str] = None, expression: Optional[str] = None) -> None:
    """Fail unless ``value`` is None."""
    if value is not None:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"pointer is not null: {_describe(value, expression)}"
              if msg else
              f"Assertion failed, pointer is not null: {_describe(value, expression)}")


def assert_not_null(value: Any, msg: Optional[str] = None, expression: Optional[str] = None) -> None:
    """Fail if ``value`` is None."""
    if value is None:
        _fail(f"{_with_msg('Assertion failed', msg)}"
              f"pointer is null: '{_describe(value, expression)}'"
              if msg else
              f"Assertion failed, pointer is null: '{_describe(value, expression)}'")


def assert_throws(func: Callable[[], Any], msg: str = "") -> Exception:
    """Call ``func`` and fail unless it raises; return what it raised."""
    try:
        func()
    except Exception as exc:
        return exc
    if msg:
        raise AssertionFailure(f"Expected exception was not thrown: {msg}")
    raise AssertionFailure("Expected exception was not thrown")


def assert_does_not_throw(func: Callable[[], Any], msg: str = "") -> Any:
    """Call ``func`` and fail if it raises; return its result."""
    try:
        return func()
    except Exception as exc:
        if msg:
            raise AssertionFailure(f"Unexpected exception thrown: {msg} - {exc}") from exc
        raise AssertionFailure(f"Unexpected exception thrown: {exc}") from exc