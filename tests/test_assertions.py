import pytest

from utestlite.assertions import (
    assert_does_not_throw,
    assert_equals,
    assert_false,
    assert_gt,
    assert_gte,
    assert_lt,
    assert_lte,
    assert_not_equals,
    assert_not_null,
    assert_null,
    assert_str_contains,
    assert_str_equals,
    assert_str_not_contains,
    assert_str_not_equals,
    assert_throws,
    assert_true,
)
from utestlite.errors import AssertionFailure


def test_assert_true_passes_and_fails_with_expression():
    assert assert_true(1 + 1 == 2) is None
    with pytest.raises(AssertionFailure) as info:
        assert_true(False, expression="x > 0")
    assert str(info.value) == "condition is false: 'x > 0'"


def test_assert_true_custom_message():
    with pytest.raises(AssertionFailure) as info:
        assert_true(0, msg="Value must be positive")
    assert str(info.value) == "assertion failed, 'Value must be positive'"


def test_assert_false():
    assert assert_false([]) is None
    with pytest.raises(AssertionFailure) as info:
        assert_false(True, expression="ok")
    assert str(info.value) == "condition is true: 'ok'"


def test_failure_records_caller_location():
    with pytest.raises(AssertionFailure) as info:
        assert_equals(1, 2)
    exc = info.value
    assert exc.file == __file__
    assert exc.function == "test_failure_records_caller_location"
    assert exc.line > 0
    assert exc.formatted().startswith("Assertion failed: 1 != 2 at ")


def test_assert_equals_messages():
    assert_equals("a", "a")
    with pytest.raises(AssertionFailure) as info:
        assert_equals(True, False)
    assert str(info.value) == "Assertion failed: true != false"
    with pytest.raises(AssertionFailure) as info:
        assert_equals(3, 4, msg="mismatch")
    assert str(info.value) == "Assertion failed, 'mismatch': 3 != 4"


def test_assert_not_equals():
    assert_not_equals(1, 2)
    with pytest.raises(AssertionFailure) as info:
        assert_not_equals(5, 5)
    assert str(info.value) == "Assertion failed: 5 == 5"


def test_assert_str_equals():
    assert_str_equals("hello", "hello")
    assert_str_equals(b"hello", "hello")
    with pytest.raises(AssertionFailure) as info:
        assert_str_equals("a", "b")
    assert str(info.value) == 'String assertion failed: "a" != "b"'
    with pytest.raises(AssertionFailure) as info:
        assert_str_equals("a", "b", msg="m")
    assert str(info.value) == "String assertion failed, 'm': \"a\" != \"b\""


def test_assert_str_not_equals():
    assert_str_not_equals("a", "b")
    with pytest.raises(AssertionFailure) as info:
        assert_str_not_equals("a", "a")
    assert str(info.value) == 'String assertion failed: "a" == "a"'


def test_assert_str_contains():
    assert_str_contains("hello world", "world")
    with pytest.raises(AssertionFailure) as info:
        assert_str_contains("hello", "world")
    assert str(info.value) == 'String assertion failed: "hello" does not contain "world"'
    with pytest.raises(AssertionFailure) as info:
        assert_str_contains("r", "success", msg="Response should indicate success")
    assert "'Response should indicate success'" in str(info.value)


def test_assert_str_not_contains():
    assert_str_not_contains("success message", "error")
    with pytest.raises(AssertionFailure) as info:
        assert_str_not_contains("an error", "error")
    assert str(info.value) == 'String assertion failed: "an error" contains "error"'


def test_ordering_assertions_pass():
    assert_gt(5, 3)
    assert_gte(3, 3)
    assert_lt(2, 3)
    assert_lte(3, 3)
    with pytest.raises(AssertionFailure):
        assert_gte(2, 3)
    with pytest.raises(AssertionFailure):
        assert_lte(4, 3)


def test_ordering_messages():
    with pytest.raises(AssertionFailure) as info:
        assert_gt(1, 2)
    assert str(info.value) == "Assertion failed: 1 is not greater than 2"
    with pytest.raises(AssertionFailure) as info:
        assert_lt(3, 2)
    assert str(info.value) == "Assertion failed: 3 is not less than 2"
    with pytest.raises(AssertionFailure) as info:
        assert_lte(3, 2, msg="m")
    assert str(info.value) == "Assertion failed, 'm': 3 is not less than or equal to 2"


def test_null_assertions():
    assert_null(None)
    assert_not_null(0)
    with pytest.raises(AssertionFailure) as info:
        assert_null(1, expression="ptr")
    assert str(info.value) == "Assertion failed, pointer is not null: ptr"
    with pytest.raises(AssertionFailure) as info:
        assert_not_null(None, expression="ptr")
    assert str(info.value) == "Assertion failed, pointer is null: 'ptr'"


def test_assert_throws():
    exc = assert_throws(lambda: int("x"))
    assert isinstance(exc, ValueError)
    with pytest.raises(AssertionFailure) as info:
        assert_throws(lambda: None)
    assert str(info.value) == "Expected exception was not thrown"
    assert info.value.file == "unknown"
    with pytest.raises(AssertionFailure) as info:
        assert_throws(lambda: None, "boom")
    assert str(info.value) == "Expected exception was not thrown: boom"


def _raise_runtime():
    raise RuntimeError("bad")


def test_assert_does_not_throw():
    assert assert_does_not_throw(lambda: 7) == 7
    with pytest.raises(AssertionFailure) as info:
        assert_does_not_throw(_raise_runtime)
    assert str(info.value) == "Unexpected exception thrown: bad"
    with pytest.raises(AssertionFailure) as info:
        assert_does_not_throw(_raise_runtime, "ctx")
    assert str(info.value) == "Unexpected exception thrown: ctx - bad"