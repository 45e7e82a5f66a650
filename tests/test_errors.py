import pytest

from utestlite.errors import AssertionFailure


def test_formatted_with_full_location():
    exc = AssertionFailure("Assertion failed", "file.cpp", 42, "test_function")
    assert exc.formatted() == "Assertion failed at file.cpp:42 in test_function"


def test_defaults_are_unknown_location():
    exc = AssertionFailure("boom")
    assert exc.file == "unknown"
    assert exc.line == 0
    assert exc.function == "unknown"


def test_formatted_with_defaults():
    exc = AssertionFailure("boom")
    assert exc.formatted() == "boom at unknown:0 in unknown"


def test_str_is_plain_message():
    exc = AssertionFailure("condition is false: 'x > 0'", "a.py", 7, "check")
    assert str(exc) == "condition is false: 'x > 0'"
    assert exc.message == "condition is false: 'x > 0'"


def test_location_attributes_kept():
    exc = AssertionFailure("msg", "mod.py", 13, "fn")
    assert (exc.file, exc.line, exc.function) == ("mod.py", 13, "fn")


def test_formatted_starts_with_message_and_ends_with_function():
    exc = AssertionFailure("some message", "x.py", 3, "the_func")
    text = exc.formatted()
    assert text.startswith("some message at ")
    assert text.endswith(" in the_func")
    assert "x.py:3" in text


def test_is_an_assertion_error():
    exc = AssertionFailure("failed here", "t.py", 1, "f")
    with pytest.raises(AssertionError) as info:
        raise exc
    assert info.value is exc
    assert exc.formatted() == "failed here at t.py:1 in f"
    assert exc.line == 1


def test_can_be_caught_as_itself():
    exc = AssertionFailure("Expected exception was not thrown")
    with pytest.raises(AssertionFailure) as info:
        raise exc
    assert info.value is exc
    assert exc.message == "Expected exception was not thrown"
    assert exc.formatted() == "Expected exception was not thrown at unknown:0 in unknown"