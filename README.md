# utestlite

A small unit testing toolkit with no dependencies. It gives you assertion
functions whose failure messages show the values involved, and a runner that
times each test, prints a line per result and finishes with a grouped summary.

## Installation

```
pip install utestlite
```

## Assertions

Every assertion in `utestlite.assertions` raises `AssertionFailure` (from
`utestlite.errors`) when it fails. Each takes an optional `msg` that is added
to the failure message.

```python
from utestlite.assertions import (
    assert_equals, assert_gt, assert_str_contains, assert_throws,
)

assert_equals(2 + 2, 4)
assert_gt(5, 3)
assert_str_contains("hello world", "world", msg="greeting")
error = assert_throws(lambda: int("x"))   # returns the exception raised
```

Available: `assert_true`, `assert_false`, `assert_equals`,
`assert_not_equals`, `assert_str_equals`, `assert_str_not_equals`,
`assert_str_contains`, `assert_str_not_contains`, `assert_gt`, `assert_gte`,
`assert_lt`, `assert_lte`, `assert_null`, `assert_not_null`,
`assert_throws` and `assert_does_not_throw`.

- `assert_true`, `assert_false`, `assert_null` and `assert_not_null` also take
  an `expression` argument: the text shown in the message in place of the value.
- `assert_null` / `assert_not_null` check for `None`.
- `assert_throws` returns the exception the callable raised;
  `assert_does_not_throw` returns the callable's result.
- The string assertions compare text forms: `str` is used as it is, `bytes`
  are read one character per byte, and other values go through
  `convert_to_string`.

A failure carries where it happened (the code that called the assertion):

```python
from utestlite.assertions import assert_equals
from utestlite.errors import AssertionFailure

try:
    assert_equals(1, 2)
except AssertionFailure as failure:
    print(failure.message)      # "Assertion failed: 1 != 2"
    print(failure.formatted())  # "Assertion failed: 1 != 2 at <file>:<line> in <function>"
```

`AssertionFailure` is a subclass of `AssertionError` with `message`, `file`,
`line` and `function` attributes.

## Value text

`utestlite.convert` holds the helpers used to build messages:

- `convert_to_string(value)`: `true`/`false` for booleans, decimal form for
  integers, six decimals for real numbers (`3.140000`), strings unchanged,
  a type's own text form when it defines one, and `[TypeName at 0x...]`
  otherwise.
- `str_for_assert(value)`: the text form used by the string assertions.
- `str_contains(text, substr)`: whether one text form contains the other.

## Running tests

```python
import sys
from utestlite.assertions import assert_equals
from utestlite.runner import TestRunner

def check_addition():
    assert_equals(2 + 3, 5)

runner = TestRunner(verbose=True)
runner.run(check_addition, "Addition", group="Calculator")
sys.exit(runner.summary())
```

`TestRunner` options:

- `out`: stream to write to (standard output when not given);
- `ascii_checkmarks`: `[OK]` / `[FAIL]` marks (default), or ✓ / ✗ when `False`;
- `show_performance`: show each test's time in milliseconds (default `True`);
- `verbose`: print `Running test: <name>` before each test;
- `allow_empty`: let a run with no tests succeed.

`run(func, name=None, group=None)` calls the test, prints its outcome and
returns a `TestResult` (`name`, `group`, `passed`, `error`, `elapsed_ms`).
The name defaults to the function's name; grouped tests are shown as
`group::name`. An `AssertionFailure` is reported with its location; any other
exception is reported as an unexpected exception.

`summary()` prints the results grouped by group name (ungrouped tests first,
then groups in alphabetical order) with totals, and returns a process exit
status: 0 when every test passed, 1 otherwise. A run with no tests counts as a
failure unless `allow_empty=True`. `reset()` clears the results collected so
far.

## What it does not do

There is no test discovery and no command-line program: you pass each test
callable to `TestRunner.run` yourself and decide what to do with the exit
status that `summary()` returns.