"""Running test callables, reporting each outcome and printing a summary."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TextIO

from .errors import AssertionFailure

__all__ = ["TestResult", "TestRunner"]

_SEPARATOR = "======================================"
_RULE = "--------------------------------------"


@dataclass
class TestResult:
    """Outcome of one test: its name, group, status, error and time in milliseconds."""

    __test__ = False

    name: str
    group: str = ""
    passed: bool = True
    error: str = ""
    elapsed_ms: float = 0.0

    @property
    def display_name(self) -> str:
        """The name shown while running: ``group::name`` for grouped tests."""
        return f"{self.group}::{self.name}" if self.group else self.name


class TestRunner:
    """Runs test callables, prints a line for each and a summary at the end."""

    __test__ = False

    def __init__(
        self,
        out: Optional[TextIO] = None,
        ascii_checkmarks: bool = True,
        show_performance: bool = True,
        verbose: bool = False,
        allow_empty: bool = False,
    ) -> None:
        self.out = out
        self.ascii_checkmarks = ascii_checkmarks
        self.show_performance = show_performance
        self.verbose = verbose
        self.allow_empty = allow_empty
        self.results: List[TestResult] = []
        self.error_found = False

    @property
    def success_mark(self) -> str:
        return "[OK]" if self.ascii_checkmarks else "\u2713"

    @property
    def fail_mark(self) -> str:
        return "[FAIL]" if self.ascii_checkmarks else "\u2717"

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    def _timing(self, elapsed_ms: float) -> str:
        return f" ({elapsed_ms:.3f}ms)" if self.show_performance else ""

    def reset(self) -> None:
        """Forget all recorded results and failures."""
        self.results.clear()
        self.error_found = False

    def run(
        self,
        func: Callable[[], Any],
        name: Optional[str] = None,
        group: Optional[str] = None,
    ) -> TestResult:
        """Call ``func`` as a test, print its outcome and record it."""
        result = TestResult(name=name if name is not None else func.__name__, group=group or "")
        shown = result.display_name

        if self.verbose:
            self._write(f"Running test: {shown}\n")

        start = time.perf_counter()

        def elapsed() -> float:
            micros = int((time.perf_counter() - start) * 1_000_000)
            return micros / 1000.0

        try:
            func()
        except AssertionFailure as exc:
            result.elapsed_ms = elapsed()
            result.passed = False
            result.error = exc.formatted()
            self._write(
                f"{self.fail_mark} Test [{shown}] failed!, error: {result.error}"
                f"{self._timing(result.elapsed_ms)}\n"
            )
        except Exception as exc:
            result.elapsed_ms = elapsed()
            result.passed = False
            result.error = str(exc)
            self._write(
                f"{self.fail_mark} Test [{shown}] failed with unexpected exception!, "
                f"error: {result.error}{self._timing(result.elapsed_ms)}\n"
            )
        else:
            result.elapsed_ms = elapsed()
            self._write(
                f"{self.success_mark} Test [{shown}] succeeded{self._timing(result.elapsed_ms)}\n"
            )

        if not result.passed:
            self.error_found = True
        self.results.append(result)
        return result

    def summary(self) -> int:
        """Print the summary of all recorded tests and return the exit status."""
        self._write(f"\n{_SEPARATOR}\nTest Summary:\n{_SEPARATOR}\n")

        if not self.results:
            self._write(f"No tests were run!\n{_SEPARATOR}\n")
            if self.allow_empty:
                self._write("SUCCESS (empty tests allowed)\n")
                return 0
            self._write("FAILURE\n")
            return 1

        grouped: Dict[str, List[TestResult]] = {}
        for result in self.results:
            grouped.setdefault(result.group, []).append(result)
        total_time = sum(result.elapsed_ms for result in self.results)

        passed = failed = 0
        for group in sorted(grouped):
            if group:
                self._write(f"\n{group}:\n")
            for result in grouped[group]:
                if result.passed:
                    passed += 1
                    line = f"{self.success_mark} {result.name}"
                else:
                    failed += 1
                    line = f"{self.fail_mark} {result.name} - {result.error}"
                self._write(f"{line}{self._timing(result.elapsed_ms)}\n")

        self._write(f"{_RULE}\n")
        self._write(
            f"Total: {passed + failed} tests, {passed} passed {self.success_mark}, "
            f"{failed} failed {self.fail_mark}"
        )
        if self.show_performance:
            self._write(f" (Total time: {total_time:.3f}ms)")
        self._write(f"\n{_SEPARATOR}\n")

        if self.error_found or failed > 0:
            self._write("FAILURE\n")
            return 1
        self._write("SUCCESS\n")
        return 0