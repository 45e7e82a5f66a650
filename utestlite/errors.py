"""Exception raised when a test assertion fails."""

from __future__ import annotations

__all__ = ["AssertionFailure"]


class AssertionFailure(AssertionError):
    """An assertion failure that records where it happened.

    The plain message is available as ``str(exc)`` and as ``exc.message``.
    The source location defaults to an unknown file, line 0 and an unknown
    function when it is not given.
    """

    def __init__(
        self,
        message: str,
        file: str = "unknown",
        line: int = 0,
        function: str = "unknown",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line
        self.function = function

    def __str__(self) -> str:
        return self.message

    def formatted(self) -> str:
        """Return the message together with its file, line and function."""
        return f"{self.message} at {self.file}:{self.line} in {self.function}"