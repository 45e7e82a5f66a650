"""A small unit testing toolkit: descriptive assertions, value text helpers and a timing test runner."""

__version__ = "1.0.0"
__all__ = ["errors", "convert", "assertions", "runner"]