"""
problemtrail Exception Classes

The library reports domain errors as values; these exceptions cover the few
places where a caller explicitly asks for a success value that is not there.
"""

from typing import Any


class ProblemTrailError(Exception):
    """Base exception for all problemtrail errors."""


class UnwrapError(ProblemTrailError):
    """
    Raised when a success value is requested from an ``Err`` result.

    The message shows the error through its ``str()``, so an Outcome's Problem
    appears as its one-line rendering.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"Called unwrap() on an Err result: {error}")
        self.error = error

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for handling the error branch."""
        return "Check is_ok() before unwrapping, or use unwrap_or(default)"
