"""Custom exception hierarchy for arraymerge.

All exceptions that cross layer boundaries must inherit from
:class:`ArrayMergeError`.  Invalid-input errors are raised by the pure
parsers and consumed by the collector's retry loop; everything else is
rendered by the CLI error boundary.

Hierarchy
---------
ArrayMergeError
├── InvalidInputError
│   ├── InvalidSizeError
│   └── InvalidNumberError
├── InputClosedError
└── EnvironmentError
"""

from __future__ import annotations


class ArrayMergeError(Exception):
    """Base exception for all arraymerge errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidInputError(ArrayMergeError):
    """Raised when a single input token cannot be accepted.

    Subclasses carry the prompt shown to the user before the next attempt.
    """

    retry_prompt: str = "Invalid input. Please try again: "

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid input: {token!r}", hint=hint)
        self.token: str = token


class InvalidSizeError(InvalidInputError):
    """Raised when a sequence length is not a positive whole number."""

    retry_prompt = "Invalid input. Please enter a positive whole number: "


class InvalidNumberError(InvalidInputError):
    """Raised when a sequence element is not a finite number."""

    retry_prompt = "Invalid input. Please enter a valid number: "


# --- Input source ----------------------------------------------------------

class InputClosedError(ArrayMergeError):
    """Raised when the input source ends before the session is complete."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ArrayMergeError):
    """Raised when an optional runtime dependency is not available."""
