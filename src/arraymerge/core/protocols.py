"""Protocols (interfaces) consumed by the core layer.

These define the contracts that input sources and output writers must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so the same session runs over stdin, questionary
prompts, or an in-memory fake in tests.
"""

from __future__ import annotations

from typing import Protocol


class TokenSource(Protocol):
    """Contract for whitespace-token input backends.

    Any object that implements :meth:`next_token` and
    :meth:`discard_line` satisfies this protocol structurally.
    """

    def next_token(self) -> str:
        """Return the next whitespace-delimited token, blocking as needed.

        Blank input is skipped; a token is never empty.

        Raises
        ------
        InputClosedError
            When the source is exhausted or the user cancels input.
        """
        ...  # pragma: no cover

    def discard_line(self) -> None:
        """Drop any tokens still pending from the current input line."""
        ...  # pragma: no cover


class TextSink(Protocol):
    """Contract for transcript output backends."""

    def write(self, text: str) -> None:
        """Write *text* verbatim.  Prompts are written without a newline."""
        ...  # pragma: no cover
