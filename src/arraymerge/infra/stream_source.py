"""Text-stream implementation of :class:`~arraymerge.core.protocols.TokenSource`.

Reads whole lines from a text stream (standard input by default) and
hands them out one whitespace-delimited token at a time, so values may
be typed on a single line or spread across several.

Rules
-----
* Lines are read lazily — nothing blocks until a token is requested.
* End of stream is reported as :class:`InputClosedError`.
* No ``print()`` — prompts are the caller's job.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

from arraymerge.exceptions import InputClosedError


class StreamTokenSource:
    """Concrete :class:`TokenSource` backed by a text stream.

    Usage::

        source = StreamTokenSource()            # reads sys.stdin
        source = StreamTokenSource(io.StringIO("3\\n1 2 3\\n"))

    Parameters
    ----------
    stream:
        Stream to read from.  When ``None``, :data:`sys.stdin` is looked
        up at read time so test harnesses that replace it are honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream
        self._pending: deque[str] = deque()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def next_token(self) -> str:
        """Return the next token, reading further lines as needed.

        Raises
        ------
        InputClosedError
            When the stream is exhausted.
        """
        while not self._pending:
            line = self._read_line()
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        """Forget whatever is left of the current line."""
        self._pending.clear()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            raise InputClosedError(
                "Input ended before all values were entered.",
                hint="Supply every size and element, or run with --interactive.",
            )
        return line
