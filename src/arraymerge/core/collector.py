"""Input collector — validated sizes and numbers with unbounded retry.

The collector owns the re-prompt loop.  Parsing is delegated to
:mod:`arraymerge.core.parsing`; every :class:`InvalidInputError` it
raises is handled here by discarding the rest of the offending line and
writing the error's retry prompt.  Invalid input is therefore never
fatal — only :class:`~arraymerge.exceptions.InputClosedError` from the
token source can end a collection early.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from arraymerge.core.models import MAX_SEQUENCE_LENGTH, NumberSequence
from arraymerge.core.parsing import clamp_size, parse_number, parse_size
from arraymerge.core.protocols import TextSink, TokenSource
from arraymerge.exceptions import InvalidInputError

_T = TypeVar("_T")


class SequenceCollector:
    """Reads one sequence at a time from a :class:`TokenSource`.

    Parameters
    ----------
    source:
        Where tokens come from.
    sink:
        Where prompts and retry messages are written.
    max_length:
        Sizes above this are truncated to it.
    """

    def __init__(
        self,
        source: TokenSource,
        sink: TextSink,
        *,
        max_length: int = MAX_SEQUENCE_LENGTH,
    ) -> None:
        self._source: TokenSource = source
        self._sink: TextSink = sink
        self._max_length: int = max_length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def collect_size(self) -> int:
        """Read tokens until a positive whole number is entered."""
        return self._read_valid(parse_size)

    def collect_number(self) -> float:
        """Read tokens until a finite number is entered."""
        return self._read_valid(parse_number)

    def collect_sequence(self, ordinal: str) -> NumberSequence:
        """Prompt for a size, clamp it, then collect that many numbers.

        Parameters
        ----------
        ordinal:
            Word naming the array in the prompt (``"first"``, ``"second"``).
        """
        self._sink.write(
            f"How many would you want to place in the {ordinal} array? "
            f"(max {self._max_length}): "
        )
        size = clamp_size(self.collect_size(), self._max_length)

        self._sink.write(f"Enter {size} elements: ")
        values = tuple(self.collect_number() for _ in range(size))
        return NumberSequence(values=values)

    # ------------------------------------------------------------------
    # Retry loop
    # ------------------------------------------------------------------

    def _read_valid(self, parse: Callable[[str], _T]) -> _T:
        while True:
            token = self._source.next_token()
            try:
                return parse(token)
            except InvalidInputError as exc:
                self._source.discard_line()
                self._sink.write(exc.retry_prompt)
