"""Core session — orchestrates collect → concatenate → sort → print.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~arraymerge.core.protocols.TokenSource` and a
:class:`~arraymerge.core.protocols.TextSink` injected at construction
time, keeping the core free of any terminal or stream handling.

Guarantees
----------
* Control flow is strictly sequential; no state survives :meth:`run`.
* Only :class:`~arraymerge.exceptions.ArrayMergeError` subclasses raised
  by the source escape (invalid input is absorbed by the collector).
"""

from __future__ import annotations

from arraymerge.core.collector import SequenceCollector
from arraymerge.core.formatting import format_sequence
from arraymerge.core.merge import concat
from arraymerge.core.models import BANNER, NumberSequence, SessionResult
from arraymerge.core.protocols import TextSink, TokenSource
from arraymerge.core.selection_sort import sorted_descending


class MergeSortSession:
    """One interactive merge-and-sort run.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`TokenSource` protocol.
    sink:
        Any object satisfying the :class:`TextSink` protocol.
    """

    def __init__(self, source: TokenSource, sink: TextSink) -> None:
        self._sink: TextSink = sink
        self._collector = SequenceCollector(source, sink)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> SessionResult:
        """Collect both arrays, merge, sort, and print the result.

        Raises
        ------
        InputClosedError
            If the source runs out before both arrays are complete.
        """
        self._banner()
        first = self._collector.collect_sequence("first")

        self._banner()
        second = self._collector.collect_sequence("second")

        merged = concat(first, second)
        ordered = sorted_descending(merged)

        self._banner()
        self._print_result(ordered)

        return SessionResult(
            first=first,
            second=second,
            merged=merged,
            ordered=ordered,
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _banner(self) -> None:
        self._sink.write(f"{BANNER}\n")

    def _print_result(self, ordered: NumberSequence) -> None:
        self._sink.write(f"Merged and sorted array: {format_sequence(ordered)}\n")
