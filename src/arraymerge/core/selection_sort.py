"""Descending selection sort.

Pure in-memory algorithm — no I/O, deterministic.

For each position ``i`` the unsorted remainder ``i+1 .. n-1`` is scanned
for its maximum using strict ``>``, so the *first* occurrence of the
maximum wins a tie.  The element at ``i`` is then swapped with it.
O(n²) comparisons, at most ``n - 1`` swaps.

NaN never compares greater than anything, so a NaN reaching this module
is never picked as a maximum by a later scan; it may still be carried
around by swaps.  The parsers reject non-finite input, so the session
never sorts one.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from arraymerge.core.models import NumberSequence


def index_of_max(values: Sequence[float], start: int) -> int:
    """Return the index of the first maximum in ``values[start:]``."""
    max_index = start
    for j in range(start + 1, len(values)):
        if values[j] > values[max_index]:
            max_index = j
    return max_index


def sort_descending(values: MutableSequence[float]) -> MutableSequence[float]:
    """Sort *values* in place, highest first, and return it."""
    n = len(values)
    for i in range(n - 1):
        max_index = index_of_max(values, i)
        if max_index != i:
            values[i], values[max_index] = values[max_index], values[i]
    return values


def sorted_descending(sequence: NumberSequence) -> NumberSequence:
    """Return a new :class:`NumberSequence` with *sequence* sorted descending."""
    working = list(sequence.values)
    sort_descending(working)
    return NumberSequence(values=tuple(working))
