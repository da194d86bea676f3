"""Concatenation of two number sequences."""

from __future__ import annotations

from arraymerge.core.models import NumberSequence


def concat(first: NumberSequence, second: NumberSequence) -> NumberSequence:
    """Return a new sequence holding *first*'s values followed by *second*'s.

    Relative order inside each input is preserved.
    """
    return NumberSequence(values=first.values + second.values)
