"""Domain models for arraymerge.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

MAX_SEQUENCE_LENGTH: int = 10
"""Upper bound on the number of elements collected per input array."""

BANNER: str = "*" * 67
"""Separator line written before each stage of the session."""


# ---------------------------------------------------------------------------
# Number sequence
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumberSequence:
    """Immutable, ordered sequence of floating-point values.

    The tuple guarantees immutability.  Convenience dunder methods make
    the sequence usable in length, boolean and iteration contexts.
    """

    values: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __bool__(self) -> bool:
        return len(self.values) > 0

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)


# ---------------------------------------------------------------------------
# Session outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SessionResult:
    """Every stage of one completed merge-and-sort session."""

    first: NumberSequence
    """Values collected for the first array, in entry order."""

    second: NumberSequence
    """Values collected for the second array, in entry order."""

    merged: NumberSequence
    """``first`` followed by ``second``, before sorting."""

    ordered: NumberSequence
    """``merged`` rearranged into descending order."""
