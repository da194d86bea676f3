"""Pure token parsing and size clamping.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Rejections are reported by
raising an :class:`~arraymerge.exceptions.InvalidInputError` subclass,
which the collector turns into a re-prompt.
"""

from __future__ import annotations

import math

from arraymerge.core.models import MAX_SEQUENCE_LENGTH
from arraymerge.exceptions import InvalidNumberError, InvalidSizeError


def parse_size(token: str) -> int:
    """Parse a requested sequence length.

    Only whole-number literals (with an optional sign) are accepted, and
    the value must be strictly positive.

    Raises
    ------
    InvalidSizeError
        For non-integer text or a value ``<= 0``.
    """
    try:
        size = int(token)
    except ValueError as exc:
        raise InvalidSizeError(token) from exc
    if size <= 0:
        raise InvalidSizeError(token, hint="The size must be at least 1.")
    return size


def parse_number(token: str) -> float:
    """Parse one sequence element.

    Any float literal is accepted (``3``, ``-2.5``, ``1e3``) as long as the
    result is finite.  ``nan`` and ``inf`` spellings are rejected so the
    sorter only ever compares ordinary numbers.

    Raises
    ------
    InvalidNumberError
        For non-numeric text or a non-finite value.
    """
    try:
        value = float(token)
    except ValueError as exc:
        raise InvalidNumberError(token) from exc
    if not math.isfinite(value):
        raise InvalidNumberError(token, hint="Only finite numbers are accepted.")
    return value


def clamp_size(size: int, limit: int = MAX_SEQUENCE_LENGTH) -> int:
    """Truncate a validated size to *limit*."""
    return min(size, limit)
