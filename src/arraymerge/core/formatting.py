"""Presentation helpers for number sequences (pure transforms)."""

from __future__ import annotations

from collections.abc import Iterable


def format_number(value: float) -> str:
    """Render *value* with six significant digits, trimming trailing zeros.

    ``5.0`` → ``"5"``, ``3.14159265`` → ``"3.14159"``, ``1e10`` → ``"1e+10"``.
    """
    return f"{value:g}"


def format_sequence(values: Iterable[float]) -> str:
    """Join the rendered values with single spaces."""
    return " ".join(format_number(value) for value in values)
