"""Shared pytest fixtures and configuration for the arraymerge test suite.

Guidelines
----------
* No terminal interaction in any test — questionary is always mocked.
* Standard input is replaced with ``io.StringIO``.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from arraymerge.infra.stream_source import StreamTokenSource


class RecordingSink:
    """In-memory :class:`~arraymerge.core.protocols.TextSink`."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_source() -> Callable[[str], StreamTokenSource]:
    """Build a token source over text as if it were typed on stdin."""

    def _make(text: str) -> StreamTokenSource:
        return StreamTokenSource(io.StringIO(text))

    return _make
