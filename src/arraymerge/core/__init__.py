"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls; output goes through the ``TextSink`` protocol.
* No direct stream or terminal access.
* No imports from ``cli`` or ``infra``.
"""

from arraymerge.core.collector import SequenceCollector
from arraymerge.core.merge import concat
from arraymerge.core.models import (
    BANNER,
    MAX_SEQUENCE_LENGTH,
    NumberSequence,
    SessionResult,
)
from arraymerge.core.protocols import TextSink, TokenSource
from arraymerge.core.selection_sort import sort_descending, sorted_descending
from arraymerge.core.session import MergeSortSession

__all__: list[str] = [
    "BANNER",
    "MAX_SEQUENCE_LENGTH",
    "MergeSortSession",
    "NumberSequence",
    "SequenceCollector",
    "SessionResult",
    "TextSink",
    "TokenSource",
    "concat",
    "sort_descending",
    "sorted_descending",
]
