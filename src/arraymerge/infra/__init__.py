"""Infrastructure layer — external system integration.

This layer wraps interaction with the process's standard input.  Stream
exhaustion is reported as a typed
:class:`~arraymerge.exceptions.ArrayMergeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from arraymerge.infra.stream_source import StreamTokenSource

__all__: list[str] = [
    "StreamTokenSource",
]
