"""Allow ``python -m arraymerge`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m arraymerge`` behaves identically to the ``arraymerge``
console script.
"""

from __future__ import annotations

from arraymerge.cli.app import cli

if __name__ == "__main__":
    cli()
