"""CLI application entry point for arraymerge.

This module is the **sole error boundary** for the entire application.
It catches :class:`~arraymerge.exceptions.ArrayMergeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  session and the infrastructure token source.
* Diagnostics go to stderr through :data:`console`; the session's own
  prompts and result go to stdout through :data:`transcript`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from arraymerge.cli import exit_codes
from arraymerge.cli.console import console
from arraymerge.exceptions import ArrayMergeError
from arraymerge.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``arraymerge``                — plain stdin/stdout session
    * ``arraymerge --interactive``  — questionary-driven session
    * ``arraymerge --version``
    """
    parser = argparse.ArgumentParser(
        prog="arraymerge",
        description=(
            "Read two arrays of up to 10 numbers each, merge them, "
            "and print the result in descending order."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Ask for each value with an interactive prompt instead of reading stdin.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _handle_plain() -> int:
    """Run the session over standard input and standard output."""
    from arraymerge.cli.console import transcript
    from arraymerge.core.session import MergeSortSession
    from arraymerge.infra.stream_source import StreamTokenSource

    MergeSortSession(StreamTokenSource(), transcript).run()
    return exit_codes.SUCCESS


def _handle_interactive() -> int:
    """Run the session through questionary prompts."""
    from arraymerge.cli.console import transcript
    from arraymerge.cli.interactive import QuestionaryPrompter
    from arraymerge.core.session import MergeSortSession

    prompter = QuestionaryPrompter(echo=transcript)
    MergeSortSession(prompter, prompter).run()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the arraymerge CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return _handle_interactive()

    return _handle_plain()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ArrayMergeError as exc:
        console.print(f"\n[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
