"""CLI console helpers with optional Rich support.

Two writers live here:

* :data:`console` — diagnostics (errors, hints, abort notices) on stderr.
* :data:`transcript` — the program's literal prompts and result on stdout.

Both avoid module-level imports of Rich so bootstrap paths (``--help``,
``--version``) and the plain session keep working when it is not
installed.
"""

from __future__ import annotations

import sys
from typing import Any

from arraymerge.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


class _TranscriptWriter:
	""":class:`~arraymerge.core.protocols.TextSink` writing verbatim to stdout.

	Markup, highlighting and wrapping are disabled so the text reaches
	stdout exactly as the session produced it.
	"""

	def write(self, text: str) -> None:
		"""Write *text* without adding a newline."""
		try:
			rich_console = get_rich_console(stderr=False)
		except EnvironmentError:
			sys.stdout.write(text)
			sys.stdout.flush()
			return
		rich_console.print(
			text,
			end="",
			markup=False,
			highlight=False,
			emoji=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
transcript = _TranscriptWriter()
