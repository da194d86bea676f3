"""Interactive session driver backed by questionary prompts.

:class:`QuestionaryPrompter` satisfies both core protocols at once:

* As a :class:`~arraymerge.core.protocols.TextSink` it forwards complete
  lines (banners, the result) to an echo sink and keeps the trailing
  fragment (``"Enter 3 elements: "``) as the next question.
* As a :class:`~arraymerge.core.protocols.TokenSource` it asks that
  question with ``questionary.text`` and splits the answer into tokens,
  exactly like one line of standard input.

The core collector therefore applies the same retry rules in both modes.
"""

from __future__ import annotations

from collections import deque
from typing import Any

from arraymerge.core.protocols import TextSink
from arraymerge.exceptions import EnvironmentError, InputClosedError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Token source and prompt sink driven by ``questionary.text``.

    Parameters
    ----------
    echo:
        Sink receiving every complete output line.
    """

    def __init__(self, echo: TextSink) -> None:
        self._questionary: Any = _import_questionary()
        self._echo: TextSink = echo
        self._pending_prompt: str = ""
        self._last_prompt: str = ""
        self._tokens: deque[str] = deque()

    # ------------------------------------------------------------------
    # TextSink
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Echo complete lines; hold a trailing fragment as the next question."""
        *lines, fragment = text.split("\n")
        if lines:
            self._echo.write("".join(f"{line}\n" for line in lines))
        if fragment:
            self._pending_prompt = fragment

    # ------------------------------------------------------------------
    # TokenSource
    # ------------------------------------------------------------------

    def next_token(self) -> str:
        """Ask until the answer holds at least one token.

        Raises
        ------
        InputClosedError
            If the user cancels the prompt (Esc / Ctrl+C returns ``None``).
        """
        while not self._tokens:
            message = (self._pending_prompt or self._last_prompt).strip()
            answer: str | None = self._questionary.text(message, qmark="›").ask()
            if answer is None:
                raise InputClosedError(
                    "Input cancelled.",
                    hint="Answer every prompt to see the merged array.",
                )
            self._tokens.extend(answer.split())
            if self._tokens:
                self._last_prompt = message
                self._pending_prompt = ""
        return self._tokens.popleft()

    def discard_line(self) -> None:
        """Drop tokens left over from the last answer."""
        self._tokens.clear()
