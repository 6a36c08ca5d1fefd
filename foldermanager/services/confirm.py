"""
Prompter — the yes/no/edit confirmation loop.
Used for the sanitized folder name and for the first-run base directory.
Reads one line per question from an injectable input source.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from foldermanager.core.exceptions import InputClosedError

_log = logging.getLogger("foldermanager.services.confirm")


def is_yes(response: str) -> bool:
    """First character, case-insensitive, is 'y'. Empty input is a no."""
    return response[:1].lower() == "y"


class Prompter:
    """
    Wraps a line source and an output stream.
    input_fn follows the builtin input() contract: it writes the prompt,
    returns one line without its terminator and raises EOFError at end of input.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._input_fn = input_fn
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def say(self, text: str) -> None:
        print(text, file=self.out)

    def ask(self, prompt: str) -> str:
        """Read one line. Raises InputClosedError at end of input."""
        try:
            if self._input_fn is not None:
                return self._input_fn(prompt)
            if self._out is not None:
                # input() always prompts on stdout
                self.out.write(prompt)
                self.out.flush()
                return input()
            return input(prompt)
        except EOFError:
            self.say("")
            raise InputClosedError() from None

    def confirm(
        self,
        candidate: str,
        *,
        display: str,
        question: str,
        replace_prompt: str,
        transform: Optional[Callable[[str], str]] = None,
        validate: Optional[Callable[[str], bool]] = None,
        first_display: Optional[str] = None,
    ) -> str:
        """
        Loop until the user accepts a value. No retry limit.

        Each pass applies transform (if any) to the current value, prints
        display.format(value) and asks question. A 'y' answer returns the
        value; anything else reads a replacement line and loops. Values
        failing validate are not offered; a replacement is asked for directly.
        """
        raw = candidate
        shown = False
        while True:
            value = transform(raw) if transform is not None else raw
            if validate is not None and not validate(value):
                _log.info("candidate %r rejected by validator", value)
                self.say(f"Not a usable value: {value!r}")
                raw = self.ask(replace_prompt)
                continue

            template = first_display if (first_display and not shown) else display
            self.say(template.format(value))
            shown = True

            if is_yes(self.ask(question)):
                return value
            raw = self.ask(replace_prompt)
