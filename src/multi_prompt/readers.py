"""Console read strategies built on rich prompts."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from .errors import PromptCancelled
from .fields import MISSING, ReadFn

ChoiceReader = Callable[[str], str]


def text_reader(console: Optional[Console] = None) -> ReadFn:
    """Read a line of text.

    A non-empty string ``current`` is offered as the default. Inside
    ``read_multi`` a revised field is cleared first, so this only applies
    when the reader is called with an existing answer directly.
    """

    def read(prompt: str, current: Any = MISSING) -> str:
        kwargs: dict[str, Any] = {}
        if isinstance(current, str) and current:
            kwargs["default"] = current
        try:
            return Prompt.ask(escape(prompt), console=console, **kwargs)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled(f"Input cancelled for {prompt!r}") from exc

    return read


def int_reader(console: Optional[Console] = None) -> ReadFn:
    """Read an integer; rich re-asks until the input parses.

    An integer ``current`` is offered as the default when the reader is
    called with one directly.
    """

    def read(prompt: str, current: Any = MISSING) -> int:
        kwargs: dict[str, Any] = {}
        if isinstance(current, int) and not isinstance(current, bool):
            kwargs["default"] = current
        try:
            return IntPrompt.ask(escape(prompt), console=console, **kwargs)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled(f"Input cancelled for {prompt!r}") from exc

    return read


def choice_reader(
    choices: Sequence[str],
    console: Optional[Console] = None,
) -> ReadFn:
    """Read one of a fixed set of strings."""

    options = [str(choice) for choice in choices]
    if not options:
        raise ValueError("choice_reader needs at least one choice.")

    def read(prompt: str, current: Any = MISSING) -> str:
        default = current if current in options else options[0]
        try:
            return Prompt.ask(
                escape(prompt),
                console=console,
                choices=options,
                default=default,
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled(f"Input cancelled for {prompt!r}") from exc

    return read


def console_choice_reader(console: Optional[Console] = None) -> ChoiceReader:
    """Reader for the confirm-or-change prompt."""

    target = console or Console()

    def read(prompt_text: str) -> str:
        try:
            return target.input(escape(prompt_text))
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled("Confirmation prompt cancelled") from exc

    return read
