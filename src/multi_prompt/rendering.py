"""Rendering of prompt session state."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .config import PromptSettings
from .fields import MISSING, FieldState

logger = logging.getLogger(__name__)


class FormRenderer(Protocol):
    """Sink that displays the whole form and is disposed at session end."""

    def show(self, fields: Sequence[FieldState]) -> None:
        ...

    def close(self) -> None:
        ...


def format_response(field: FieldState, placeholder: str = "__") -> str:
    """Return the display text for a field's response."""

    response = field.response
    if isinstance(response, str):
        return response
    if response is MISSING:
        return placeholder
    if field.stringify is not None:
        return field.stringify(response)
    return placeholder


def render_form(
    fields: Sequence[FieldState],
    settings: Optional[PromptSettings] = None,
) -> Text:
    """Lay out every field as prompt line, indented response, blank line."""

    settings = settings or PromptSettings()
    indent = " " * settings.indent
    text = Text()
    for number, field in enumerate(fields, start=1):
        text.append(f"{number}. {field.prompt}\n")
        text.append(indent)
        text.append(
            format_response(field, settings.placeholder),
            style=settings.highlight_style if field.is_current else None,
        )
        text.append("\n\n")
    return text


class ConsoleRenderer:
    """Redraws the form on a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        settings: Optional[PromptSettings] = None,
    ) -> None:
        self._console = console or Console()
        self._settings = settings or PromptSettings()
        self._closed = False

    @property
    def console(self) -> Console:
        return self._console

    def show(self, fields: Sequence[FieldState]) -> None:
        if self._settings.clear_screen:
            self._console.clear()
        self._console.print(render_form(fields, self._settings), end="")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._settings.clear_screen:
            self._console.clear()
        logger.debug("Console renderer closed")


class MemoryRenderer:
    """Keeps every rendered frame instead of drawing it."""

    def __init__(self, settings: Optional[PromptSettings] = None) -> None:
        self._settings = settings or PromptSettings()
        self.snapshots: List[Tuple[FieldState, ...]] = []
        self.frames: List[str] = []
        self.closed = False

    def show(self, fields: Sequence[FieldState]) -> None:
        snapshot = tuple(fields)
        self.snapshots.append(snapshot)
        self.frames.append(render_form(snapshot, self._settings).plain)

    def close(self) -> None:
        self.closed = True

    @property
    def last_frame(self) -> str:
        return self.frames[-1] if self.frames else ""
