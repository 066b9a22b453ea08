"""Prompt session state machine: initial pass and confirm-or-change loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .config import PromptSettings
from .fields import MISSING, FieldSpec, FieldState
from .readers import ChoiceReader, console_choice_reader
from .rendering import ConsoleRenderer, FormRenderer

logger = logging.getLogger(__name__)

SpecLike = Union[FieldSpec, Mapping[str, Any]]


class ChoiceAction(str, Enum):
    """Outcomes of the confirm-or-change prompt."""

    CONFIRM = "confirm"
    CANCEL = "cancel"
    REVISE = "revise"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class Choice:
    """Normalized answer to the confirm-or-change prompt."""

    action: ChoiceAction
    index: Optional[int] = None


def parse_choice(raw: str, field_count: int) -> Choice:
    """Map raw prompt input to a choice; ``index`` is 0-based."""

    normalized = (raw or "").strip().lower()
    if normalized in {"", "y"}:
        return Choice(ChoiceAction.CONFIRM)
    if normalized == "n":
        return Choice(ChoiceAction.CANCEL)
    if normalized.isdecimal():
        number = int(normalized)
        if 1 <= number <= field_count:
            return Choice(ChoiceAction.REVISE, index=number - 1)
    return Choice(ChoiceAction.INVALID)


def choice_prompt(field_count: int) -> str:
    """Text shown when asking the user to confirm or change a field."""

    if field_count < 1:
        return "Confirm? [Y]es / [n]o: "
    return f"Confirm? [Y]es / [n]o / 1-{field_count} to change: "


def _as_spec(spec: SpecLike) -> FieldSpec:
    if isinstance(spec, FieldSpec):
        return spec
    return FieldSpec.from_mapping(spec)


class PromptSession:
    """Ordered field states for one ``read_multi`` invocation.

    Fields are never mutated in place: each change builds a new
    ``FieldState`` and replaces the slot at its index, so a snapshot
    handed to the renderer stays consistent.
    """

    def __init__(
        self,
        fields: Iterable[FieldState],
        renderer: FormRenderer,
    ) -> None:
        self._fields: List[FieldState] = list(fields)
        self._renderer = renderer

    @classmethod
    def create(
        cls,
        specs: Iterable[SpecLike],
        renderer: FormRenderer,
    ) -> "PromptSession":
        """Build the field states and draw the initial form."""

        session = cls(
            (FieldState.from_spec(_as_spec(spec)) for spec in specs),
            renderer,
        )
        logger.debug("Created prompt session with %d fields", len(session))
        session.render()
        return session

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def fields(self) -> Tuple[FieldState, ...]:
        return tuple(self._fields)

    @property
    def renderer(self) -> FormRenderer:
        return self._renderer

    def responses(self) -> List[Any]:
        return [field.response for field in self._fields]

    def set_current(self, index: int, flag: bool) -> None:
        self._fields[index] = self._fields[index].with_current(flag)

    def set_response(self, index: int, value: Any) -> None:
        self._fields[index] = self._fields[index].with_response(value)

    def render(self) -> None:
        self._renderer.show(self.fields)

    def ask(self, index: int) -> Any:
        """Highlight a field, read a new response for it and store it."""

        field = self._fields[index]
        logger.debug("Asking field %d (%s)", index + 1, field.prompt)
        self.set_current(index, True)
        self.render()
        try:
            value = field.read(field.prompt, field.response)
        finally:
            self.set_current(index, False)
        self.set_response(index, value)
        self.render()
        return value

    def collect_unanswered(self) -> None:
        """Ask every field that has no response, in order."""

        for index in range(len(self._fields)):
            if not self._fields[index].answered:
                self.ask(index)

    def confirm_or_change(
        self,
        read_choice: ChoiceReader,
    ) -> Optional[List[Any]]:
        """Loop until the user confirms (responses) or cancels (None)."""

        prompt_text = choice_prompt(len(self._fields))
        while True:
            choice = parse_choice(read_choice(prompt_text), len(self._fields))
            if choice.action is ChoiceAction.CONFIRM:
                logger.info("Prompt session confirmed")
                return self.responses()
            if choice.action is ChoiceAction.CANCEL:
                logger.info("Prompt session cancelled")
                return None
            if choice.action is ChoiceAction.REVISE and choice.index is not None:
                logger.debug("Revising field %d", choice.index + 1)
                self.set_response(choice.index, MISSING)
                self.ask(choice.index)
                continue
            logger.debug("Ignoring invalid confirmation choice")


def read_multi(
    specs: Sequence[SpecLike],
    *,
    renderer: Optional[FormRenderer] = None,
    read_choice: Optional[ChoiceReader] = None,
    settings: Optional[PromptSettings] = None,
) -> Optional[List[Any]]:
    """Collect one response per spec and let the user review them.

    Returns the responses in spec order once the user confirms, or
    ``None`` when they cancel. Exceptions raised by a field's read
    function propagate after the renderer is closed.
    """

    settings = settings or PromptSettings()
    if renderer is None:
        console_renderer = ConsoleRenderer(settings=settings)
        renderer = console_renderer
        if read_choice is None:
            read_choice = console_choice_reader(console_renderer.console)
    if read_choice is None:
        read_choice = console_choice_reader()
    try:
        session = PromptSession.create(specs, renderer)
        session.collect_unanswered()
        return session.confirm_or_change(read_choice)
    finally:
        renderer.close()
