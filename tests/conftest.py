"""Shared fixtures for prompt session tests."""

from typing import Any, Iterable, List

import pytest

from multi_prompt.rendering import MemoryRenderer


class ScriptedReader:
    """Read function that returns queued values and records its calls."""

    def __init__(self, *values: Any) -> None:
        self._values: List[Any] = list(values)
        self.calls: List[tuple] = []

    def __call__(self, prompt: str, current: Any) -> Any:
        self.calls.append((prompt, current))
        return self._values.pop(0)


class ScriptedChoices:
    """Confirm-prompt reader fed from a list of answers."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt_text: str) -> str:
        self.prompts.append(prompt_text)
        return self._answers.pop(0)


@pytest.fixture
def renderer():
    return MemoryRenderer()


@pytest.fixture
def scripted_reader():
    return ScriptedReader


@pytest.fixture
def scripted_choices():
    return ScriptedChoices
