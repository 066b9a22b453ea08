"""Sequential multi-field prompts with review before confirmation."""

from __future__ import annotations

from typing import Optional

from .errors import PromptCancelled
from .fields import MISSING, FieldSpec, FieldState
from .session import PromptSession, read_multi

__all__ = [
    "MISSING",
    "FieldSpec",
    "FieldState",
    "PromptCancelled",
    "PromptSession",
    "read_multi",
    "run_cli",
]


def run_cli(argv: Optional[list[str]] = None) -> None:
    """Proxy to :mod:`multi_prompt.cli.run_cli` for convenience."""

    from .cli import run_cli as _run_cli_impl

    _run_cli_impl(argv)
