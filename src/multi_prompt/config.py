"""Configuration helpers for multi-field prompt sessions."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib import import_module

from rich.errors import StyleSyntaxError
from rich.style import Style

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class PromptSettings:
    """Display options shared by the renderer and the session."""

    placeholder: str = "__"
    highlight_style: str = "reverse"
    indent: int = 4
    clear_screen: bool = True


@dataclass(slots=True)
class AppSettings:
    """Top-level application settings loaded from environment variables."""

    prompt: PromptSettings = field(default_factory=PromptSettings)
    log_level: str = "WARNING"

    @classmethod
    def load(cls) -> "AppSettings":
        """Load settings from the environment or .env file."""
        _ensure_dotenv()
        defaults = PromptSettings()
        placeholder = os.getenv(
            "MULTI_PROMPT_PLACEHOLDER", defaults.placeholder
        )
        highlight_style = os.getenv(
            "MULTI_PROMPT_HIGHLIGHT_STYLE", defaults.highlight_style
        ).strip()
        if not highlight_style:
            raise RuntimeError(
                "MULTI_PROMPT_HIGHLIGHT_STYLE must not be empty"
            )
        try:
            Style.parse(highlight_style)
        except StyleSyntaxError as exc:
            raise RuntimeError(
                "MULTI_PROMPT_HIGHLIGHT_STYLE is not a rich style: "
                f"{highlight_style!r}"
            ) from exc
        indent_raw = os.getenv("MULTI_PROMPT_INDENT", str(defaults.indent))
        try:
            indent = int(indent_raw)
        except ValueError as exc:
            raise RuntimeError(
                "MULTI_PROMPT_INDENT must be an integer"
            ) from exc
        if indent < 0:
            raise RuntimeError("MULTI_PROMPT_INDENT must be at least 0")
        clear_screen = _parse_flag(
            "MULTI_PROMPT_CLEAR_SCREEN", default=defaults.clear_screen
        )
        log_level = os.getenv("MULTI_PROMPT_LOG_LEVEL", "WARNING")
        log_level = log_level.strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise RuntimeError(
                f"MULTI_PROMPT_LOG_LEVEL is not a logging level: {log_level}"
            )
        return cls(
            prompt=PromptSettings(
                placeholder=placeholder,
                highlight_style=highlight_style,
                indent=indent,
                clear_screen=clear_screen,
            ),
            log_level=log_level,
        )


def _parse_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean flag, got {raw!r}")


def _ensure_dotenv() -> None:
    """Load dotenv variables and provide a helpful error if missing."""

    try:
        dotenv_module = import_module("dotenv")
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dep
        raise RuntimeError(
            "python-dotenv is required. Install with `pip install "
            "python-dotenv`."
        ) from exc

    load_dotenv = getattr(dotenv_module, "load_dotenv")
    load_dotenv()
