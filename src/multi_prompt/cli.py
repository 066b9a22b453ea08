"""Command line entry-point for collecting a form of answers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Tuple

from rich.console import Console

from .config import AppSettings
from .errors import PromptCancelled
from .fields import FieldSpec
from .readers import console_choice_reader, int_reader, text_reader
from .rendering import ConsoleRenderer
from .session import read_multi

FieldArg = Tuple[str, str]


def _text_field(value: str) -> FieldArg:
    return ("text", value)


def _int_field(value: str) -> FieldArg:
    return ("int", value)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="multi-prompt",
        description=(
            "Ask a series of questions, then review and confirm the answers"
        ),
    )
    parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=_text_field,
        metavar="PROMPT[=DEFAULT]",
        help="Text field to collect; repeat for more fields.",
    )
    parser.add_argument(
        "--int-field",
        dest="fields",
        action="append",
        type=_int_field,
        metavar="PROMPT[=DEFAULT]",
        help="Integer field to collect; repeat for more fields.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the confirmed answers as a JSON list.",
    )
    args = parser.parse_args(argv)
    if not args.fields:
        parser.error("at least one --field or --int-field is required")
    return args


def build_specs(
    fields: List[FieldArg],
    console: Optional[Console] = None,
) -> List[FieldSpec]:
    """Turn ``--field``/``--int-field`` values into field specs."""

    specs: List[FieldSpec] = []
    for kind, raw in fields:
        prompt, has_default, default_raw = raw.partition("=")
        prompt = prompt.strip()
        if kind == "int":
            default: Any = default_raw
            if has_default:
                try:
                    default = int(default_raw)
                except ValueError as exc:
                    raise SystemExit(
                        f"Default for {prompt!r} must be an integer"
                    ) from exc
            read = int_reader(console)
        else:
            default = default_raw
            read = text_reader(console)
        if has_default:
            specs.append(
                FieldSpec(
                    prompt=prompt,
                    read=read,
                    stringify=str,
                    default=default,
                )
            )
        else:
            specs.append(FieldSpec(prompt=prompt, read=read, stringify=str))
    return specs


def run_cli(argv: Optional[list[str]] = None) -> None:
    """Entry-point invoked from ``python -m multi_prompt``."""

    arg_list = list(argv) if argv is not None else sys.argv[1:]
    args = _parse_args(arg_list)
    settings = AppSettings.load()
    logging.basicConfig(level=settings.log_level)

    console = Console()
    specs = build_specs(args.fields, console)
    renderer = ConsoleRenderer(console, settings.prompt)
    try:
        result = read_multi(
            specs,
            renderer=renderer,
            read_choice=console_choice_reader(console),
            settings=settings.prompt,
        )
    except PromptCancelled:
        print("Aborted.")
        raise SystemExit(130) from None
    if result is None:
        print("Cancelled.")
        raise SystemExit(1)
    if args.json:
        print(json.dumps(result, ensure_ascii=False))
        return
    for spec, value in zip(specs, result):
        print(f"{spec.prompt}: {value}")


if __name__ == "__main__":  # pragma: no cover - manual execution hook
    run_cli()
