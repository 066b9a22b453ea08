"""Field records for multi-field prompt sessions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional

ReadFn = Callable[[str, Any], Any]
StringifyFn = Callable[[Any], str]


class _Missing:
    """Marker for a field that has no response yet."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Caller-supplied description of one prompt.

    ``read`` receives the prompt text and the field's current response
    (``MISSING`` when unanswered) and returns the new response. It may
    block on the user and may raise to abort the whole session.
    ``stringify`` formats non-string responses for display. ``default``
    seeds the response; leaving it as ``MISSING`` means the field is
    asked during the initial pass.
    """

    prompt: str
    read: ReadFn
    stringify: Optional[StringifyFn] = None
    default: Any = MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FieldSpec":
        """Build a spec from a mapping with ``prompt``/``readFn`` keys.

        The camel-case keys ``readFn`` and ``stringifyFn`` are accepted
        next to ``read`` and ``stringify``. A ``default`` key is honoured
        whenever it is present, even when its value is falsy or ``None``.
        """

        prompt = data.get("prompt")
        if prompt is None:
            raise ValueError("Field spec is missing the 'prompt' key.")
        read = data.get("read", data.get("readFn"))
        if read is None:
            raise ValueError(
                f"Field spec {prompt!r} is missing the 'readFn' key."
            )
        if not callable(read):
            raise TypeError(f"Field spec {prompt!r} readFn is not callable.")
        stringify = data.get("stringify", data.get("stringifyFn"))
        if stringify is not None and not callable(stringify):
            raise TypeError(
                f"Field spec {prompt!r} stringifyFn is not callable."
            )
        return cls(
            prompt=str(prompt),
            read=read,
            stringify=stringify,
            default=data["default"] if "default" in data else MISSING,
        )


@dataclass(frozen=True, slots=True)
class FieldState:
    """Snapshot of one field inside a running session."""

    prompt: str
    read: ReadFn
    stringify: Optional[StringifyFn] = None
    response: Any = MISSING
    is_current: bool = False

    @classmethod
    def from_spec(cls, spec: FieldSpec) -> "FieldState":
        return cls(
            prompt=spec.prompt,
            read=spec.read,
            stringify=spec.stringify,
            response=spec.default,
        )

    @property
    def answered(self) -> bool:
        return self.response is not MISSING

    def with_current(self, flag: bool) -> "FieldState":
        return replace(self, is_current=flag)

    def with_response(self, value: Any) -> "FieldState":
        return replace(self, response=value)
