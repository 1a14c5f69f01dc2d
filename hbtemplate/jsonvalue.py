"""JSON values as seen during rendering, with rendering and truthiness rules."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

Json = Any


def _render_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return ""
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def render_json(value: Json) -> str:
    """Render a JSON value with the default text format."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _render_number(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_json(item) for item in value) + "]"
    if isinstance(value, dict):
        return "[object]"
    return str(value)


def is_truthy(value: Json, include_zero: bool) -> bool:
    """Whether a value counts as true in conditions such as ``if``."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return True
        if not math.isfinite(number):
            # non-finite numbers cannot be held by JSON and behave as null
            return False
        if include_zero:
            return True
        return abs(number) >= sys.float_info.min
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return bool(value)


def as_string(value: Json) -> str | None:
    """The value if it is a string, otherwise None."""
    return value if isinstance(value, str) else None


class ScopedKind(Enum):
    """Where a value came from."""

    CONSTANT = "constant"
    DERIVED = "derived"
    CONTEXT = "context"
    MISSING = "missing"


@dataclass(frozen=True)
class ScopedJson:
    """A JSON value tagged with its origin and, for context values, its full path."""

    kind: ScopedKind
    value: Json = None
    path: tuple[str, ...] | None = None

    @classmethod
    def constant(cls, value: Json) -> ScopedJson:
        return cls(ScopedKind.CONSTANT, value)

    @classmethod
    def derived(cls, value: Json) -> ScopedJson:
        return cls(ScopedKind.DERIVED, value)

    @classmethod
    def context(cls, value: Json, path) -> ScopedJson:
        return cls(ScopedKind.CONTEXT, value, tuple(path))

    @classmethod
    def missing(cls) -> ScopedJson:
        return cls(ScopedKind.MISSING)

    def as_json(self) -> Json:
        return None if self.kind is ScopedKind.MISSING else self.value

    def render(self) -> str:
        return render_json(self.as_json())

    def is_missing(self) -> bool:
        return self.kind is ScopedKind.MISSING

    def into_derived(self) -> ScopedJson:
        return ScopedJson.derived(self.as_json())

    def context_path(self) -> list[str] | None:
        if self.kind is ScopedKind.CONTEXT:
            return list(self.path or ())
        return None


@dataclass(frozen=True)
class PathAndJson:
    """A parameter value with the relative path it was referenced by, if any."""

    relative_path: str | None
    scoped: ScopedJson

    def value(self) -> Json:
        return self.scoped.as_json()

    def context_path(self) -> list[str] | None:
        return self.scoped.context_path()

    def try_get_constant_value(self) -> Json:
        """The value if it is a literal of the template, otherwise None."""
        if self.scoped.kind is ScopedKind.CONSTANT:
            return self.scoped.value
        return None

    def is_value_missing(self) -> bool:
        return self.scoped.is_missing()

    def render(self) -> str:
        return self.scoped.render()