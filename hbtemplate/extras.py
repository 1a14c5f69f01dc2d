"""Comparison, boolean, length and logging helpers over JSON values."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from typing import Any

from hbtemplate.errors import RenderError, RenderErrorReason
from hbtemplate.jsonvalue import PathAndJson, is_truthy, render_json

Json = Any

_LOGGER = logging.getLogger(__name__)

_TRACE = 5
_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": _TRACE,
}

_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_I64_MIN = -(2**63)
_U64_MAX = 2**64 - 1


def _is_number(value: Json) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _normalize_number(value: int | float) -> int | float | None:
    """Bring a number into the range that JSON numbers hold: 64-bit integers or floats."""
    if isinstance(value, int):
        if _I64_MIN <= value <= _U64_MAX:
            return value
        try:
            return float(value)
        except OverflowError:
            return None
    return value


def _parse_number(text: str) -> int | float | None:
    if not _NUMBER.fullmatch(text):
        return None
    if any(ch in text for ch in ".eE"):
        number = float(text)
        return number if math.isfinite(number) else None
    return _normalize_number(int(text))


def _ordering(a: Any, b: Any) -> int | None:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


def _cmp_nums(a: int | float, b: int | float) -> int | None:
    na = _normalize_number(a)
    nb = _normalize_number(b)
    if na is None or nb is None:
        return None
    return _ordering(na, nb)


def _cmp_num_str(number: int | float, text: str) -> int | None:
    parsed = _parse_number(text)
    if parsed is None:
        return None
    return _cmp_nums(number, parsed)


def compare_json(x: Json, y: Json) -> int | None:
    """Order two values: -1, 0 or 1, or None when they cannot be compared.

    Numbers compare with numbers and with strings that hold a number;
    strings compare with strings, booleans with booleans.
    """
    if _is_number(x) and _is_number(y):
        return _cmp_nums(x, y)
    if isinstance(x, str) and isinstance(y, str):
        return _ordering(x, y)
    if isinstance(x, bool) and isinstance(y, bool):
        return _ordering(x, y)
    if _is_number(x) and isinstance(y, str):
        return _cmp_num_str(x, y)
    if isinstance(x, str) and _is_number(y):
        result = _cmp_num_str(y, x)
        return None if result is None else -result
    return None


def _json_equal(x: Json, y: Json) -> bool:
    if isinstance(x, bool) or isinstance(y, bool):
        return isinstance(x, bool) and isinstance(y, bool) and x == y
    if _is_number(x) or _is_number(y):
        if not (_is_number(x) and _is_number(y)):
            return False
        nx = _normalize_number(x)
        ny = _normalize_number(y)
        if isinstance(nx, int) != isinstance(ny, int):
            return False
        return nx == ny
    if x is None or y is None:
        return x is None and y is None
    if isinstance(x, str) or isinstance(y, str):
        return isinstance(x, str) and isinstance(y, str) and x == y
    if isinstance(x, (list, tuple)) and isinstance(y, (list, tuple)):
        return len(x) == len(y) and all(_json_equal(a, b) for a, b in zip(x, y))
    if isinstance(x, dict) and isinstance(y, dict):
        return x.keys() == y.keys() and all(_json_equal(x[k], y[k]) for k in x)
    return False


def eq(x: Json, y: Json) -> bool:
    return _json_equal(x, y)


def ne(x: Json, y: Json) -> bool:
    return not _json_equal(x, y)


def gt(x: Json, y: Json) -> bool:
    return compare_json(x, y) == 1


def gte(x: Json, y: Json) -> bool:
    result = compare_json(x, y)
    return result is not None and result != -1


def lt(x: Json, y: Json) -> bool:
    return compare_json(x, y) == -1


def lte(x: Json, y: Json) -> bool:
    result = compare_json(x, y)
    return result is not None and result != 1


def negate(x: Json) -> bool:
    """The ``not`` helper: whether the value is falsy."""
    return not is_truthy(x, False)


def length(x: Json) -> int:
    """Items of an array or object, bytes of a string, 0 for anything else."""
    if isinstance(x, (list, tuple, dict)):
        return len(x)
    if isinstance(x, str):
        return len(x.encode("utf-8"))
    return 0


def all_truthy(*args: Json) -> bool:
    """The ``and`` helper."""
    return all(is_truthy(arg, False) for arg in args)


def any_truthy(*args: Json) -> bool:
    """The ``or`` helper."""
    return any(is_truthy(arg, False) for arg in args)


def log_params(params: Iterable[PathAndJson], level: Json = "info") -> str:
    """Log the parameters at the given level and return the logged message.

    A level that is not a string counts as ``info``; an unknown level raises.
    """
    message = ", ".join(
        f"{p.relative_path}: {render_json(p.value())}"
        if p.relative_path is not None
        else render_json(p.value())
        for p in params
    )
    level_name = level if isinstance(level, str) else "info"
    log_level = _LEVELS.get(level_name.lower()) if level_name.isascii() else None
    if log_level is None:
        raise RenderError(RenderErrorReason.INVALID_LOGGING_LEVEL, level_name)
    _LOGGER.log(log_level, "%s", message)
    return message