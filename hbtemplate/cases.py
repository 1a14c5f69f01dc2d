"""Case conversion of strings, as often needed when generating code."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from hbtemplate.errors import RenderError, RenderErrorReason


def _words(text: str) -> Iterator[str]:
    """Split text into words on non-alphanumeric characters and case changes."""
    for chunk in _split_non_alnum(text):
        init = 0
        mode = "boundary"
        for i, ch in enumerate(chunk):
            if i + 1 >= len(chunk):
                yield chunk[init:]
                break
            nxt = chunk[i + 1]
            if ch.islower():
                next_mode = "lower"
            elif ch.isupper():
                next_mode = "upper"
            else:
                next_mode = mode
            if next_mode == "lower" and nxt.isupper():
                yield chunk[init : i + 1]
                init = i + 1
                mode = "boundary"
            elif mode == "upper" and ch.isupper() and nxt.islower():
                yield chunk[init:i]
                init = i
                mode = "boundary"
            else:
                mode = next_mode


def _split_non_alnum(text: str) -> Iterator[str]:
    current: list[str] = []
    for ch in text:
        if ch.isalnum():
            current.append(ch)
        elif current:
            yield "".join(current)
            current = []
    if current:
        yield "".join(current)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def lower_camel_case(text: str) -> str:
    return "".join(
        word.lower() if i == 0 else _capitalize(word)
        for i, word in enumerate(_words(text))
    )


def upper_camel_case(text: str) -> str:
    return "".join(_capitalize(word) for word in _words(text))


def snake_case(text: str) -> str:
    return "_".join(word.lower() for word in _words(text))


def kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in _words(text))


def shouty_snake_case(text: str) -> str:
    return "_".join(word.upper() for word in _words(text))


def shouty_kebab_case(text: str) -> str:
    return "-".join(word.upper() for word in _words(text))


def title_case(text: str) -> str:
    return " ".join(_capitalize(word) for word in _words(text))


def train_case(text: str) -> str:
    return "-".join(_capitalize(word) for word in _words(text))


_HELPERS: dict[str, Callable[[str], str]] = {
    "lowerCamelCase": lower_camel_case,
    "upperCamelCase": upper_camel_case,
    "snakeCase": snake_case,
    "kebabCase": kebab_case,
    "shoutySnakeCase": shouty_snake_case,
    "shoutyKebabCase": shouty_kebab_case,
    "titleCase": title_case,
    "trainCase": train_case,
}


def apply_case(helper_name: str, value: Any) -> str:
    """Run the case helper registered under ``helper_name`` on a parameter value."""
    func = _HELPERS.get(helper_name)
    if func is None:
        raise RenderError(RenderErrorReason.HELPER_NOT_FOUND, helper_name)
    if not isinstance(value, str):
        raise RenderError(
            RenderErrorReason.PARAM_TYPE_MISMATCH_FOR_NAME,
            func.__name__,
            "0",
            "string",
        )
    return func(value)