"""Errors raised while parsing and rendering templates."""

from __future__ import annotations

import string
from enum import Enum
from typing import Any


def _debug_str(value: Any) -> str:
    """Quote a string the way a debug representation shows it."""
    text = str(value)
    pieces = ['"']
    for ch in text:
        if ch == "\\":
            pieces.append("\\\\")
        elif ch == '"':
            pieces.append('\\"')
        elif ch == "\n":
            pieces.append("\\n")
        elif ch == "\r":
            pieces.append("\\r")
        elif ch == "\t":
            pieces.append("\\t")
        elif ch == "\0":
            pieces.append("\\0")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            pieces.append(f"\\u{{{ord(ch):x}}}")
        else:
            pieces.append(ch)
    pieces.append('"')
    return "".join(pieces)


class _ReasonFormatter(string.Formatter):
    """Formatter with ``!q`` (quoted string) and ``!o`` (optional string) conversions."""

    def convert_field(self, value: Any, conversion: str | None) -> Any:
        if conversion == "q":
            return _debug_str(value)
        if conversion == "o":
            return "None" if value is None else f"Some({_debug_str(value)})"
        return super().convert_field(value, conversion)


_FORMATTER = _ReasonFormatter()


def _arity(template: str) -> int:
    indices = [
        int(field)
        for _, field, _, _ in _FORMATTER.parse(template)
        if field is not None and field != ""
    ]
    return max(indices) + 1 if indices else 0


class _DescribedReason(Enum):
    @property
    def arity(self) -> int:
        """Number of details the message of this reason takes."""
        return _arity(self.value)

    def describe(self, *details: Any) -> str:
        """Format the message of this reason with its details."""
        if len(details) != self.arity:
            raise TypeError(
                f"{self.name} takes {self.arity} detail(s), got {len(details)}"
            )
        return _FORMATTER.format(self.value, *details)


class RenderErrorReason(_DescribedReason):
    """Why rendering failed."""

    TEMPLATE_NOT_FOUND = "Template not found {0}"
    TEMPLATE_ERROR = "Failed to parse template {0}"
    MISSING_VARIABLE = "Failed to access variable in strict mode {0!o}"
    PARTIAL_NOT_FOUND = "Partial not found {0}"
    HELPER_NOT_FOUND = "Helper not found {0}"
    PARAM_NOT_FOUND_FOR_INDEX = (
        "Helper/Decorator {0} param at index {1} required but not found"
    )
    PARAM_NOT_FOUND_FOR_NAME = (
        "Helper/Decorator {0} param with name {1} required but not found"
    )
    PARAM_TYPE_MISMATCH_FOR_NAME = (
        "Helper/Decorator {0} param with name {1} type mismatch for {2}"
    )
    HASH_TYPE_MISMATCH_FOR_NAME = (
        "Helper/Decorator {0} hash with name {1} type mismatch for {2}"
    )
    DECORATOR_NOT_FOUND = "Decorator not found {0}"
    CANNOT_INCLUDE_SELF = "Can not include current template in partial"
    INVALID_LOGGING_LEVEL = "Invalid logging level: {0}"
    INVALID_PARAM_TYPE = "Invalid param type, {0} expected"
    BLOCK_CONTENT_REQUIRED = "Block content required"
    INVALID_JSON_PATH = "Invalid json path {0}"
    INVALID_JSON_INDEX = "Cannot access array/vector with string index, {0}"
    SERDE_ERROR = "Failed to access JSON data: {0}"
    IO_ERROR = "IO Error: {0}"
    UTF8_ERROR = "FromUtf8Error: {0}"
    NESTED_ERROR = "Nested error: {0}"
    UNIMPLEMENTED = "Unimplemented"
    OTHER = "{0}"


class RenderError(Exception):
    """Error raised when rendering data on a template."""

    def __init__(
        self,
        reason: RenderErrorReason,
        *args: Any,
        template_name: str | None = None,
        line_no: int | None = None,
        column_no: int | None = None,
    ) -> None:
        reason.describe(*args)  # validates the number of details
        super().__init__(reason, *args)
        self.reason = reason
        self.details = args
        self.template_name = template_name
        self.line_no = line_no
        self.column_no = column_no
        cause = next((a for a in args if isinstance(a, BaseException)), None)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def strict_error(cls, path: str | None) -> RenderError:
        """Error for a variable that is missing in strict mode."""
        return cls(RenderErrorReason.MISSING_VARIABLE, path)

    def is_unimplemented(self) -> bool:
        return self.reason is RenderErrorReason.UNIMPLEMENTED

    def __str__(self) -> str:
        desc = self.reason.describe(*self.details)
        if self.line_no is not None and self.column_no is not None:
            name = self.template_name if self.template_name is not None else "Unnamed template"
            return (
                f'Error rendering "{name}" line {self.line_no}, '
                f"col {self.column_no}: {desc}"
            )
        return desc


class TemplateErrorReason(_DescribedReason):
    """Why parsing a template failed."""

    MISMATCHING_CLOSED_HELPER = "helper {0!q} was opened, but {1!q} is closing"
    MISMATCHING_CLOSED_DECORATOR = "decorator {0!q} was opened, but {1!q} is closing"
    INVALID_SYNTAX = "invalid handlebars syntax: {0}"
    INVALID_PARAM = "invalid parameter {0!q}"
    NESTED_SUBEXPRESSION = "nested subexpression is not supported"
    IO_ERROR = 'Template "{1}": {0}'


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def template_segment(template_str: str, line: int, col: int) -> str:
    """Show the lines around a position of a template, marking the column."""
    span = 3
    line_start = max(line - span, 0)
    line_end = line + span
    out: list[str] = []
    for line_count, content in enumerate(_lines(template_str)):
        if line_start <= line_count <= line_end:
            out.append(f"{line_count:4} | {content}\n")
            if line_count == line - 1:
                width = len(content.encode("utf-8"))
                marks = "".join("^" if c == col else "-" for c in range(width))
                out.append(f"     |{marks}\n")
    return "".join(out)


class TemplateError(Exception):
    """Error raised when a template cannot be parsed."""

    def __init__(self, reason: TemplateErrorReason, *args: Any) -> None:
        reason.describe(*args)
        super().__init__(reason, *args)
        self.reason = reason
        self.details = args
        self.template_name: str | None = None
        self.line_no: int | None = None
        self.column_no: int | None = None
        self.segment: str | None = None
        cause = next((a for a in args if isinstance(a, BaseException)), None)
        if cause is not None:
            self.__cause__ = cause

    def at(self, template_str: str, line_no: int, column_no: int) -> TemplateError:
        """Attach a position in the template source; returns this error."""
        self.line_no = line_no
        self.column_no = column_no
        self.segment = template_segment(template_str, line_no, column_no)
        return self

    def in_template(self, name: str) -> TemplateError:
        """Attach the template name; returns this error."""
        self.template_name = name
        return self

    def pos(self) -> tuple[int, int] | None:
        if self.line_no is not None and self.column_no is not None:
            return (self.line_no, self.column_no)
        return None

    def name(self) -> str | None:
        return self.template_name

    def __str__(self) -> str:
        reason = self.reason.describe(*self.details)
        if (
            self.line_no is not None
            and self.column_no is not None
            and self.segment is not None
        ):
            name = self.template_name if self.template_name is not None else "Unnamed template"
            return (
                f"Template error: {reason}\n"
                f'    --> Template error in "{name}":{self.line_no}:{self.column_no}\n'
                f"     |\n{self.segment}     |\n"
                f"     = reason: {reason}\n"
            )
        return reason