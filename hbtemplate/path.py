"""Paths that templates use to reach into the JSON data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from hbtemplate.errors import RenderError, RenderErrorReason


class SegmentRule(Enum):
    """Special path segments that are not plain names."""

    ROOT = "@root"
    LOCAL = "@"
    UP = ".."


PathSeg = Union[str, SegmentRule]

_SEPARATORS = "/."


def _is_sep(raw: str, pos: int) -> bool:
    return pos < len(raw) and raw[pos] in _SEPARATORS


def _is_symbol_char(ch: str) -> bool:
    if not ch.isascii():
        return True
    return ch.isalnum() or ch in "-_$"


def _scan_ups(raw: str, pos: int, segs: list[PathSeg]) -> int:
    while raw.startswith("..", pos) and _is_sep(raw, pos + 2):
        segs.append(SegmentRule.UP)
        pos += 3
    return pos


def _scan_item(raw: str, pos: int) -> tuple[str, int] | None:
    """Read a name or a bracketed key starting at ``pos``."""
    if raw.startswith("[", pos):
        end = raw.find("]", pos + 1)
        if end < 0:
            return None
        return raw[pos + 1 : end], end + 1
    end = pos
    while end < len(raw) and _is_symbol_char(raw[end]):
        end += 1
    if end == pos:
        return None
    return raw[pos:end], end


def _push_name(segs: list[PathSeg], name: str) -> None:
    if name != "this":
        segs.append(name)


def _scan_path(raw: str) -> list[PathSeg] | None:
    """Match a path at the start of ``raw``; None when nothing matches."""
    segs: list[PathSeg] = []
    pos = 0
    if raw.startswith("@root") and _is_sep(raw, 5):
        segs.append(SegmentRule.ROOT)
        pos = 6
    if raw.startswith("this", pos) and _is_sep(raw, pos + 4):
        pos += 5
    elif raw.startswith("./", pos):
        pos += 2
    pos = _scan_ups(raw, pos, segs)
    if raw.startswith("@", pos):
        segs.append(SegmentRule.LOCAL)
        pos += 1
    pos = _scan_ups(raw, pos, segs)

    item = _scan_item(raw, pos)
    if item is None:
        return None
    name, pos = item
    _push_name(segs, name)
    while _is_sep(raw, pos):
        item = _scan_item(raw, pos + 1)
        if item is None:
            break
        name, pos = item
        _push_name(segs, name)
    return segs


def parse_path_segments(raw: str) -> list[PathSeg]:
    """Split a template path into its segments."""
    segs = _scan_path(raw)
    if segs is None:
        raise RenderError(RenderErrorReason.INVALID_JSON_PATH, raw)
    return segs


def _local_path_and_level(segs: list[PathSeg]) -> tuple[int, str] | None:
    if not segs or segs[0] is not SegmentRule.LOCAL:
        return None
    rest = segs[1:]
    level = 0
    while level < len(rest) and rest[level] is SegmentRule.UP:
        level += 1
    if level < len(rest) and isinstance(rest[level], str):
        return level, rest[level]
    return None


@dataclass(frozen=True)
class Path:
    """A path in a template: a relative data path or a local variable like ``@index``."""

    raw: str
    segments: tuple[PathSeg, ...] = ()
    local: tuple[int, str] | None = None

    @classmethod
    def _build(cls, raw: str, segs: Iterable[PathSeg]) -> Path:
        segs = list(segs)
        return cls(raw, tuple(segs), _local_path_and_level(segs))

    @classmethod
    def parse(cls, raw: str) -> Path:
        return cls._build(raw, parse_path_segments(raw))

    @classmethod
    def current(cls) -> Path:
        return cls("")

    @classmethod
    def with_named_paths(cls, names: Iterable[str]) -> Path:
        names = list(names)
        return cls("/".join(names), tuple(names))

    def is_local(self) -> bool:
        return self.local is not None

    def segs(self) -> list[PathSeg] | None:
        """Segments of a relative path; None for a local variable."""
        if self.local is not None:
            return None
        return list(self.segments)


def merge_json_path(path_stack: list[str], relative_path: Iterable[PathSeg]) -> None:
    """Append the named segments of ``relative_path`` to ``path_stack``."""
    path_stack.extend(seg for seg in relative_path if isinstance(seg, str))