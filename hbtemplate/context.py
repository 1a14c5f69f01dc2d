"""The data a template is rendered with, and navigation through it."""

from __future__ import annotations

import copy
import dataclasses
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from hbtemplate.block import BlockContext, BlockParamHolder
from hbtemplate.errors import RenderError, RenderErrorReason
from hbtemplate.jsonvalue import ScopedJson
from hbtemplate.path import PathSeg, SegmentRule, merge_json_path

Json = Any

_MISSING = object()
_INDEX = re.compile(r"\+?[0-9]+")


def _to_value(data: Any) -> Json:
    """Convert Python data into plain JSON values."""
    if data is None or isinstance(data, (bool, str)):
        return data
    if isinstance(data, int):
        return data
    if isinstance(data, float):
        return data if math.isfinite(data) else None
    if isinstance(data, Context):
        return copy.deepcopy(data.data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: _to_value(getattr(data, f.name)) for f in dataclasses.fields(data)}
    if isinstance(data, Mapping):
        result: dict[str, Json] = {}
        for key, value in data.items():
            if isinstance(key, str):
                name = key
            elif isinstance(key, int) and not isinstance(key, bool):
                name = str(key)
            else:
                raise TypeError(f"key must be a string, got {type(key).__name__}")
            result[name] = _to_value(value)
        return result
    if isinstance(data, (list, tuple)):
        return [_to_value(item) for item in data]
    raise TypeError(f"{type(data).__name__} cannot be converted to JSON")


def _get_data(current: Json, key: str) -> Json:
    if current is _MISSING:
        return _MISSING
    if isinstance(current, list):
        if not _INDEX.fullmatch(key):
            raise RenderError(RenderErrorReason.INVALID_JSON_INDEX, key)
        index = int(key)
        return current[index] if index < len(current) else _MISSING
    if isinstance(current, dict):
        return current.get(key, _MISSING)
    return _MISSING


def _find_block_param(
    block_contexts: Sequence[BlockContext], name: str
) -> tuple[BlockParamHolder, list[str]] | None:
    for block in block_contexts:
        holder = block.get_block_param(name)
        if holder is not None:
            return holder, block.base_path
    return None


def _names(segs: Sequence[PathSeg]) -> list[str]:
    stack: list[str] = []
    merge_json_path(stack, segs)
    return stack


def _resolve(
    relative_path: Sequence[PathSeg], block_contexts: Sequence[BlockContext]
) -> tuple[list[str], Json]:
    """Resolve a path to its full segments and, for derived bases, the base value.

    The base value is ``_MISSING`` when the path is absolute in the context data.
    """
    depth = 0
    block_param = None
    from_root = False
    for seg in relative_path:
        if isinstance(seg, str):
            block_param = _find_block_param(block_contexts, seg)
            break
        if seg is SegmentRule.ROOT:
            from_root = True
            break
        if seg is SegmentRule.UP:
            depth += 1
        else:
            break

    if block_param is not None:
        holder, base_path = block_param
        rest = _names(relative_path[depth + 1 :])
        if holder.is_path:
            return list(base_path) + list(holder.path or ()) + rest, _MISSING
        return rest, holder.value

    if from_root:
        return _names(relative_path), _MISSING

    if depth > 0 and depth < len(block_contexts):
        block = block_contexts[depth]
    elif block_contexts:
        block = block_contexts[0]
    else:
        block = None

    if block is not None and block.has_base_value:
        return _names(relative_path), block.base_value
    base = list(block.base_path) if block is not None else []
    return base + _names(relative_path), _MISSING


def merge_json(base: Json, addition: Mapping[str, Json]) -> Json:
    """Merge extra keys into a value, turning arrays and strings into objects."""
    if not addition:
        return copy.deepcopy(base)
    if isinstance(base, dict):
        merged = copy.deepcopy(base)
    elif isinstance(base, list):
        merged = {str(i): copy.deepcopy(v) for i, v in enumerate(base)}
    elif isinstance(base, str):
        merged = {str(i): ch for i, ch in enumerate(base)}
    else:
        merged = {}
    for key, value in addition.items():
        merged[str(key)] = copy.deepcopy(value)
    return merged


@dataclass
class Context:
    """The data a template is rendered against."""

    data: Json = None

    @classmethod
    def null(cls) -> Context:
        return cls(None)

    @classmethod
    def wraps(cls, data: Any) -> Context:
        """Wrap data, converting it to JSON values; raises RenderError if it cannot."""
        try:
            return cls(_to_value(data))
        except (TypeError, ValueError, RecursionError) as exc:
            raise RenderError(RenderErrorReason.SERDE_ERROR, exc) from exc

    def navigate(
        self,
        relative_path: Sequence[PathSeg],
        block_contexts: Sequence[BlockContext],
    ) -> ScopedJson:
        """Find the value a path points to within the current block scopes."""
        relative_path = list(relative_path)
        paths, base_value = _resolve(relative_path, block_contexts)
        if base_value is _MISSING:
            current: Json = self.data
            for key in paths:
                current = _get_data(current, key)
            if current is _MISSING:
                return ScopedJson.missing()
            return ScopedJson.context(current, paths)

        current = base_value
        for key in paths:
            current = _get_data(current, key)
        if current is _MISSING:
            return ScopedJson.missing()
        return ScopedJson.derived(copy.deepcopy(current))