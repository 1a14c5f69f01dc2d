"""Scope data of a block being rendered: base path, block parameters and locals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

Json = Any


@dataclass(frozen=True)
class BlockParamHolder:
    """A block parameter: either a path into the context or a value of its own."""

    value: Json = None
    path: tuple[str, ...] | None = None

    @classmethod
    def of_value(cls, value: Json) -> BlockParamHolder:
        return cls(value=value)

    @classmethod
    def of_path(cls, path: Iterable[str]) -> BlockParamHolder:
        return cls(path=tuple(path))

    @property
    def is_path(self) -> bool:
        return self.path is not None


@dataclass
class BlockParams:
    """Block parameters of a block, by name."""

    data: dict[str, BlockParamHolder] = field(default_factory=dict)

    def add_path(self, key: str, path: Iterable[str]) -> None:
        """Add a path, relative to the block's base path, as a parameter."""
        self.data[key] = BlockParamHolder.of_path(path)

    def add_value(self, key: str, value: Json) -> None:
        self.data[key] = BlockParamHolder.of_value(value)

    def get(self, key: str) -> BlockParamHolder | None:
        return self.data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.data


@dataclass
class BlockContext:
    """Contextual data for the current block scope."""

    base_path: list[str] = field(default_factory=list)
    base_value: Json = None
    has_base_value: bool = False
    block_params: BlockParams = field(default_factory=BlockParams)
    block_partials: dict[str, Any] = field(default_factory=dict)
    local_variables: dict[str, Json] = field(default_factory=dict)

    def set_local_var(self, name: str, value: Json) -> None:
        self.local_variables[name] = value

    def get_local_var(self, name: str) -> Json:
        return self.local_variables.get(name)

    def set_base_value(self, value: Json) -> None:
        """Use a derived value, instead of a context path, as the block's base."""
        self.base_value = value
        self.has_base_value = True

    def get_local_partial(self, name: str) -> Any:
        return self.block_partials.get(name)

    def set_local_partial(self, name: str, template: Any) -> None:
        self.block_partials[name] = template

    def get_block_param(self, name: str) -> BlockParamHolder | None:
        return self.block_params.get(name)

    def set_block_params(self, block_params: BlockParams) -> None:
        self.block_params = block_params

    def set_block_param(self, key: str, holder: BlockParamHolder) -> None:
        self.block_params.data[key] = holder