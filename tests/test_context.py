from collections import deque
from dataclasses import dataclass, field

import pytest

from hbtemplate.block import BlockContext, BlockParams
from hbtemplate.context import Context, merge_json
from hbtemplate.errors import RenderError, RenderErrorReason
from hbtemplate.path import Path


def navigate_from_root(ctx, path):
    return ctx.navigate(Path.parse(path).segs(), deque())


@dataclass
class Address:
    city: str
    country: str


@dataclass
class Person:
    name: str
    age: int
    addr: Address
    titles: list = field(default_factory=list)


def test_render():
    ctx = Context.wraps("hello")
    assert navigate_from_root(ctx, "this").render() == "hello"


def test_navigation():
    person = Person(
        name="Ning Sun",
        age=27,
        addr=Address(city="Beijing", country="China"),
        titles=["programmer", "cartographer"],
    )
    ctx = Context.wraps(person)
    assert navigate_from_root(ctx, "./addr/country").render() == "China"
    assert navigate_from_root(ctx, "addr.[country]").render() == "China"

    ctx2 = Context.wraps(True)
    assert navigate_from_root(ctx2, "this").render() == "true"

    assert navigate_from_root(ctx, "titles.[0]").render() == "programmer"
    assert navigate_from_root(ctx, "age").render() == "27"


def test_this():
    ctx1 = Context.wraps({"this": "hello", "age": 5})
    ctx2 = Context.wraps({"age": 4})
    assert navigate_from_root(ctx1, "this").render() == "[object]"
    assert navigate_from_root(ctx2, "age").render() == "4"


def test_merge_json():
    hash_ = {"tag": "h1"}

    ctx_a1 = Context.wraps(merge_json({"age": 4}, hash_))
    assert navigate_from_root(ctx_a1, "age").render() == "4"
    assert navigate_from_root(ctx_a1, "tag").render() == "h1"

    ctx_a2 = Context.wraps(merge_json("hello", hash_))
    assert navigate_from_root(ctx_a2, "this").render() == "[object]"
    assert navigate_from_root(ctx_a2, "tag").render() == "h1"
    assert navigate_from_root(ctx_a2, "0").render() == "h"
    assert navigate_from_root(ctx_a2, "1").render() == "e"

    ctx_a3 = Context.wraps(merge_json(["a", "b"], hash_))
    assert navigate_from_root(ctx_a3, "tag").render() == "h1"
    assert navigate_from_root(ctx_a3, "0").render() == "a"
    assert navigate_from_root(ctx_a3, "1").render() == "b"

    ctx_a4 = Context.wraps(merge_json("hello", {}))
    assert navigate_from_root(ctx_a4, "this").render() == "hello"


def test_merge_json_scalar_base_gives_only_addition():
    assert merge_json(5, {"k": 1}) == {"k": 1}


def test_merge_json_does_not_change_base():
    base = {"a": 1}
    merged = merge_json(base, {"b": 2})
    assert merged == {"a": 1, "b": 2}
    assert base == {"a": 1}


def test_key_name_with_this():
    ctx = Context.wraps({"this_name": "the_value"})
    assert navigate_from_root(ctx, "this_name").render() == "the_value"


def test_serialize_error():
    with pytest.raises(RenderError) as info:
        Context.wraps(object())
    assert info.value.reason is RenderErrorReason.SERDE_ERROR


def test_serialize_error_for_bad_key():
    with pytest.raises(RenderError) as info:
        Context.wraps({(1, 2): "x"})
    assert info.value.reason is RenderErrorReason.SERDE_ERROR


def test_wraps_converts_tuples_and_nan():
    ctx = Context.wraps({"t": (1, 2), "n": float("nan"), 3: "x"})
    assert ctx.data == {"t": [1, 2], "n": None, "3": "x"}


def test_null():
    assert Context.null().data is None
    assert navigate_from_root(Context.null(), "a").is_missing()


def test_root():
    ctx = Context.wraps({"a": {"b": {"c": {"d": 1}}}, "b": 2})
    block = BlockContext()
    block.base_path = ["a", "b"]
    blocks = deque([block])
    result = ctx.navigate(Path.parse("@root/b").segs(), blocks)
    assert result.render() == "2"


def test_relative_to_base_path():
    ctx = Context.wraps({"a": {"b": {"c": {"d": 1}}}, "b": 2})
    block = BlockContext()
    block.base_path = ["a", "b"]
    result = ctx.navigate(Path.parse("c.d").segs(), deque([block]))
    assert result.render() == "1"
    assert result.context_path() == ["a", "b", "c", "d"]


def test_block_params():
    ctx = Context.wraps([{"a": [1, 2]}, {"b": [2, 3]}])
    params = BlockParams()
    params.add_path("z", ["0", "a"])
    params.add_value("t", "good")
    block = BlockContext()
    block.set_block_params(params)
    blocks = deque([block])

    assert ctx.navigate(Path.parse("z.[1]").segs(), blocks).render() == "2"
    assert ctx.navigate(Path.parse("t").segs(), blocks).render() == "good"


def test_block_param_value_is_derived():
    ctx = Context.wraps({})
    params = BlockParams()
    params.add_value("t", {"x": 7})
    block = BlockContext()
    block.set_block_params(params)
    result = ctx.navigate(Path.parse("t.x").segs(), deque([block]))
    assert result.as_json() == 7
    assert result.context_path() is None


def test_path_up_uses_parent_block():
    ctx = Context.wraps({"a": {"x": "inner"}, "x": "outer"})
    inner = BlockContext()
    inner.base_path = ["a"]
    outer = BlockContext()
    blocks = deque([inner, outer])
    assert ctx.navigate(Path.parse("x").segs(), blocks).render() == "inner"
    assert ctx.navigate(Path.parse("../x").segs(), blocks).render() == "outer"


def test_base_value_block():
    ctx = Context.wraps({"k": "context"})
    block = BlockContext()
    block.set_base_value({"k": "derived"})
    result = ctx.navigate(Path.parse("k").segs(), deque([block]))
    assert result.as_json() == "derived"
    assert result.context_path() is None


def test_missing_value():
    ctx = Context.wraps({"a": [1]})
    assert navigate_from_root(ctx, "b").is_missing()
    assert navigate_from_root(ctx, "a.[5]").is_missing()


def test_null_value_is_not_missing():
    ctx = Context.wraps({"a": None})
    result = navigate_from_root(ctx, "a")
    assert result.is_missing() is False
    assert result.context_path() == ["a"]


def test_invalid_array_index():
    ctx = Context.wraps({"a": [1, 2]})
    with pytest.raises(RenderError) as info:
        navigate_from_root(ctx, "a.x")
    assert info.value.reason is RenderErrorReason.INVALID_JSON_INDEX
    assert str(info.value) == "Cannot access array/vector with string index, x"