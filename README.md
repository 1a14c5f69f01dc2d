# hbtemplate

Building blocks of a Handlebars-style template engine, working on plain
Python JSON data (`dict`, `list`, `str`, `int`, `float`, `bool`, `None`).

## What is inside

- `hbtemplate.errors`
  - `RenderError(reason, *details, template_name=None, line_no=None, column_no=None)`
    with a `RenderErrorReason` member. The message is the reason's text; when
    both a line and a column are set it reads
    `Error rendering "<name>" line L, col C: <reason>`.
    `RenderError.strict_error(path)` builds the strict-mode "missing variable"
    error, and `is_unimplemented()` tells whether the reason is `UNIMPLEMENTED`.
    A detail that is itself an exception becomes the error's `__cause__`.
  - `TemplateError(reason, *details)` with a `TemplateErrorReason` member.
    `at(template_str, line_no, column_no)` and `in_template(name)` attach a
    position and a name and return the same error; `pos()` and `name()` read
    them back.
  - `template_segment(template_str, line, col)` draws the lines around a
    position, numbered, with a `^` marker line under the given line.
- `hbtemplate.jsonvalue`
  - `render_json(value)`: `None` renders empty, booleans as `true`/`false`,
    lists as `[1, 2, 3]`, objects as `[object]`.
  - `is_truthy(value, include_zero)`: empty strings, lists and objects,
    `None`, `False` and NaN are false; zero is false unless `include_zero`.
  - `as_string(value)`: the value if it is a string, otherwise `None`.
  - `ScopedJson` (built with `constant`, `derived`, `context`, `missing`;
    kinds in `ScopedKind`) and `PathAndJson`, which pairs a value with the
    relative path it was referenced by.
- `hbtemplate.path`
  - `Path.parse(raw)` reads paths such as `a.[0]/b`, `./addr/country`,
    `../x`, `@root/a` or `@../index`; an unparseable path raises
    `RenderError` with `INVALID_JSON_PATH`. `this` segments are dropped.
    `is_local()` tells a local variable (`@index`, `@../key`) from a data
    path, and `segs()` returns a data path's segments.
  - `Path.current()`, `Path.with_named_paths(names)`,
    `parse_path_segments(raw)`, `SegmentRule` (`ROOT`, `LOCAL`, `UP`) and
    `merge_json_path(path_stack, relative_path)`, which appends the named
    segments to a list.
- `hbtemplate.block`
  - `BlockContext` holds a block scope: `base_path`, an optional base value
    (`set_base_value`), `@`-variables (`set_local_var`, `get_local_var`),
    inline partials (`set_local_partial`, `get_local_partial`) and block
    parameters (`set_block_params`, `set_block_param`, `get_block_param`).
  - `BlockParams` (`add_path`, `add_value`, `get`) and `BlockParamHolder`
    (`of_value`, `of_path`).
- `hbtemplate.context`
  - `Context.wraps(data)` converts dicts, lists, tuples, dataclasses and
    scalars into JSON values, raising `RenderError` (`SERDE_ERROR`) for data
    it cannot convert; `Context.null()` wraps `None`.
  - `Context.navigate(segments, block_contexts)` resolves a path against a
    stack of block scopes (innermost first), honouring block parameters,
    `../` and `@root`, and returns a `ScopedJson` (missing when not found).
    Indexing an array with a non-numeric key raises `RenderError`
    (`INVALID_JSON_INDEX`).
  - `merge_json(base, addition)` adds keys onto a value, turning arrays and
    strings into objects keyed by position.
- `hbtemplate.extras`
  - `compare_json(x, y)` returns -1, 0, 1 or `None`; numbers compare with
    numbers and with strings holding a number, strings with strings, booleans
    with booleans.
  - `eq`, `ne`, `gt`, `gte`, `lt`, `lte`, `negate`, `length` (bytes of a
    string, items of a list or object, 0 otherwise), `all_truthy`,
    `any_truthy`.
  - `log_params(params, level="info")` logs `PathAndJson` parameters through
    the `hbtemplate.extras` logger at `error`, `warn`, `info`, `debug` or
    `trace`, returns the message, and raises `RenderError`
    (`INVALID_LOGGING_LEVEL`) for any other level.
- `hbtemplate.cases`
  - `lower_camel_case`, `upper_camel_case`, `snake_case`, `kebab_case`,
    `shouty_snake_case`, `shouty_kebab_case`, `title_case`, `train_case`.
  - `apply_case(helper_name, value)` runs one of them by its template name
    (`snakeCase`, `lowerCamelCase`, ...), raising `RenderError` for an unknown
    name or a value that is not a string.

## Example

```python
from hbtemplate.context import Context
from hbtemplate.path import Path
from hbtemplate.extras import gt
from hbtemplate.cases import snake_case

ctx = Context.wraps({"addr": {"country": "China"}, "titles": ["programmer"]})
print(ctx.navigate(Path.parse("addr.[country]").segs(), []).render())  # China
print(ctx.navigate(Path.parse("titles.[0]").segs(), []).render())      # programmer

print(gt(53, "35"))              # True
print(snake_case("snake-case"))  # snake_case
```

## What it does not do

This package has no template parser or compiler, no registry of templates,
helpers or partials, and no renderer that turns a template string and data
into output. It has no command-line tool either. It supplies the pieces such
an engine is built from: values, paths, scopes, navigation, errors and the
helper functions above.

## Running the tests

```
pip install -e ".[test]"
pytest
```