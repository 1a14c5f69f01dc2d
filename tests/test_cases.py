import pytest

from hbtemplate.cases import (
    apply_case,
    kebab_case,
    lower_camel_case,
    shouty_kebab_case,
    shouty_snake_case,
    snake_case,
    title_case,
    train_case,
    upper_camel_case,
)
from hbtemplate.errors import RenderError, RenderErrorReason


@pytest.mark.parametrize(
    "helper, text, expected",
    [
        ("lowerCamelCase", "lower camel case", "lowerCamelCase"),
        ("lowerCamelCase", "lower-camel-case", "lowerCamelCase"),
        ("lowerCamelCase", "lower_camel_case", "lowerCamelCase"),
        ("upperCamelCase", "upper camel case", "UpperCamelCase"),
        ("upperCamelCase", "upper-camel-case", "UpperCamelCase"),
        ("upperCamelCase", "upper_camel_case", "UpperCamelCase"),
        ("snakeCase", "snake case", "snake_case"),
        ("snakeCase", "snake-case", "snake_case"),
        ("kebabCase", "kebab case", "kebab-case"),
        ("kebabCase", "kebab_case", "kebab-case"),
        ("shoutySnakeCase", "shouty snake case", "SHOUTY_SNAKE_CASE"),
        ("shoutySnakeCase", "shouty snake-case", "SHOUTY_SNAKE_CASE"),
        ("shoutyKebabCase", "shouty kebab case", "SHOUTY-KEBAB-CASE"),
        ("shoutyKebabCase", "shouty_kebab_case", "SHOUTY-KEBAB-CASE"),
        ("titleCase", "title case", "Title Case"),
        ("trainCase", "train case", "Train-Case"),
    ],
)
def test_case_helpers(helper, text, expected):
    assert apply_case(helper, text) == expected


def test_invalid_input():
    with pytest.raises(RenderError) as info:
        apply_case("snakeCase", 1)
    assert info.value.reason is RenderErrorReason.PARAM_TYPE_MISMATCH_FOR_NAME
    assert info.value.details == ("snake_case", "0", "string")


def test_unknown_helper():
    with pytest.raises(RenderError) as info:
        apply_case("nopeCase", "x")
    assert info.value.reason is RenderErrorReason.HELPER_NOT_FOUND


def test_camel_case_boundaries():
    assert snake_case("XMLHttpRequest") == "xml_http_request"
    assert kebab_case("fooBar") == "foo-bar"
    assert upper_camel_case("foo_bar") == "FooBar"


def test_direct_functions():
    assert lower_camel_case("Hello World") == "helloWorld"
    assert shouty_snake_case("helloWorld") == "HELLO_WORLD"
    assert shouty_kebab_case("hello world") == "HELLO-WORLD"
    assert title_case("hello_world") == "Hello World"
    assert train_case("helloWorld") == "Hello-World"


def test_empty_and_separator_only():
    assert snake_case("") == ""
    assert kebab_case("--__  ") == ""