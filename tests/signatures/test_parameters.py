"""Tests for parameter rendering."""

import pytest

from sigtree.signatures.parameters import (
    is_identifier,
    matching_close,
    render_parameter_list,
    render_parameter_text,
    split_top_level,
)
from sigtree.signatures.structural import StructuralStrategy
from sigtree.types import ExtractionMode


def structural_params(source):
    """Render the parameters of the single function declared in source."""
    signatures = StructuralStrategy().extract(source, ExtractionMode.ALL)
    assert signatures is not None and len(signatures) == 1
    return signatures[0].params


class TestTextRendering:
    """Rendering of parameters given as raw source text."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a", "a"),
            ("  $el  ", "$el"),
            ("name = 'x'", "name = ..."),
            ("opts = { a: 1, b: [2, 3] }", "opts = ..."),
            ("...args", "...args"),
            ("...[a, b]", "...[...]"),
            ("{ a, b }", "{a, b}"),
            ("{ a: renamed, b = 2 }", "{a, b}"),
            ("{ 'quoted': x, [computed]: y }", "{?, ?}"),
            ("{}", "{...}"),
            ("{ a } = {}", "{a} = ..."),
            ("[first, second]", "[...]"),
            ("[a] = []", "[...] = ..."),
            ("123", "?"),
        ],
    )
    def test_render_parameter_text(self, text, expected):
        assert render_parameter_text(text) == expected

    def test_render_parameter_list(self):
        assert render_parameter_list("urls, { retries = 3 } = {}") == ["urls", "{retries} = ..."]
        assert render_parameter_list("  ") == []

    def test_split_ignores_separators_in_strings(self):
        assert split_top_level("a = ',', b") == ["a = ','", " b"]
        assert split_top_level("a = f(1, [2, 3]), b") == ["a = f(1, [2, 3])", " b"]


class TestNodeRendering:
    """Rendering of parameters taken from a syntax tree."""

    def test_plain_identifiers(self):
        assert structural_params("function f(a, b, c) {}") == ("a", "b", "c")

    def test_default_values(self):
        assert structural_params("function f(a = { x: [1, 2, 3] }, b = compute(1, 2)) {}") == ("a = ...", "b = ...")

    def test_rest_parameter(self):
        assert structural_params("function f(first, ...others) {}") == ("first", "...others")

    def test_object_pattern(self):
        assert structural_params("function f({ loud, times = 1, label: text }) {}") == ("{loud, times, label}",)

    def test_object_pattern_with_non_identifier_keys(self):
        assert structural_params("function f({ 'a': x, [k]: y, ...others }) {}") == ("{?, ?, ?}",)

    def test_empty_object_pattern(self):
        assert structural_params("function f({}) {}") == ("{...}",)

    def test_array_pattern(self):
        assert structural_params("function f([a, b], [c] = []) {}") == ("[...]", "[...] = ...")

    def test_object_pattern_with_default(self):
        assert structural_params("function f({ retries = 3 } = {}) {}") == ("{retries} = ...",)

    def test_single_bare_arrow_parameter(self):
        assert structural_params("const inc = n => n + 1;") == ("n",)

    def test_no_parameters(self):
        assert structural_params("const noop = () => {};") == ()


@pytest.mark.parametrize(
    "source",
    [
        "function f(a, b = 1, ...rest) {}",
        "function f({ a, b: c }, [d]) {}",
        "function f({ x } = {}, y) {}",
    ],
)
def test_strategies_render_alike(source):
    """Text rendering agrees with syntax tree rendering for the same parameter list."""
    text_params = source[source.index("(") + 1 : source.rindex(")")]
    assert tuple(render_parameter_list(text_params)) == structural_params(source)


@pytest.mark.parametrize("text,expected", [("foo", True), ("_x1", True), ("$", True), ("1a", False), ("a-b", False)])
def test_is_identifier(text, expected):
    assert is_identifier(text) is expected


@pytest.mark.parametrize(
    "text,open_index,expected",
    [
        ("f(a = g(1), b) {}", 1, 13),
        ("(x = ')', y) =>", 0, 11),
        ("([a, b], {c}) => 1", 0, 12),
        ("(a, b", 0, -1),
    ],
)
def test_matching_close(text, open_index, expected):
    assert matching_close(text, open_index) == expected
