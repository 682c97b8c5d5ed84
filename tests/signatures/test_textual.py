"""Tests for regular expression signature extraction."""

import pytest

from sigtree.signatures.signature import Signature
from sigtree.signatures.textual import TextualStrategy
from sigtree.types import ExportKind, ExtractionMode


@pytest.fixture
def strategy():
    return TextualStrategy()


def render(signatures):
    return [str(signature) for signature in signatures]


def test_exported_function_in_broken_text(strategy):
    source = "export async function fetchAll(urls, { retries = 3 } = {}) {\n  return await\n"
    assert strategy.extract(source, ExtractionMode.EXPORTED) == [
        Signature("fetchAll", ("urls", "{retries} = ..."), True, ExportKind.NAMED)
    ]


def test_anonymous_default_export(strategy):
    assert strategy.extract("export default async function (a) {", ExtractionMode.EXPORTED) == [
        Signature("default", ("a",), True, ExportKind.DEFAULT)
    ]


def test_anonymous_function_without_export_is_skipped(strategy):
    assert strategy.extract("(function () {", ExtractionMode.ALL) == []


def test_bindings(strategy):
    source = "export const inc = n => n + 1;\nlet dec = async (n) => n - 1;\nvar id = function* (x) {\n"
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["export inc(n)", "async dec(n)", "id(x)"]
    assert render(strategy.extract(source, ExtractionMode.EXPORTED)) == ["export inc(n)"]


def test_results_in_source_order(strategy):
    source = "const z = (q) => q;\nfunction y() {}\n{"
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["z(q)", "y()"]


def test_function_expressions_in_calls_are_skipped(strategy):
    assert strategy.extract("setTimeout(function tick() {}, 10); (", ExtractionMode.ALL) == []


def test_statement_after_semicolon(strategy):
    source = "let x = 1; function after(a) {} ("
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["after(a)"]


def test_export_list_resolution(strategy):
    source = """function alpha(a) {}
const beta = async (b) => b;
export { alpha, beta as gamma, missing };
oops(
"""
    assert strategy.extract(source, ExtractionMode.EXPORTED) == [
        Signature("alpha", ("a",), False, ExportKind.NAMED),
        Signature("beta", ("b",), True, ExportKind.NAMED),
    ]


def test_export_list_uses_first_declaration(strategy):
    source = "function dup(a) {}\nfunction dup(b, c) {}\nexport { dup }\n("
    assert render(strategy.extract(source, ExtractionMode.EXPORTED)) == ["export dup(a)"]


def test_export_list_ignored_in_all_mode(strategy):
    source = "function alpha(a) {}\nexport { alpha };\n("
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["alpha(a)"]


def test_never_returns_none(strategy):
    assert strategy.extract("\x00\x01 garbage ((( {{{", ExtractionMode.ALL) == []


def test_parameter_list_with_nested_parentheses(strategy):
    assert render(strategy.extract("function f(a = g(1), b) {} (", ExtractionMode.ALL)) == ["f(a = ..., b)"]


def test_arrow_parameters_with_nested_brackets(strategy):
    source = "const h = (x = [1, 2], { y } = make(3)) => x; ("
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["h(x = ..., {y} = ...)"]


def test_parenthesized_initializer_is_not_a_function(strategy):
    assert strategy.extract("const total = (a + b) * 2;\n(", ExtractionMode.ALL) == []


def test_unclosed_parameter_list_is_skipped(strategy):
    assert strategy.extract("function cut(a, b", ExtractionMode.ALL) == []


def test_declaration_after_block_comment(strategy):
    assert render(strategy.extract("/* c */ function f(a) {} (", ExtractionMode.ALL)) == ["f(a)"]
    assert render(strategy.extract("/** docs */export const g = () => 1; (", ExtractionMode.EXPORTED)) == [
        "export g()"
    ]
