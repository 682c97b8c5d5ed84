"""Tests for syntax tree signature extraction."""

import pytest

from sigtree.signatures.signature import Signature
from sigtree.signatures.structural import StructuralStrategy
from sigtree.types import ExportKind, ExtractionMode


@pytest.fixture(scope="module")
def strategy():
    return StructuralStrategy()


def render(signatures):
    return [str(signature) for signature in signatures]


def test_exported_function(strategy):
    assert strategy.extract("export function add(a, b) { return a + b; }", ExtractionMode.EXPORTED) == [
        Signature("add", ("a", "b"), False, ExportKind.NAMED)
    ]


def test_anonymous_async_default_export(strategy):
    assert strategy.extract("export default async function () {}", ExtractionMode.EXPORTED) == [
        Signature("default", (), True, ExportKind.DEFAULT)
    ]


def test_named_default_export(strategy):
    assert render(strategy.extract("export default function main(argv) {}\n", ExtractionMode.EXPORTED)) == [
        "export default main(argv)"
    ]


def test_default_exported_arrow(strategy):
    assert strategy.extract("export default (a, [b, c]) => a;", ExtractionMode.EXPORTED) == [
        Signature("default", ("a", "[...]"), False, ExportKind.DEFAULT)
    ]


def test_unexported_declarations_skipped_in_exported_mode(strategy):
    source = "function hidden() {}\nconst alsoHidden = () => 1;\n"
    assert strategy.extract(source, ExtractionMode.EXPORTED) == []


def test_variable_bindings(strategy):
    source = "const a = () => {};\nlet b = function (x, y) {};\nvar c = async z => z;\nconst d = 42;\n"
    assert render(strategy.extract(source, ExtractionMode.ALL)) == ["a()", "b(x, y)", "async c(z)"]


def test_exported_variable_bindings(strategy):
    source = "export const trim = (s) => s.trim();\nexport let pick = async function ({ id }) {};\n"
    assert render(strategy.extract(source, ExtractionMode.EXPORTED)) == ["export trim(s)", "export async pick({id})"]


def test_class_methods_in_all_mode(strategy):
    source = """
class Greeter {
  constructor(name) { this.name = name; }
  async greet({ loud, times = 1 }, ...rest) {}
  static 'quoted key'() {}
}
"""
    assert render(strategy.extract(source, ExtractionMode.ALL)) == [
        "constructor(name)",
        "async greet({loud, times}, ...rest)",
        "quoted key()",
    ]


def test_class_methods_hidden_in_exported_mode(strategy):
    source = "export class Greeter {\n  greet(name) {}\n}\n"
    assert strategy.extract(source, ExtractionMode.EXPORTED) == []


def test_object_literal_methods_are_not_reported(strategy):
    source = "const api = {\n  load(url) {},\n  post(url, body) {},\n};\n"
    assert strategy.extract(source, ExtractionMode.ALL) == []


def test_source_order(strategy):
    source = """
function first() {}
export const second = () => {};
class Third { fourth() {} }
export function fifth() { function nested() {} }
"""
    assert render(strategy.extract(source, ExtractionMode.ALL)) == [
        "first()",
        "export second()",
        "fourth()",
        "export fifth()",
        "nested()",
    ]


def test_nested_declarations_are_not_exported(strategy):
    source = "export function outer() {\n  function inner(x) {}\n}\n"
    assert render(strategy.extract(source, ExtractionMode.EXPORTED)) == ["export outer()"]


def test_generator_declaration(strategy):
    assert render(strategy.extract("export function* ids(start) {}", ExtractionMode.EXPORTED)) == ["export ids(start)"]


def test_jsx_is_understood(strategy):
    source = "export const App = ({ title }) => <h1>{title}</h1>;\n"
    assert render(strategy.extract(source, ExtractionMode.EXPORTED)) == ["export App({title})"]


@pytest.mark.parametrize(
    "source",
    [
        "function broken( {",
        "export function add(a, b) { return a +",
        "const = () => {};",
    ],
)
def test_syntax_error_rejects_whole_text(strategy, source):
    assert strategy.extract(source, ExtractionMode.ALL) is None


def test_empty_text(strategy):
    assert strategy.extract("", ExtractionMode.ALL) == []
