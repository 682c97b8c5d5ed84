"""Tests for strategy selection in signature extraction."""

from unittest.mock import Mock

import pytest

from sigtree.signatures.base_strategy import ExtractionStrategy
from sigtree.signatures.extractor import SignatureExtractor, extract_signatures
from sigtree.signatures.signature import Signature
from sigtree.signatures.structural import StructuralStrategy
from sigtree.signatures.textual import TextualStrategy
from sigtree.types import ExportKind, ExtractionMode


class FixedStrategy(ExtractionStrategy):
    def __init__(self, result):
        self.result = result
        self.calls = 0

    def extract(self, text, mode):
        self.calls += 1
        return self.result


class FailingStrategy(ExtractionStrategy):
    def extract(self, text, mode):
        raise RecursionError("too deep")


def test_default_strategies():
    extractor = SignatureExtractor()
    assert extractor.mode == ExtractionMode.EXPORTED
    assert [type(strategy) for strategy in extractor.strategies] == [StructuralStrategy, TextualStrategy]


@pytest.mark.parametrize("mode,expected", [("all", ExtractionMode.ALL), ("EXPORTED", ExtractionMode.EXPORTED)])
def test_mode_from_string(mode, expected):
    assert SignatureExtractor(mode).mode == expected


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid extraction mode"):
        SignatureExtractor("public")


def test_first_handling_strategy_wins():
    first = FixedStrategy(None)
    second = FixedStrategy([Signature("a")])
    third = FixedStrategy([Signature("b")])
    assert SignatureExtractor(strategies=[first, second, third]).extract("x") == [Signature("a")]
    assert (first.calls, second.calls, third.calls) == (1, 1, 0)


def test_empty_result_is_a_handled_result():
    fallback = FixedStrategy([Signature("never")])
    assert SignatureExtractor(strategies=[FixedStrategy([]), fallback]).extract("x") == []
    assert fallback.calls == 0


def test_failing_strategy_falls_through():
    fallback = FixedStrategy([Signature("ok")])
    assert SignatureExtractor(strategies=[FailingStrategy(), fallback]).extract("x") == [Signature("ok")]


def test_no_strategy_handles_text():
    assert SignatureExtractor(strategies=[FailingStrategy(), FixedStrategy(None)]).extract("x") == []


def test_mode_is_passed_to_strategies():
    strategy = Mock(spec=ExtractionStrategy)
    strategy.extract.return_value = []
    SignatureExtractor("all", strategies=[strategy]).extract("source")
    strategy.extract.assert_called_once_with("source", ExtractionMode.ALL)


def test_fallback_on_parse_failure():
    source = "export function add(a, b) {\n  return a +\n"
    assert extract_signatures(source) == [Signature("add", ("a", "b"), False, ExportKind.NAMED)]


def test_parse_failure_never_raises():
    for source in ["}}}{{{", "export default", "��\x00", "class { (", "export { a as }"]:
        assert isinstance(extract_signatures(source, "all"), list)


def test_default_parameter_rendering():
    assert [str(sig) for sig in extract_signatures("export function greet(name = 'world') {}")] == [
        "export greet(name = ...)"
    ]
