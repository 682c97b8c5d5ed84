"""Tests for file-name exclusion rules."""

import pytest

from sigtree.exclusion_rules.file_name_rules import FileNameExclusionRules


@pytest.mark.parametrize(
    "path,expected",
    [
        ("package-lock.json", True),
        ("apps/web/package-lock.json", True),
        ("package.json", False),
        ("package-lock.json.bak", False),
        ("package-lock.json/", True),
    ],
)
def test_basename_matching(path, expected):
    assert FileNameExclusionRules(["package-lock.json"]).exclude(path) is expected


def test_rules_are_fixed_at_construction():
    with pytest.raises(NotImplementedError):
        FileNameExclusionRules().add_rule("yarn.lock")


def test_load_rules_not_supported():
    with pytest.raises(NotImplementedError):
        FileNameExclusionRules().load_rules(["a.txt", "b.txt"])
