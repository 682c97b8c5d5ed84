"""Exclusion rules written in .gitignore syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from sigtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Extra exclusions given on the command line as gitignore patterns.

    Patterns come from ignore files (``-e .gitignore``) and from single patterns
    (``-i "*.test.js"``), kept in the order they were given so that a later negation
    (``!keep.min.js``) can re-include what an earlier pattern hid. Matching is done by
    pathspec's implementation of Git's wildmatch rules.

    Attributes:
        patterns (List[GitWildMatchPattern]): Compiled patterns in the order given.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.min.js")
        >>> rules.add_rule("!vendor.min.js")
        >>> rules.exclude("dist/app.min.js"), rules.exclude("vendor.min.js")
        (True, False)
        >>> rules.add_rule("coverage/")
        >>> rules.exclude("coverage/"), rules.exclude("coverage")
        (True, False)

    Note:
        Directories must be checked with a trailing slash for directory-only patterns
        such as ``coverage/`` to apply to them.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Create the rule set, optionally loading ignore files.

        Args:
            rules_files: An ignore file or a sequence of ignore files.

        Raises:
            FileNotFoundError: If an ignore file does not exist.
        """
        self.patterns: List[GitWildMatchPattern] = []
        self._spec = PathSpec(self.patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self._spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more ignore files.

        Blank lines and comments are skipped as Git skips them.

        Raises:
            FileNotFoundError: If an ignore file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            for line in path.read_text(encoding="utf-8").splitlines():
                self.add_rule(line)

    def add_rule(self, rule: str) -> None:
        pattern = GitWildMatchPattern(rule)
        # Blank lines and comments compile to patterns that match nothing
        if pattern.include is not None:
            self.patterns.append(pattern)
            self._spec = PathSpec(self.patterns)

    def has_rules(self) -> bool:
        return bool(self.patterns)
