"""Exclusion rules matching whole path segments."""

from typing import Iterable, List

from .base_rules import BaseExclusionRules


class SegmentExclusionRules(BaseExclusionRules):
    """Exclusion rules that match a path fragment against whole path segments.

    A rule matches a relative path when the path equals the rule, starts with the
    rule followed by ``/``, or contains the rule as one of its ``/``-delimited
    segments. A rule never matches part of a segment, so ``lib`` excludes
    ``lib/a.js`` and ``src/lib`` but not ``library``.

    Attributes:
        rules (List[str]): The configured path fragments, in insertion order.

    Example:
        >>> rules = SegmentExclusionRules(["node_modules", "src/generated"])
        >>> rules.exclude("packages/app/node_modules")
        True
        >>> rules.exclude("src/generated/api.js")
        True
        >>> rules.exclude("node_modules_backup")
        False
    """

    def __init__(self, rules: Iterable[str] = ()) -> None:
        """Initialize with an initial set of path fragments.

        Args:
            rules: Path fragments to exclude. Duplicates are harmless.
        """
        self.rules: List[str] = list(rules)

    def exclude(self, path: str) -> bool:
        segments = path.split("/")
        return any(path == rule or path.startswith(f"{rule}/") or rule in segments for rule in self.rules)
