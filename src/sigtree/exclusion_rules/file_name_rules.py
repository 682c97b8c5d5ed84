"""Exclusion rules matching file base names."""

import posixpath
from typing import Iterable, List

from .base_rules import BaseExclusionRules


class FileNameExclusionRules(BaseExclusionRules):
    """Exclusion rules that match the base name of a path exactly.

    Attributes:
        names (List[str]): File names to exclude.

    Example:
        >>> rules = FileNameExclusionRules(["package-lock.json"])
        >>> rules.exclude("apps/web/package-lock.json")
        True
        >>> rules.exclude("package.json")
        False
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.names: List[str] = list(names)

    def exclude(self, path: str) -> bool:
        return posixpath.basename(path.rstrip("/")) in self.names
