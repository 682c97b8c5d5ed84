from abc import ABC, abstractmethod
from typing import Sequence, Union

from sigtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Common interface of the predicates that hide entries from a scan.

    A rule set answers one question: given a path relative to the scan root, with
    forward slashes, should the entry be left out of the map? Rule sets built from the
    scan configuration match path segments or file names; rule sets built from the
    command line match gitignore patterns. Growing a rule set after construction is
    optional, and the default implementations of ``load_rules`` and ``add_rule``
    refuse.

    Example:
        >>> from sigtree.exclusion_rules.file_name_rules import FileNameExclusionRules
        >>> rules = FileNameExclusionRules(["yarn.lock"])
        >>> rules.exclude("packages/web/yarn.lock")
        True
        >>> rules.load_rules("rules.txt")
        Traceback (most recent call last):
        ...
        NotImplementedError: FileNameExclusionRules cannot load rules from files.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Decide whether an entry is hidden.

        Args:
            path (str): Path of the entry relative to the scan root, using forward
                slashes. Directories may be given with a trailing slash.

        Returns:
            bool: True to hide the entry.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Extend the rule set from one or more rule files.

        Args:
            rules_files: A rule file or a sequence of rule files.

        Raises:
            NotImplementedError: If this rule set has no file format.
        """
        raise NotImplementedError(f"{self.__class__.__name__} cannot load rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Extend the rule set with one rule.

        Args:
            rule (str): A rule in the format of this rule set.

        Raises:
            NotImplementedError: If this rule set is fixed at construction.
        """
        raise NotImplementedError(f"{self.__class__.__name__} cannot be extended with single rules.")
