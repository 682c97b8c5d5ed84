"""Visibility decisions for entries of a directory scan."""

import posixpath
from typing import Optional

from sigtree.config import Config
from sigtree.exclusion_rules.base_rules import BaseExclusionRules
from sigtree.exclusion_rules.file_name_rules import FileNameExclusionRules
from sigtree.exclusion_rules.segment_rules import SegmentExclusionRules

HIDDEN_PREFIX = "."


class PathFilter:
    """Decide whether directories and files of a scan are visible.

    Built once per scan from the resolved :class:`~sigtree.config.Config`. Excluded
    paths from the configuration are matched as whole path segments and apply to
    directories; excluded file names apply to the base name of files. Optional extra
    rules (gitignore-style patterns from the command line) apply to both.

    Hidden entries, whose name starts with a dot, are always excluded.

    Attributes:
        config (Config): The configuration this filter was built from.
        path_rules (SegmentExclusionRules): Rules derived from ``config.exclude_paths``.
        file_rules (FileNameExclusionRules): Rules derived from ``config.exclude_files``.
        extra_rules (Optional[BaseExclusionRules]): Additional rules, if any.

    Example:
        >>> from sigtree.config import parse_config
        >>> path_filter = PathFilter(parse_config({"excludePaths": ["lib"]}))
        >>> path_filter.is_path_excluded("packages/lib")
        True
        >>> path_filter.is_path_excluded("library")
        False
        >>> path_filter.is_file_excluded("web/package-lock.json")
        True
    """

    def __init__(self, config: Config, extra_rules: Optional[BaseExclusionRules] = None) -> None:
        self.config = config
        self.path_rules = SegmentExclusionRules(config.exclude_paths)
        self.file_rules = FileNameExclusionRules(config.exclude_files)
        self.extra_rules = extra_rules

    @staticmethod
    def is_hidden(name: str) -> bool:
        return name.startswith(HIDDEN_PREFIX)

    def is_path_excluded(self, relative_path: str) -> bool:
        """Check whether a directory is excluded.

        Args:
            relative_path: Directory path relative to the scan root, with forward slashes.

        Returns:
            True if an excluded-path rule matches the path or one of its segments, or an
            extra rule matches the directory.
        """
        if self.path_rules.exclude(relative_path):
            return True
        return self.extra_rules is not None and self.extra_rules.exclude(relative_path.rstrip("/") + "/")

    def is_file_excluded(self, path: str) -> bool:
        """Check whether a file is excluded.

        Args:
            path: File path relative to the scan root, with forward slashes.

        Returns:
            True if the file's base name is an excluded file name, or an extra rule
            matches the path.
        """
        if self.file_rules.exclude(posixpath.basename(path)):
            return True
        return self.extra_rules is not None and self.extra_rules.exclude(path)
