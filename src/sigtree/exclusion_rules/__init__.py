"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .file_name_rules import FileNameExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .segment_rules import SegmentExclusionRules

__all__ = [
    "BaseExclusionRules",
    "FileNameExclusionRules",
    "GitIgnoreExclusionRules",
    "SegmentExclusionRules",
]
