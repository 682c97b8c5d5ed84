"""Directory traversal and rendering of signature-annotated trees.

This package builds the filtered, depth-bounded tree of a scan root and renders it
as indented text in which every file is followed by its signatures.
"""

from .code_tree import CodeTree
from .nodes import CodeTreeNode, DirectoryNode, FileNode
from .renderer import render_tree, stream_tree_lines

__all__ = ["CodeTree", "CodeTreeNode", "DirectoryNode", "FileNode", "render_tree", "stream_tree_lines"]
