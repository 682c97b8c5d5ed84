"""Node representation for directories and files in the code tree."""

from typing import Any, Iterable, Optional, Sequence

from anytree import Node

from sigtree.signatures.signature import Signature


class CodeTreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the code tree.

    Extends anytree.Node with the entry's position in the scan. Nodes are built
    bottom-up: a directory node receives its children at construction and the tree
    is not modified afterwards.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        relative_path (str): Path relative to the scan root, with forward slashes.
        level (int): Scan level of the entry; direct children of the root are at level 0.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[CodeTreeNode]): The child nodes (inherited from anytree.Node).
    """

    is_dir = False

    def __init__(
        self,
        name: str,
        relative_path: str = "",
        level: int = 0,
        children: Optional[Iterable["CodeTreeNode"]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, children=children, **kwargs)
        self.relative_path = relative_path
        self.level = level


class DirectoryNode(CodeTreeNode):
    """A directory; its children are its subdirectories followed by its files.

    Example:
        >>> leaf = FileNode("index.js", "src/index.js", line_count=3)
        >>> src = DirectoryNode("src", "src", children=[leaf])
        >>> [child.name for child in src.children]
        ['index.js']
        >>> leaf.parent.name
        'src'
    """

    is_dir = True


class FileNode(CodeTreeNode):
    """A file with its line count and extracted signatures.

    Attributes:
        line_count (Optional[int]): Number of lines, or None if the file could not be read.
        signatures (tuple[Signature]): Signatures in source order.

    Example:
        >>> node = FileNode("broken.js", "broken.js")
        >>> node.is_readable
        False
    """

    def __init__(
        self,
        name: str,
        relative_path: str = "",
        level: int = 0,
        line_count: Optional[int] = None,
        signatures: Sequence[Signature] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(name, relative_path, level, **kwargs)
        self.line_count = line_count
        self.signatures = tuple(signatures)

    @property
    def is_readable(self) -> bool:
        return self.line_count is not None
