"""Signature-annotated tree representation of a directory.

This module provides the main CodeTree class, which walks a scan root, applies the
scan configuration's exclusion rules and depth limit, extracts signatures from the
source files it meets, and renders the result.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Set, Union

from sigtree.code_tree.file_identifier import FileIdentifier
from sigtree.code_tree.nodes import CodeTreeNode, DirectoryNode, FileNode
from sigtree.code_tree.renderer import stream_tree_lines
from sigtree.config import Config, load_config
from sigtree.exclusion_rules.base_rules import BaseExclusionRules
from sigtree.path_filter import PathFilter
from sigtree.signatures.extractor import SignatureExtractor
from sigtree.types import ExtractionMode, PathType


class CodeTree:
    """A tree of a directory structure annotated with function signatures.

    The tree is built lazily on first access by a single top-down walk:

    1. a directory deeper than ``max_depth`` is listed by its parent but not expanded;
    2. hidden entries, excluded directories and excluded files are skipped;
    3. subdirectories come first, then files, each group sorted by name;
    4. every file is read to count its lines, and files with an included extension
       get their signatures extracted.

    Problems with individual entries never stop the walk: a file that cannot be read
    is listed with no line count and no signatures, and a directory that cannot be
    listed is shown without children. Directory symlinks are followed, except that a
    symlink leading back to a directory on the current branch is not expanded.

    Attributes:
        root_path (Path): The root directory of the scan.
        config (Config): The resolved scan configuration.
        max_depth (Optional[int]): Deepest directory level that is expanded, or None for no limit.
        show_signatures (bool): Whether signatures are extracted at all.
        mode (ExtractionMode): Whether all declarations or only exported ones are reported.

    Example:
        >>> tree = CodeTree("src", max_depth=1)  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        ├── lib/
        │  └── math.js (20 lines)
        │     └─ export add(a, b)
        └── index.js (5 lines)
    """

    def __init__(
        self,
        root_path: PathType,
        config: Optional[Config] = None,
        *,
        max_depth: Optional[int] = None,
        show_signatures: bool = True,
        mode: Union[str, ExtractionMode] = ExtractionMode.EXPORTED,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a CodeTree.

        Args:
            root_path: Path to the root directory to scan.
            config: Resolved configuration. Defaults to the configuration file found at
                the root, or the built-in defaults.
            max_depth: Deepest directory level to expand; direct children of the root
                are at level 0. None means no limit.
            show_signatures: Whether to extract signatures from source files.
            mode: Whether to report all declarations or only exported ones.
            exclusion_rules: Additional rules (e.g. gitignore patterns) applied to both
                files and directories.

        Raises:
            ValueError: If max_depth is negative or mode is invalid.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        self.root_path = Path(root_path)
        self.config = config if config is not None else load_config(self.root_path)
        self.max_depth = max_depth
        self.show_signatures = show_signatures
        self._extractor = SignatureExtractor(mode)
        self.mode = self._extractor.mode
        self._path_filter = PathFilter(self.config, exclusion_rules)
        self._tree: Optional[DirectoryNode] = None

    def get_tree(self) -> DirectoryNode:
        """Get the root node of the tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        visited: Set[FileIdentifier] = set()
        root_id = FileIdentifier.for_path(self.root_path)
        if root_id is not None:
            visited.add(root_id)

        children = self._build_children(self.root_path, "", 0, visited)
        self._tree = DirectoryNode(self.root_path.resolve().name, "", 0, children=children)

    def _build_children(
        self, path: Path, relative_path: str, depth: int, visited: Set[FileIdentifier]
    ) -> List[CodeTreeNode]:
        """List the visible children of a directory, recursing into subdirectories."""
        if self.max_depth is not None and depth > self.max_depth:
            return []
        if depth > 0 and self._path_filter.is_path_excluded(relative_path):
            return []

        try:
            entries = os.listdir(path)
        except OSError:
            return []

        dir_names = []
        file_names = []
        for name in entries:
            if self._path_filter.is_hidden(name):
                continue
            entry_relative_path = f"{relative_path}/{name}" if relative_path else name
            if os.path.isdir(path / name):
                if not self._path_filter.is_path_excluded(entry_relative_path):
                    dir_names.append(name)
            elif not self._path_filter.is_file_excluded(entry_relative_path):
                file_names.append(name)

        nodes: List[CodeTreeNode] = []
        for name in sorted(dir_names):
            nodes.append(self._create_directory_node(path / name, relative_path, name, depth, visited))
        for name in sorted(file_names):
            entry_relative_path = f"{relative_path}/{name}" if relative_path else name
            nodes.append(self._create_file_node(path / name, entry_relative_path, depth))
        return nodes

    def _create_directory_node(
        self, path: Path, parent_relative_path: str, name: str, depth: int, visited: Set[FileIdentifier]
    ) -> DirectoryNode:
        relative_path = f"{parent_relative_path}/{name}" if parent_relative_path else name
        file_id = FileIdentifier.for_path(path)

        # A directory already on the current branch is a symlink loop
        if file_id is not None and file_id in visited:
            return DirectoryNode(name, relative_path, depth)

        if file_id is not None:
            visited.add(file_id)
        try:
            children = self._build_children(path, relative_path, depth + 1, visited)
        finally:
            if file_id is not None:
                visited.discard(file_id)
        return DirectoryNode(name, relative_path, depth, children=children)

    def _create_file_node(self, path: Path, relative_path: str, depth: int) -> FileNode:
        try:
            text = path.read_bytes().decode("utf-8", errors="replace")
        except OSError:
            return FileNode(path.name, relative_path, depth)

        signatures = []
        if self.show_signatures and self.config.wants_signatures(path):
            signatures = self._extractor.extract(text)
        return FileNode(path.name, relative_path, depth, line_count=text.count("\n") + 1, signatures=signatures)

    def _iter_nodes(self) -> Iterator[CodeTreeNode]:
        stack: List[CodeTreeNode] = list(self.get_tree().children)
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children)

    def _iter_files(self) -> Iterator[FileNode]:
        return (node for node in self._iter_nodes() if isinstance(node, FileNode))

    def get_directory_count(self) -> int:
        """Get the number of directories listed in the tree (excluding root)."""
        return sum(1 for node in self._iter_nodes() if node.is_dir)

    def get_file_count(self) -> int:
        """Get the number of files listed in the tree."""
        return sum(1 for _ in self._iter_files())

    def get_line_count(self) -> int:
        """Get the total number of lines over all readable files."""
        return sum(node.line_count for node in self._iter_files() if node.line_count is not None)

    def get_signature_count(self) -> int:
        """Get the total number of signatures over all files."""
        return sum(len(node.signatures) for node in self._iter_files())

    def get_unreadable_count(self) -> int:
        """Get the number of files that could not be read."""
        return sum(1 for node in self._iter_files() if not node.is_readable)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the rendered tree one line at a time.

        Yields:
            The banner line with the root's name, then one line per entry and per
            signature, without line terminators.
        """
        yield from stream_tree_lines(self.get_tree())

    def get_tree_representation(self) -> str:
        """Get the complete rendered tree as a string."""
        return "\n".join(self.stream_tree_representation())
