"""Text rendering of a code tree.

The layout is the familiar ``tree`` one: each entry is drawn under its parent
with a junction or corner glyph, directories carry a trailing slash, files carry
their line count, and each file's signatures hang beneath it one level deeper.
"""

from typing import Iterator

from sigtree.code_tree.nodes import CodeTreeNode, FileNode
from sigtree.signatures.signature import format_signature

VERTICAL = "│"
HORIZONTAL = "─"
JUNCTION = "├"
CORNER = "└"
SPACE = " "

UNREADABLE_MARKER = "(error reading file)"


def _entry_suffix(node: CodeTreeNode) -> str:
    if node.is_dir:
        return "/"
    if isinstance(node, FileNode) and node.is_readable:
        return f" ({node.line_count} lines)"
    return f" {UNREADABLE_MARKER}"


def _stream_children(node: CodeTreeNode, prefix: str) -> Iterator[str]:
    children = node.children
    for index, child in enumerate(children):
        is_last = index == len(children) - 1
        branch = CORNER if is_last else JUNCTION
        yield f"{prefix}{branch}{HORIZONTAL * 2} {child.name}{_entry_suffix(child)}"

        child_prefix = prefix + (SPACE * 3 if is_last else VERTICAL + SPACE * 2)
        if child.is_dir:
            yield from _stream_children(child, child_prefix)
        elif isinstance(child, FileNode):
            for signature_index, signature in enumerate(child.signatures):
                signature_branch = CORNER if signature_index == len(child.signatures) - 1 else JUNCTION
                yield f"{child_prefix}{signature_branch}{HORIZONTAL} {format_signature(signature)}"


def stream_tree_lines(root: CodeTreeNode) -> Iterator[str]:
    """Generate the rendered tree one line at a time, without line terminators.

    The first line is the banner with the root's name.

    Example:
        >>> from sigtree.code_tree.nodes import DirectoryNode, FileNode
        >>> from sigtree.signatures.signature import Signature
        >>> from sigtree.types import ExportKind
        >>> app = FileNode("app.js", "src/app.js", line_count=12,
        ...                signatures=[Signature("start", ("port",), export_kind=ExportKind.NAMED)])
        >>> root = DirectoryNode("project", children=[DirectoryNode("src", "src", children=[app]),
        ...                                           FileNode("README.md", "README.md", line_count=4)])
        >>> for line in stream_tree_lines(root):
        ...     print(line)
        project/
        ├── src/
        │  └── app.js (12 lines)
        │     └─ export start(port)
        └── README.md (4 lines)
    """
    yield f"{root.name}/"
    yield from _stream_children(root, "")


def render_tree(root: CodeTreeNode) -> str:
    """Render the complete tree as a single newline-joined string."""
    return "\n".join(stream_tree_lines(root))
