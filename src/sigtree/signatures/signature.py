"""Signature records produced by extraction."""

from dataclasses import dataclass
from typing import Tuple

from sigtree.types import ExportKind

ANONYMOUS_DEFAULT_NAME = "default"


@dataclass(frozen=True)
class Signature:
    """One callable declaration found in a source file.

    Attributes:
        name: Declared name, or ``"default"`` for an anonymous default export.
        params: Rendered formal parameters in declaration order.
        is_async: Whether the declaration itself carries the ``async`` marker.
        export_kind: How the declaration is exported.

    Example:
        >>> sig = Signature("add", ("a", "b"), export_kind=ExportKind.NAMED)
        >>> str(sig)
        'export add(a, b)'
        >>> str(Signature("default", (), is_async=True, export_kind=ExportKind.DEFAULT))
        'export default async function()'
    """

    name: str
    params: Tuple[str, ...] = ()
    is_async: bool = False
    export_kind: ExportKind = ExportKind.NONE

    def __str__(self) -> str:
        return format_signature(self)


def format_signature(signature: Signature) -> str:
    """Format a signature the way it is displayed under its file.

    Args:
        signature: The signature to format.

    Returns:
        ``[export [default] ][async ]name(params)``; an anonymous default export is
        shown as a bare ``function``.
    """
    prefix = ""
    name = signature.name
    if signature.export_kind == ExportKind.NAMED:
        prefix = "export "
    elif signature.export_kind == ExportKind.DEFAULT:
        prefix = "export default "
        if name == ANONYMOUS_DEFAULT_NAME:
            name = "function"
    if signature.is_async:
        prefix += "async "
    return f"{prefix}{name}({', '.join(signature.params)})"
