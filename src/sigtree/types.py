from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class ExportKind(str, Enum):
    """How a declaration is exported from its module.

    Attributes:
        NONE: Not exported
        NAMED: Named export (``export function f``, ``export const f``, ``export { f }``)
        DEFAULT: Default export (``export default function``)
    """

    NONE = "none"
    NAMED = "named"
    DEFAULT = "default"


class ExtractionMode(str, Enum):
    """Which declarations signature extraction reports.

    Values:
        ALL: Every function, method and function-valued binding
        EXPORTED: Only declarations exported from the module (default behavior)
    """

    ALL = "all"
    EXPORTED = "exported"
