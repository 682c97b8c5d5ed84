"""Directory maps annotated with function signatures.

This package renders a directory tree in which every JavaScript source file is
followed by the signatures of the functions and methods it declares, giving a
quick structural overview of a codebase.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("sigtree")
except PackageNotFoundError:
    __version__ = "unknown"
