"""Command-line argument parsing for sigtree.

This module defines the command-line interface for sigtree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from sigtree import __version__
from sigtree.config import CONFIG_FILE_NAME
from sigtree.exclusion_rules.base_rules import BaseExclusionRules

UNLIMITED_DEPTH = ("unlimited", "infinity", "inf")


def parse_depth(value: str) -> Optional[int]:
    """Parse a --depth value.

    Args:
        value: A non-negative integer, or "unlimited".

    Returns:
        The depth, or None for no limit.

    Raises:
        argparse.ArgumentTypeError: If the value is neither.

    Example:
        >>> parse_depth("2"), parse_depth("unlimited")
        (2, None)
    """
    if value.strip().lower() in UNLIMITED_DEPTH:
        return None
    try:
        depth = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Depth must be a number, got '{value}'")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"Depth must be non-negative, got {depth}")
    return depth


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The action updates the provided exclusion rules object as arguments are
    processed, preserving the order in which -e and -i options appear on the command
    line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with sigtree's options.
    """
    description = f"""
    sigtree: a directory map annotated with function signatures.

    Prints the tree of a directory in which every JavaScript source file is followed
    by the signatures of the functions it declares: by default the exported ones, or
    every function, method and function-valued binding with --all-methods.

    Configuration:
    A {CONFIG_FILE_NAME} file at the root of the scanned directory can extend the
    built-in exclusions and choose the extensions whose signatures are shown:

      {{
        "excludePaths": ["dist", "coverage"],
        "excludeFiles": ["bundle.js"],
        "includeExtensions": [".js", ".mjs", ".cjs", ".json"]
      }}

    Excluded paths match whole path segments: "lib" hides "lib" and "src/lib" but not
    "library". Hidden files and directories are never shown.
    """

    epilog = """
    Examples:
      # Map the current directory, exported functions only
      sigtree

      # Map a project, two directory levels deep
      sigtree /path/to/project --depth 1

      # Show every declaration, including class methods
      sigtree /path/to/project --all-methods

      # Directory structure only
      sigtree /path/to/project --no-methods

      # Additional gitignore-style exclusions
      sigtree -e .gitignore -i "*.test.js" /path/to/project

      # Describe the scan settings above the tree
      sigtree --header -d 2 /path/to/project

      # Save to a file and print counts to stderr
      sigtree -o map.txt -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="sigtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"sigtree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory to scan (default: current working directory).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=parse_depth,
        default=None,
        metavar="N",
        help="Maximum directory depth to scan; 0 lists the top level only (default: unlimited).",
    )
    parser.add_argument(
        "--no-methods",
        action="store_true",
        help="Don't show signatures under files.",
    )
    parser.add_argument(
        "--all-methods",
        action="store_true",
        help="Show all functions and methods (default: only exported ones).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude files and directories (can be specified "
            "multiple times; processed in order, mixed with -e/--exclude)."
        ),
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="Print a preamble describing the scan settings before the tree.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary of counts after the tree. Valid destinations: stderr, stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    directory = Path(args.directory)
    if not directory.exists():
        raise ValueError(f"Directory {directory.resolve()} does not exist")
    if not directory.is_dir():
        raise ValueError(f"{directory.resolve()} is not a directory")
