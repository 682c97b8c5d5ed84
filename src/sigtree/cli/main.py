"""Command-line interface for sigtree.

This module provides the entry point of the sigtree command. It parses the command
line, resolves the scan configuration once, builds the signature-annotated tree and
writes it out, keeping diagnostics on stderr so they never mix with the tree.

Exit Codes:
    0: Successful completion
    1: Runtime error (e.g. the directory does not exist)
    2: Command-line syntax error (e.g. a non-numeric depth)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Map a project, exported functions only
    $ sigtree /path/to/project

    # Everything, one level deep
    $ sigtree /path/to/project -d 1 --all-methods
"""

import sys
import warnings
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from sigtree.cli.argparser import create_parser, validate_args
from sigtree.cli.safe_writer import SafeWriter
from sigtree.cli.signal_handler import setup_signal_handling, signal_handler
from sigtree.code_tree.code_tree import CodeTree
from sigtree.config import Config, load_config
from sigtree.exceptions import ConfigWarning
from sigtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from sigtree.types import ExtractionMode


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Signatures: {counts['signatures']}",
    ]

    if counts.get("unreadable"):
        result.append(f"Unreadable files: {counts['unreadable']}")

    return "\n".join(result)


def format_header(directory: Path, depth: Optional[int], show_signatures: bool) -> str:
    """Format the preamble printed before the tree with --header.

    Example:
        >>> print(format_header(Path("app"), None, True))
        Directory: app
        Maximum depth: unlimited
        Show methods: yes
        <BLANKLINE>
    """
    return "\n".join(
        [
            f"Directory: {directory}",
            f"Maximum depth: {'unlimited' if depth is None else depth}",
            f"Show methods: {'yes' if show_signatures else 'no'}",
            "",
        ]
    )


def resolve_config(directory: Path) -> Config:
    """Load the scan configuration, reporting configuration problems on stderr.

    Args:
        directory: Root directory of the scan.

    Returns:
        The resolved configuration (the defaults if the file could not be used).
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ConfigWarning)
        config = load_config(directory)

    for warning in caught:
        if issubclass(warning.category, ConfigWarning):
            print(f"Warning: {warning.message}", file=sys.stderr)
        else:
            warnings.warn_explicit(warning.message, warning.category, warning.filename, warning.lineno)
    return config


def main() -> None:
    """Main entry point for the sigtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the command line is parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        config = resolve_config(args.directory)
        code_tree = CodeTree(
            args.directory,
            config,
            max_depth=args.depth,
            show_signatures=not args.no_methods,
            mode=ExtractionMode.ALL if args.all_methods else ExtractionMode.EXPORTED,
            exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
        )

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                if args.header:
                    safe_writer.write(format_header(args.directory, args.depth, not args.no_methods) + "\n")

                safe_writer.write_lines(code_tree.stream_tree_representation())

                if args.summary:
                    counts = {
                        "directories": code_tree.get_directory_count(),
                        "files": code_tree.get_file_count(),
                        "lines": code_tree.get_line_count(),
                        "signatures": code_tree.get_signature_count(),
                        "unreadable": code_tree.get_unreadable_count(),
                    }
                    count_output_str = format_counts(counts)

                    if args.summary == "stdout":
                        safe_writer.write("\n" + count_output_str + "\n")
                    elif args.summary == "stderr":
                        print(count_output_str, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
