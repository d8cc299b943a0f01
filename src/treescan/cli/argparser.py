"""Command-line argument parsing for treescan.

This module defines the command-line interface for treescan,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from treescan import __version__
from treescan.exclusion_rules.name_rules import DEFAULT_DENYLIST


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with treescan's options.
    """
    description = """
    treescan: List the files of a project tree as JSON, without build and tooling noise.

    The directory is walked depth first with entries visited in name order. Entries
    whose name is on a fixed denylist are left out wherever they appear, and paths
    matched by the .gitignore at the root of the scan are left out as well. Excluded
    directories are not descended into.

    The output is a single JSON object:
      {"root": "<absolute root>", "files": [{"path": ..., "size": ..., "ext": ...}]}

    Nothing is written to the output when the scan fails.
    """

    epilog = f"""
    Always excluded names:
      {", ".join(sorted(DEFAULT_DENYLIST))}

    Examples:
      # List the current directory
      treescan

      # List a project and save the result
      treescan -o inventory.json /path/to/project

      # Ignore the project's .gitignore (the denylist still applies)
      treescan --no-ignore-file /path/to/project

      # Display version information and exit
      treescan --version
    """

    parser = argparse.ArgumentParser(
        prog="treescan",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treescan {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to scan (default: the current directory). Paths in the output are relative to it.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--no-ignore-file",
        action="store_true",
        help="Do not read the .gitignore at the root of the scan.",
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
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"-o/--output must be a file, not a directory: {args.output}")
