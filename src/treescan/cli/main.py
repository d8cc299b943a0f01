"""Command-line interface for treescan.

This module provides the entry point that scans a directory, renders the report as
JSON and writes it to stdout or a file. The report is completely built and encoded
before the first byte is written, so a failed run never leaves partial output.

Exit Codes:
    0: Successful completion
    1: Root resolution, traversal, encoding or other runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Scan the current directory
    $ treescan

    # Scan a project and write the listing to a file
    $ treescan -o files.json /path/to/project
"""

import sys

from treescan.cli.argparser import create_parser, validate_args
from treescan.cli.safe_writer import SafeWriter
from treescan.cli.signal_handler import setup_signal_handling, signal_handler
from treescan.output_strategies.json_strategy import JSONReportStrategy
from treescan.tree_scanner.tree_scanner import TreeScanner


def main() -> None:
    """Main entry point for the treescan command-line interface.

    Exit codes:
        0: Successful completion
        1: Root resolution, traversal, encoding or other runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    # argparse exits with 2 on syntax errors and 0 for --version
    args = create_parser().parse_args()

    try:
        validate_args(args)

        scanner = TreeScanner(args.directory, use_ignore_file=not args.no_ignore_file)
        report = scanner.scan()
        output = JSONReportStrategy().format_report(report)

        destination = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(destination) as safe_writer:
            try:
                safe_writer.write(output)
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
