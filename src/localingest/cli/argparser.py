"""Command-line argument parsing for localingest.

Options keep their historical single-dash spellings (``-exclude``, ``-size-limit``,
``-max-size``) and also accept the usual double-dash forms.
"""

import argparse
import os
from pathlib import Path
from typing import List

from localingest import __version__
from localingest.config import DEFAULT_MAX_SIZE, DEFAULT_OUTPUT, IngestConfig, parse_extensions
from localingest.exclusion_rules.git_rules import escape_pattern
from localingest.exclusion_rules.size_rules import parse_file_size
from localingest.file_system_tree.error_action import ErrorAction

# Extensionless files (typically executables) are never included
ALWAYS_EXCLUDED_EXTENSIONS = frozenset({""})


def size_type(value: str) -> int:
    """argparse type for byte sizes, accepting plain integers and human-readable sizes."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with localingest's options.
    """
    description = """
    local-ingest: Convert a local Git repository to a single text file.

    The output contains the repository's directory structure followed by the contents
    of every included file. Hidden directories (such as .git), node_modules and vendor
    are always skipped, as are files without an extension.

    This tool must be run from the root directory of a Git repository. The result is
    useful for providing context to large language models or creating project snapshots.
    """

    epilog = """
    Examples:
      # Snapshot the current repository into output.txt
      local-ingest

      # Exclude images and write to a different file
      local-ingest -exclude .jpg,.png,.gif -o snapshot.txt

      # Skip files larger than 50KB (the default ceiling) or 10KB
      local-ingest -size-limit
      local-ingest -size-limit -max-size 10240

      # Leave out paths with gitignore-style patterns
      local-ingest -i "docs/" -i "*.lock"

      # Keep going past unreadable files, reporting them as warnings
      local-ingest -P skip

      # Report counts, including tokens for a model
      local-ingest -s stderr -t gpt-4
    """

    parser = argparse.ArgumentParser(
        prog="local-ingest",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"local-ingest {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-exclude",
        "--exclude",
        dest="exclude",
        metavar="EXTS",
        default="",
        help="Comma-separated list of file extensions to exclude (e.g., .jpg,.png,.gif).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        default=Path(DEFAULT_OUTPUT),
        help=f"Output file name (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "-size-limit",
        "--size-limit",
        dest="size_limit",
        action="store_true",
        help="Enable the file size limit.",
    )
    parser.add_argument(
        "-max-size",
        "--max-size",
        dest="max_size",
        type=size_type,
        metavar="SIZE",
        default=DEFAULT_MAX_SIZE,
        help=f"Maximum file size in bytes, used with -size-limit (default: {DEFAULT_MAX_SIZE}).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern to exclude files and directories (can be specified multiple times).",
    )
    parser.add_argument(
        "-P",
        "--on-error",
        choices=["fail", "skip"],
        default="fail",
        help="How to handle unreadable files and directories (default: fail).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary report. Valid destinations: stderr, stdout.",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model for counting tokens in the summary (e.g., gpt-4). Requires -s/--summary.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse handles.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.tokenizer and not args.summary:
        raise ValueError("-t/--tokenizer requires -s/--summary to be specified")


def build_config(args: argparse.Namespace, root: Path) -> IngestConfig:
    """Turn parsed arguments into the run configuration for ``root``.

    Extensionless files are always excluded. When the output file lies inside the root,
    an anchored pattern keeps it out of its own snapshot.
    """
    patterns: List[str] = list(args.ignore)

    output = Path(os.path.abspath(args.output))
    try:
        relative_output = output.relative_to(os.path.abspath(root))
    except ValueError:
        pass
    else:
        patterns.append(escape_pattern(relative_output.as_posix()))

    return IngestConfig(
        root=root,
        exclude_extensions=ALWAYS_EXCLUDED_EXTENSIONS | parse_extensions(args.exclude),
        size_limit=args.size_limit,
        max_size=args.max_size,
        ignore_patterns=tuple(patterns),
        error_action=ErrorAction.SKIP if args.on_error == "skip" else ErrorAction.RAISE,
    )
