"""Command-line interface for localingest.

The command snapshots the git repository in the current working directory into a
single text file: the directory tree followed by the contents of each included file.

Exit Codes:
    0: Successful completion
    1: Not in a git repository, working directory unavailable, output file cannot be
       created, traversal failed, or any other runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Snapshot the repository, excluding images, with the default 50KB size ceiling
    $ local-ingest -exclude .png,.jpg -size-limit
"""

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from localingest.cli.argparser import build_config, create_parser, validate_args
from localingest.cli.safe_writer import SafeWriter
from localingest.exceptions import NotARepositoryError, TokenizerNotAvailableError
from localingest.git import is_git_root
from localingest.snapshot import collect_snapshot
from localingest.snapshot_printer import SnapshotPrinter
from localingest.token_counter import TokenCounter, check_tiktoken_available


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Example:
        >>> print(format_counts({"directories": 1, "files": 2, "lines": 3, "tokens": None, "characters": 40}))
        Directories: 1
        Files: 2
        Lines: 3
        Characters: 40
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(3, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def main() -> None:
    """Main entry point for the local-ingest command-line interface.

    The repository check and the traversal both happen before the output file is
    created, so a failed run never leaves a fresh output file behind.
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        if args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        try:
            root = Path.cwd()
        except OSError as e:
            print(f"Error: Cannot determine current directory: {str(e)}", file=sys.stderr)
            sys.exit(1)

        if not is_git_root(root):
            raise NotARepositoryError(root)

        config = build_config(args, root)
        counter = TokenCounter(args.tokenizer) if args.summary else None
        snapshot = collect_snapshot(config)

        for path, error in snapshot.skipped:
            print(f"Warning: Skipped {path}: {str(error)}", file=sys.stderr)

        try:
            writer = SafeWriter(args.output)
        except OSError as e:
            print(f"Error: Cannot create output file {args.output}: {str(e)}", file=sys.stderr)
            sys.exit(1)

        printer = SnapshotPrinter(snapshot)
        with writer:
            for stream in (printer.stream_tree(), printer.stream_contents()):
                for chunk in stream:
                    writer.write(chunk)
                    if counter is not None:
                        counter.count(chunk)

        print(f"Successfully generated output to {args.output}")

        if counter is not None:
            counts = {
                "directories": snapshot.directory_count,
                "files": snapshot.file_count,
                "lines": counter.get_total_lines(),
                "tokens": counter.get_total_tokens(),
                "characters": counter.get_total_characters(),
            }
            print(format_counts(counts), file=sys.stdout if args.summary == "stdout" else sys.stderr)

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
