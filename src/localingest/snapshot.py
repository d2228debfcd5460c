"""Collection of a repository snapshot: tree listing plus file contents."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from localingest.config import IngestConfig
from localingest.file_system_tree.file_system_tree import FileSystemTree


@dataclass(frozen=True)
class Snapshot:
    """The result of one traversal.

    Attributes:
        tree_lines: Indented tree listing, each line newline-terminated.
        contents: Root-relative path to file content, in traversal order. Every key has
            a matching line in tree_lines.
        skipped: (relative_path, error) for entries dropped because of filesystem errors.
            Always empty unless errors are configured to be skipped.
    """

    tree_lines: Tuple[str, ...]
    contents: Dict[str, str]
    skipped: Tuple[Tuple[str, OSError], ...] = field(default_factory=tuple)

    @property
    def directory_count(self) -> int:
        # The root line is the only directory line that is not part of the count
        return sum(1 for line in self.tree_lines if line.rstrip("\n").endswith("/")) - 1

    @property
    def file_count(self) -> int:
        return len(self.contents)


def collect_snapshot(config: IngestConfig) -> Snapshot:
    """Walk ``config.root`` once and capture its filtered tree and file contents.

    Args:
        config: The run configuration.

    Returns:
        A Snapshot of the directory.

    Raises:
        FileNotFoundError: If the root doesn't exist.
        NotADirectoryError: If the root isn't a directory.
        TraversalError: On the first filesystem error, unless errors are skipped.

    Example:
        >>> from pathlib import Path
        >>> snapshot = collect_snapshot(IngestConfig(Path(".")))  # doctest: +SKIP
        >>> list(snapshot.contents)  # doctest: +SKIP
        ['readme.md', 'src/main.go']
    """
    tree = FileSystemTree(
        config.root,
        file_rules=config.file_rules(),
        directory_rules=config.directory_rules(),
        error_action=config.error_action,
    )
    tree_lines = tuple(tree.iterate_lines())
    contents = dict(tree.iterate_files())
    return Snapshot(tree_lines=tree_lines, contents=contents, skipped=tuple(tree.skipped))
