"""File system tree representation with exclusion and pruning rules.

This module provides the FileSystemTree class, which walks a directory once, depth
first, and keeps only the directories and files that survive the configured rules.
File contents are read during the same pass, so the tree and the captured contents
always describe exactly the same set of files.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from localingest.exceptions import TraversalError
from localingest.exclusion_rules.base_rules import BaseExclusionRules
from localingest.exclusion_rules.directory_rules import PrunedDirectoryRules
from localingest.file_system_tree.error_action import ErrorAction
from localingest.file_system_tree.file_system_node import FileSystemNode
from localingest.types import PathType

INDENT = "    "


class FileSystemTree:
    """A filtered tree representation of a directory and the contents of its files.

    Traversal rules:
        - Siblings are visited in sorted name order, so repeated runs over an unchanged
          directory produce identical results.
        - Directories matched by ``directory_rules`` are pruned: neither they nor anything
          below them is visited. The root itself is never pruned.
        - Symbolic links are not followed. Anything that is not a real directory is
          treated as a file.
        - Files matched by ``file_rules`` are left out entirely. Every other file is read
          in full and its content stored on its node.

    Error handling:
        With ErrorAction.RAISE (default) the first filesystem error aborts the traversal
        with a TraversalError and no tree is kept. With ErrorAction.SKIP the failing
        entry is omitted and recorded in ``skipped``.

    The tree is built lazily on first access and can be rebuilt with refresh().

    Attributes:
        root_path (Path): The root directory.
        file_rules (Optional[BaseExclusionRules]): Rules for excluding files.
        directory_rules (BaseExclusionRules): Rules for pruning directories.
        error_action (ErrorAction): How to handle filesystem errors.
        skipped (List[Tuple[str, OSError]]): Entries left out because of errors.

    Example:
        >>> tree = FileSystemTree("my-repo")  # doctest: +SKIP
        >>> print("".join(tree.iterate_lines()))  # doctest: +SKIP
        my-repo/
        readme.md
        src/
            main.go
    """

    def __init__(
        self,
        root_path: PathType,
        file_rules: Optional[BaseExclusionRules] = None,
        directory_rules: Optional[BaseExclusionRules] = None,
        error_action: ErrorAction = ErrorAction.RAISE,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Can be any path-like object.
            file_rules: Rules for excluding files. Defaults to None (keep all files).
            directory_rules: Rules for pruning directories. Defaults to PrunedDirectoryRules(),
                which prunes hidden directories, node_modules and vendor.
            error_action: How to handle filesystem errors. Defaults to RAISE.
            encoding: Encoding used to turn file bytes into text. Undecodable bytes are
                kept with the "surrogateescape" handler so they can be written back as-is.
        """
        self.root_path = Path(root_path)
        self.file_rules = file_rules
        self.directory_rules = directory_rules if directory_rules is not None else PrunedDirectoryRules()
        self.error_action = error_action
        self.encoding = encoding
        self.skipped: List[Tuple[str, OSError]] = []
        self._tree: Optional[FileSystemNode] = None
        self._file_count = 0
        self._directory_count = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if necessary.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            TraversalError: If a filesystem error occurs and error_action is RAISE.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def refresh(self) -> None:
        """Drop the current tree so the next access reflects the filesystem again."""
        self._tree = None
        self.skipped = []
        self._file_count = 0
        self._directory_count = 0

    def _build_tree(self) -> FileSystemNode:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        self.skipped = []
        root = FileSystemNode(self.root_path.resolve().name or str(self.root_path), is_dir=True)
        self._add_children(root, self.root_path, "")

        self._file_count = 0
        self._directory_count = 0
        for node in PreOrderIter(root):
            if node is root:
                continue
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

        return root

    def _handle_error(self, relative_path: str, error: OSError) -> None:
        if self.error_action == ErrorAction.RAISE:
            raise TraversalError(relative_path or str(self.root_path), error) from error
        self.skipped.append((relative_path, error))

    def _add_children(self, node: FileSystemNode, path: Path, relative_path: str) -> None:
        """Recursively attach the surviving children of a directory to ``node``."""
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            self._handle_error(relative_path, e)
            if relative_path:
                # An unlistable directory is dropped along with its contents
                node.parent = None
            return

        for entry in entries:
            child_relative = os.path.join(relative_path, entry.name) if relative_path else entry.name
            rule_path = child_relative.replace(os.sep, "/")

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._handle_error(child_relative, e)
                continue

            if is_dir:
                if self._excluded(self.directory_rules, rule_path + "/", child_relative):
                    continue
                child = FileSystemNode(entry.name, parent=node, is_dir=True, relative_path=child_relative)
                self._add_children(child, Path(entry.path), child_relative)
                continue

            if self.file_rules is not None and self._excluded(self.file_rules, rule_path, child_relative):
                continue

            try:
                content = Path(entry.path).read_bytes().decode(self.encoding, errors="surrogateescape")
            except OSError as e:
                self._handle_error(child_relative, e)
                continue

            FileSystemNode(entry.name, parent=node, relative_path=child_relative, content=content)

    def _excluded(self, rules: BaseExclusionRules, rule_path: str, relative_path: str) -> bool:
        # Rules that touch the filesystem (size) may fail; such entries count as excluded
        # when errors are skipped.
        try:
            return rules.exclude(rule_path)
        except OSError as e:
            self._handle_error(relative_path, e)
            return True

    def iterate_lines(self) -> Iterator[str]:
        """Yield the indented tree listing, one newline-terminated line per node.

        The root comes first as its directory name with a trailing "/". Every other entry
        is indented by four spaces per path separator in its root-relative path;
        directories carry a trailing "/".

        Example:
            >>> tree = FileSystemTree("repo")  # doctest: +SKIP
            >>> list(tree.iterate_lines())  # doctest: +SKIP
            ['repo/\\n', 'readme.md\\n', 'src/\\n', '    main.go\\n']
        """
        for node in PreOrderIter(self.get_tree()):
            yield f"{INDENT * node.indent_level}{node.display_name}\n"

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Yield (relative_path, content) for every included file in traversal order."""
        for node in PreOrderIter(self.get_tree()):
            if not node.is_dir:
                yield node.relative_path, node.content

    def get_file_count(self) -> int:
        """Number of included files."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of included directories, not counting the root."""
        self.get_tree()
        return self._directory_count
