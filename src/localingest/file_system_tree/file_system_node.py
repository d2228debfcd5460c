"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the data a snapshot needs: whether the node is a
    directory, its path relative to the snapshot root, and, for files, the content that
    was read during traversal.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        relative_path (str): Path relative to the snapshot root, using the OS separator.
            Empty for the root node.
        content (Optional[str]): File content, or None for directories.

    Example:
        >>> root = FileSystemNode("repo", is_dir=True)
        >>> child = FileSystemNode("main.go", parent=root, relative_path="main.go", content="package main")
        >>> child.is_dir
        False
        >>> child.indent_level
        0
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        relative_path: str = "",
        content: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.relative_path = relative_path
        self.content = content

    @property
    def indent_level(self) -> int:
        """Number of indentation steps for this node's tree line.

        The root and its direct children share level 0; each further level of nesting
        adds one.
        """
        return max(self.depth - 1, 0)

    @property
    def display_name(self) -> str:
        """The node name as shown in the tree, with a trailing "/" for directories."""
        return f"{self.name}/" if self.is_dir else self.name
