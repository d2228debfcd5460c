"""Extension-based exclusion rules."""

import posixpath
from typing import Iterable, Optional, Set

from .base_rules import BaseExclusionRules


def file_extension(path: str) -> str:
    """Return the extension of the final path component, including the leading dot.

    The extension starts at the last "." of the base name. Leading-dot names are not
    special-cased, so a dotfile's extension is its whole name.

    Example:
        >>> file_extension("src/main.go")
        '.go'
        >>> file_extension("archive.tar.gz")
        '.gz'
        >>> file_extension(".bashrc")
        '.bashrc'
        >>> file_extension("Makefile")
        ''
        >>> file_extension("notes.")
        '.'
    """
    name = posixpath.basename(path)
    index = name.rfind(".")
    if index == -1:
        return ""
    return name[index:]


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclude files whose extension is in a fixed set.

    Extensions are compared verbatim: no case folding and no implied leading dot, so
    ".PNG" and "png" do not match "image.png". The empty string stands for files without
    an extension.

    Attributes:
        extensions (Set[str]): The excluded extensions.

    Example:
        >>> rules = ExtensionExclusionRules([".jpg", ""])
        >>> rules.exclude("photos/cat.jpg")
        True
        >>> rules.exclude("bin/tool")
        True
        >>> rules.exclude("README.md")
        False
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None) -> None:
        self.extensions: Set[str] = set(extensions) if extensions is not None else set()

    def exclude(self, path: str) -> bool:
        return file_extension(path) in self.extensions

    def add_rule(self, rule: str) -> None:
        self.extensions.add(rule)

    def has_rules(self) -> bool:
        return bool(self.extensions)
