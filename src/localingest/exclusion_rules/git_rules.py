"""Implementation of exclusion rules using .gitignore pattern syntax."""

import re
from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules

_SPECIAL_CHARACTERS = re.compile(r"([\\*?\[\]!#])")


def escape_pattern(path: str) -> str:
    """Turn a literal root-relative path into an anchored gitignore pattern.

    Wildcard and other special characters are backslash-escaped so the pattern matches
    exactly that one path.

    Example:
        >>> escape_pattern("output.txt")
        '/output.txt'
        >>> escape_pattern("out/[draft]*.txt")
        '/out/\\\\[draft\\\\]\\\\*.txt'
    """
    return "/" + _SPECIAL_CHARACTERS.sub(r"\\\1", path.lstrip("/"))


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using standard .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them:
    globs, directory-only patterns (ending in /), negation (!), ** and comments are all
    supported. Later patterns override earlier ones.

    Directory paths should be passed with a trailing "/" so that directory-only patterns
    such as "build/" match them.

    Attributes:
        patterns (List[str]): The raw pattern lines in the order they were added.

    Example:
        >>> rules = GitIgnoreExclusionRules(["*.log", "!keep.log", "build/"])
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("keep.log")
        False
        >>> rules.exclude("build/")
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self.patterns: List[str] = list(patterns) if patterns is not None else []
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern such as "*.pyc", "dist/" or "!important.txt"."""
        self.patterns.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def has_rules(self) -> bool:
        return bool(self.patterns)
