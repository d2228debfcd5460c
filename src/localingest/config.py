"""Run configuration for building a snapshot."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Tuple

from localingest.exclusion_rules.base_rules import BaseExclusionRules
from localingest.exclusion_rules.composite_rules import CompositeExclusionRules
from localingest.exclusion_rules.directory_rules import PrunedDirectoryRules
from localingest.exclusion_rules.extension_rules import ExtensionExclusionRules
from localingest.exclusion_rules.git_rules import GitIgnoreExclusionRules
from localingest.exclusion_rules.size_rules import SizeExclusionRules
from localingest.file_system_tree.error_action import ErrorAction

DEFAULT_MAX_SIZE = 50 * 1024
DEFAULT_OUTPUT = "output.txt"


def parse_extensions(value: str) -> FrozenSet[str]:
    """Split a comma-separated extension list into a set of trimmed tokens.

    Tokens are kept verbatim otherwise; a leading "." is expected but not added.

    Example:
        >>> sorted(parse_extensions(".jpg, .png,.gif"))
        ['.gif', '.jpg', '.png']
        >>> parse_extensions("")
        frozenset()
    """
    if not value:
        return frozenset()
    return frozenset(token.strip() for token in value.split(","))


@dataclass(frozen=True)
class IngestConfig:
    """Everything a snapshot run needs, built once and passed explicitly.

    Attributes:
        root: Directory to snapshot.
        exclude_extensions: File extensions to leave out ("" for extensionless files).
        size_limit: Whether the size ceiling is enforced.
        max_size: Size ceiling in bytes, used only when size_limit is True.
        ignore_patterns: Additional gitignore-style patterns for files and directories.
        error_action: What to do when a filesystem error occurs.
    """

    root: Path
    exclude_extensions: FrozenSet[str] = frozenset()
    size_limit: bool = False
    max_size: int = DEFAULT_MAX_SIZE
    ignore_patterns: Tuple[str, ...] = field(default_factory=tuple)
    error_action: ErrorAction = ErrorAction.RAISE

    def file_rules(self) -> BaseExclusionRules:
        """Build the rules applied to files: extension, then size, then patterns."""
        rules: List[BaseExclusionRules] = [ExtensionExclusionRules(self.exclude_extensions)]
        if self.size_limit:
            rules.append(SizeExclusionRules(self.max_size, root=self.root))
        if self.ignore_patterns:
            rules.append(GitIgnoreExclusionRules(self.ignore_patterns))
        return CompositeExclusionRules(rules)

    def directory_rules(self) -> BaseExclusionRules:
        """Build the rules that prune directories."""
        rules: List[BaseExclusionRules] = [PrunedDirectoryRules()]
        if self.ignore_patterns:
            rules.append(GitIgnoreExclusionRules(self.ignore_patterns))
        return CompositeExclusionRules(rules)
