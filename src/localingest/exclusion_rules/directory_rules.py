"""Rules for directories that are pruned together with their whole subtree."""

import posixpath
from typing import FrozenSet, Iterable, Optional

from .base_rules import BaseExclusionRules

# Dependency caches and vendored code that never belong in a snapshot
PRUNED_DIRECTORY_NAMES: FrozenSet[str] = frozenset({"node_modules", "vendor"})


class PrunedDirectoryRules(BaseExclusionRules):
    """Match hidden directories and well-known dependency directories.

    A directory is pruned if its name starts with "." (which covers ".git" and other
    version-control metadata) or equals one of the configured names. These rules are
    only meaningful for directories; the traversal never applies them to files or to
    the snapshot root itself.

    Attributes:
        names (FrozenSet[str]): Directory names pruned in addition to hidden ones.

    Example:
        >>> rules = PrunedDirectoryRules()
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("web/node_modules")
        True
        >>> rules.exclude("src")
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self.names: FrozenSet[str] = frozenset(names) if names is not None else PRUNED_DIRECTORY_NAMES

    def exclude(self, path: str) -> bool:
        name = posixpath.basename(path.rstrip("/"))
        return name.startswith(".") or name in self.names
