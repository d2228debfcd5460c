"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .directory_rules import PRUNED_DIRECTORY_NAMES, PrunedDirectoryRules
from .extension_rules import ExtensionExclusionRules, file_extension
from .git_rules import GitIgnoreExclusionRules, escape_pattern
from .size_rules import SizeExclusionRules, parse_file_size

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "ExtensionExclusionRules",
    "GitIgnoreExclusionRules",
    "PRUNED_DIRECTORY_NAMES",
    "PrunedDirectoryRules",
    "SizeExclusionRules",
    "escape_pattern",
    "file_extension",
    "parse_file_size",
]
