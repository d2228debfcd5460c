from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Concrete rules (extension, size, pruned-directory, gitignore-style patterns) decide
    whether a single path is left out of a snapshot. Paths are always given relative to
    the snapshot root using forward slashes (/), regardless of platform.

    Example:
        >>> from localingest.exclusion_rules.extension_rules import ExtensionExclusionRules
        >>> rules = ExtensionExclusionRules([".log"])
        >>> rules.exclude("logs/server.log")
        True
        >>> rules.exclude("src/server.py")
        False
        >>> rules.add_rule(".py")
        >>> rules.exclude("src/server.py")
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Root-relative path of the file or directory, using forward slashes.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types configured only through their constructor (e.g., size-based or composite
        rules) use this default implementation.

        Args:
            rule (str): The rule to add. The format depends on the implementation
                (an extension such as ".pyc", a gitignore pattern such as "build/", ...).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True if the rule object can exclude anything at all."""
        return True
