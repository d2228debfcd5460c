"""Error action enum for handling filesystem errors during directory traversal."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a filesystem error occurs during directory traversal.

    Values:
        RAISE: Abort the whole traversal with a TraversalError (default behavior)
        SKIP: Leave the failing entry out of the snapshot and record it as skipped
    """

    RAISE = "raise"
    SKIP = "skip"
