"""Size-based exclusion rules for filtering files by size."""

from pathlib import Path
from typing import Optional, Union

from humanfriendly import InvalidSize, parse_size

from localingest.types import PathType

from .base_rules import BaseExclusionRules


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '50KB', '1MiB', '2.5K', or just '51200'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format

    Example:
        >>> parse_file_size("51200")
        51200
        >>> parse_file_size("1KiB")
        1024
    """
    try:
        return int(parse_size(size_str))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Exclusion rules based on a file size ceiling.

    Files strictly larger than the ceiling are excluded; a file exactly at the ceiling is
    kept. Paths are resolved against ``root`` before being stat'ed. Symbolic links are
    followed, so a link is measured by the size of the file it points to.

    Unlike a best-effort filter, a file whose size cannot be determined is an error: the
    OSError from stat propagates to the caller.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes.
        root (Path): Directory that relative paths are resolved against.

    Example:
        >>> rules = SizeExclusionRules("50KB")
        >>> rules.max_size_bytes
        50000
        >>> SizeExclusionRules(51200).max_size_bytes
        51200
    """

    def __init__(self, max_size: Union[str, int], root: Optional[PathType] = None):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size, either an integer byte count or a string in
                human-readable format ('50KB', '1MiB').
            root: Directory that paths passed to exclude() are relative to. Defaults to
                the current working directory.

        Raises:
            ValueError: If max_size is negative or its format is invalid.
        """
        if isinstance(max_size, bool):
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        self.root = Path(root) if root is not None else Path(".")

    def exclude(self, path: str) -> bool:
        """Check if a file exceeds the size ceiling.

        Args:
            path: Root-relative file path.

        Returns:
            True if the file is larger than max_size_bytes, False otherwise.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        return (self.root / path).stat().st_size > self.max_size_bytes
