"""Detection of git working trees."""

import subprocess
from pathlib import Path
from typing import Optional

from localingest.types import PathType


def is_git_root(path: Optional[PathType] = None) -> bool:
    """Check whether ``path`` is inside a git working tree.

    A ".git" entry in the directory is accepted directly. Otherwise
    ``git rev-parse --show-toplevel`` is run in the directory, which also succeeds from
    any subdirectory of a working tree. A missing git executable counts as "not a
    repository".

    Args:
        path: Directory to check. Defaults to the current working directory.

    Returns:
        True if the directory belongs to a git working tree, False otherwise.
    """
    directory = Path(path) if path is not None else Path.cwd()
    if (directory / ".git").exists():
        return True

    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=directory,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0
