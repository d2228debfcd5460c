from typing import Optional

from localingest.types import PathType


class NotARepositoryError(Exception):
    """
    Exception raised when the working directory is not inside a git working tree.

    The snapshot is only meaningful for a repository, so this check runs before any
    traversal starts and before the output file is created.

    Attributes:
        path (str): The directory that was checked.

    Example:
        >>> error = NotARepositoryError("/tmp/somewhere")
        >>> str(error)
        'This tool must be run from the root directory of a Git repository: /tmp/somewhere'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"This tool must be run from the root directory of a Git repository: {self.path}")


class TraversalError(OSError):
    """
    Exception raised when a filesystem operation fails while building a snapshot.

    Any error while listing a directory, reading a file's size, or reading its content
    aborts the whole traversal. The original error is available as ``__cause__`` and its
    errno is preserved so callers can still distinguish, e.g., permission problems.

    Attributes:
        path (str): Path of the entry that could not be processed.

    Example:
        >>> error = TraversalError("src/main.py", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot access src/main.py: [Errno 13] Permission denied'
        >>> error.errno
        13
    """

    def __init__(self, path: PathType, error: Optional[OSError] = None) -> None:
        self.path = str(path)
        message = f"Cannot access {self.path}"
        if error is not None:
            message = f"{message}: {error}"
        super().__init__(error.errno if error is not None else None, message)
        self.filename = self.path

    def __str__(self) -> str:
        return str(self.strerror)


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting without the required tokenizer package.

    The `tiktoken` package is an optional dependency that must be explicitly installed
    using the 'token_counting' extra.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install localingest with the 'token_counting' "
            "extra: 'pip install localingest[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass
