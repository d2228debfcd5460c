"""Local git repository to text conversion.

This package walks a local git working tree and produces a single flat text
snapshot of its directory structure and file contents, suitable for pasting
into Large Language Models (LLMs) or archiving alongside a review.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("localingest")
except PackageNotFoundError:
    __version__ = "unknown"
