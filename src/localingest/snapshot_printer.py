"""Serialization of a snapshot into the flat text artifact.

The layout is fixed and consumed by downstream tools, so it is reproduced byte for
byte:

    <tree lines>
    <blank line>
    ================================================
    File: <relative/path>
    ================================================
    <raw file content>
    <blank line>

with one such block per file.
"""

from typing import Iterator, Protocol

from localingest.snapshot import Snapshot

SEPARATOR = "=" * 48


class TextSink(Protocol):
    def write(self, data: str) -> object: ...


class SnapshotPrinter:
    """Streams a Snapshot in the fixed text layout.

    Like the rest of the output path, the printer yields small pieces instead of
    building one big string, so callers can write them as they come.

    Attributes:
        snapshot (Snapshot): The snapshot to print.

    Example:
        >>> snapshot = Snapshot(tree_lines=("repo/\\n", "a.txt\\n"), contents={"a.txt": "hello"})
        >>> print(format_snapshot(snapshot), end="")
        repo/
        a.txt
        <BLANKLINE>
        ================================================
        File: a.txt
        ================================================
        hello
        <BLANKLINE>
    """

    def __init__(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot

    def stream_tree(self) -> Iterator[str]:
        """Yield the tree lines followed by the blank line that ends the tree section."""
        yield from self.snapshot.tree_lines
        yield "\n"

    def stream_contents(self) -> Iterator[str]:
        """Yield one delimited block per file, in the snapshot's order."""
        for relative_path, content in self.snapshot.contents.items():
            yield format_file_header(relative_path)
            yield content
            yield "\n\n"

    def write_to(self, sink: TextSink) -> None:
        """Write the whole artifact to ``sink``. Write errors propagate unchanged."""
        for chunk in self.stream_tree():
            sink.write(chunk)
        for chunk in self.stream_contents():
            sink.write(chunk)


def format_file_header(relative_path: str) -> str:
    """Return the separator / "File:" / separator header that opens a file block.

    Example:
        >>> print(format_file_header("src/main.go"), end="")
        ================================================
        File: src/main.go
        ================================================
    """
    return f"{SEPARATOR}\nFile: {relative_path}\n{SEPARATOR}\n"


def format_snapshot(snapshot: Snapshot) -> str:
    """Return the complete artifact for ``snapshot`` as one string."""
    printer = SnapshotPrinter(snapshot)
    return "".join(printer.stream_tree()) + "".join(printer.stream_contents())
