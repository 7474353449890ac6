"""Document wrapper for KiCad footprint files.

Handles file and stream I/O plus decoding, and parses the root node.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO

from ..exceptions import FootprintLoadError, FootprintParseError
from .parser import TreeNode, parse


class Document:
    """A loaded footprint S-expression.

    Usage::

        doc = Document.load("R_0603.kicad_mod")
        doc.root.name  # "footprint"
        doc.root.find_all("pad")
    """

    __slots__ = ("source", "root")

    def __init__(self, source: str, root: TreeNode) -> None:
        self.source = source
        self.root = root

    @classmethod
    def from_text(
        cls, text: str, source: str = "<string>", max_depth: int | None = None
    ) -> Document:
        """Parse footprint text.

        Raises:
            FootprintParseError: If the text cannot be parsed. The message
                names the source and the original error is chained.
        """
        try:
            root = parse(text, max_depth=max_depth)
        except FootprintParseError as e:
            raise type(e)(
                f"Failed to parse {source}: {e.message}",
                position=e.position,
                error_code=e.error_code,
                **_context(e),
            ) from e
        return cls(source=source, root=root)

    @classmethod
    def from_stream(
        cls,
        stream: IO[str] | IO[bytes],
        source: str | None = None,
        encoding: str = "utf-8",
        max_depth: int | None = None,
    ) -> Document:
        """Read a text or binary stream to the end and parse it.

        The stream is not closed.

        Raises:
            FootprintLoadError: If the stream cannot be read or decoded.
            FootprintParseError: If the content cannot be parsed.
        """
        if source is None:
            source = str(getattr(stream, "name", "<stream>"))
        try:
            data = stream.read()
        except OSError as e:
            raise FootprintLoadError(f"Error reading {source}: {e}", path=source) from e
        if isinstance(data, bytes):
            try:
                text = data.decode(encoding)
            except UnicodeDecodeError as e:
                raise FootprintLoadError(f"Invalid encoding in {source}: {e}", path=source) from e
        else:
            text = data
        return cls.from_text(text, source=source, max_depth=max_depth)

    @classmethod
    def load(
        cls, path: str | Path, encoding: str = "utf-8", max_depth: int | None = None
    ) -> Document:
        """Load and parse a footprint file.

        Raises:
            FootprintLoadError: If the file does not exist or cannot be read.
            FootprintParseError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise FootprintLoadError(f"File not found: {path}", path=str(path))
        try:
            with path.open("rb") as stream:
                return cls.from_stream(
                    stream, source=str(path), encoding=encoding, max_depth=max_depth
                )
        except PermissionError as e:
            raise FootprintLoadError(f"Permission denied reading {path}: {e}", path=str(path)) from e
        except IsADirectoryError as e:
            raise FootprintLoadError(f"Not a file: {path}", path=str(path)) from e
        except OSError as e:
            raise FootprintLoadError(f"Error reading {path}: {e}", path=str(path)) from e

    def __repr__(self) -> str:
        return f"Document({self.source!r}, root={self.root.name!r})"


def _context(error: FootprintParseError) -> dict[str, object]:
    """Extra keyword context of a parse error, minus the fields passed explicitly."""
    return {
        k: v for k, v in error.__dict__.items() if k not in ("message", "error_code", "position")
    }
