"""Base types and utilities for Go source parsing."""

from dataclasses import dataclass
from pathlib import Path

from goexphash.errors import ParseError
from goexphash.models import SyntaxNode

GO_EXTENSION = ".go"
TEST_FILE_SUFFIX = "_test.go"

_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass(frozen=True)
class ParsedFile:
    """A successfully parsed Go source file.

    Attributes
    ----------
    filename : str
        File name (basename), or a caller-chosen label for in-memory sources.
    package : str
        Name from the file's package clause.
    root : SyntaxNode
        Snapshot of the ``source_file`` node.
    """

    filename: str
    package: str
    root: SyntaxNode

    @property
    def top_level(self) -> tuple[SyntaxNode, ...]:
        """Top-level nodes of the file in source order."""
        return self.root.children


def is_source_file(path: Path) -> bool:
    """Check whether a path is a non-test Go source file.

    Parameters
    ----------
    path : Path
        Candidate path.

    Returns
    -------
    bool
        True for regular ``*.go`` files that are not ``*_test.go``.
    """
    name = path.name
    return (
        name.endswith(GO_EXTENSION)
        and not name.endswith(TEST_FILE_SUFFIX)
        and not name.startswith((".", "_"))
        and path.is_file()
    )


def decode_source(file_bytes: bytes, filename: str) -> bytes:
    """Validate Go source bytes and strip a leading byte order mark.

    Go source is UTF-8 by definition, so anything else is a parse error
    rather than something to guess an encoding for.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.
    filename : str
        File name used in error messages.

    Returns
    -------
    bytes
        Source bytes without BOM, with line endings normalized to LF.

    Raises
    ------
    ParseError
        If the content is not valid UTF-8.
    """
    if file_bytes.startswith(_UTF8_BOM):
        file_bytes = file_bytes[len(_UTF8_BOM) :]

    try:
        file_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{filename}: invalid UTF-8 in source: {e}", file=filename) from e

    return normalize_line_endings(file_bytes)


def normalize_line_endings(content: bytes) -> bytes:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : bytes
        Source with potentially mixed line endings.

    Returns
    -------
    bytes
        Source with normalized line endings (\\n only).
    """
    content = content.replace(b"\r\n", b"\n")
    return content.replace(b"\r", b"\n")
