"""Package directory ingestion."""

from dataclasses import dataclass
from pathlib import Path

from goexphash.errors import ParseError
from goexphash.parse.base import ParsedFile, is_source_file
from goexphash.parse.golang import parse_source
from goexphash.utils import calculate_file_digest


@dataclass(frozen=True)
class FileIngestionResult:
    """Immutable result of ingesting a single file.

    Attributes
    ----------
    filename : str
        Name of the file (basename).
    filepath : str
        Full path to the file.
    file_size : int
        Size of file in bytes.
    package : str
        Package name from the file's package clause.
    declarations : int
        Number of top-level declarations found (before export filtering).
    file_digest : str
        SHA-256 digest of file bytes.
    """

    filename: str
    filepath: str
    file_size: int
    package: str
    declarations: int
    file_digest: str = ""


@dataclass(frozen=True)
class IngestionReport:
    """Immutable report for one package directory.

    Attributes
    ----------
    package_path : str
        Directory that was ingested.
    total_files : int
        Non-test Go files parsed.
    packages : tuple[str, ...]
        Distinct package names seen, sorted.
    file_results : tuple[FileIngestionResult, ...]
        Per-file ingestion results, in file name order.
    """

    package_path: str
    total_files: int
    packages: tuple[str, ...]
    file_results: tuple[FileIngestionResult, ...]


def list_source_files(folder_path: Path) -> list[Path]:
    """List the non-test Go files of a package directory.

    Subdirectories are separate packages and are not descended into.

    Parameters
    ----------
    folder_path : Path
        Package directory.

    Returns
    -------
    list[Path]
        Source files sorted by name.
    """
    return sorted((p for p in folder_path.iterdir() if is_source_file(p)), key=lambda p: p.name)


def ingest_file(file_path: Path) -> tuple[ParsedFile, FileIngestionResult]:
    """Read and parse a single Go file.

    Parameters
    ----------
    file_path : Path
        Path to the file.

    Returns
    -------
    tuple[ParsedFile, FileIngestionResult]
        - Parsed file
        - File ingestion result with metadata

    Raises
    ------
    ParseError
        If the file cannot be read or parsed.
    """
    try:
        file_bytes = file_path.read_bytes()
    except OSError as e:
        raise ParseError(f"Failed to read file {file_path}: {e}", file=str(file_path)) from e

    parsed = parse_source(file_bytes, filename=file_path.name)
    declarations = sum(1 for n in parsed.top_level if n.type.endswith("_declaration"))

    result = FileIngestionResult(
        filename=file_path.name,
        filepath=str(file_path),
        file_size=len(file_bytes),
        package=parsed.package,
        declarations=declarations,
        file_digest=calculate_file_digest(file_bytes),
    )
    return parsed, result


def ingest_folder(folder_path: Path) -> tuple[list[ParsedFile], IngestionReport]:
    """Parse every non-test Go file of a package directory.

    Parameters
    ----------
    folder_path : Path
        Package directory.

    Returns
    -------
    tuple[list[ParsedFile], IngestionReport]
        - Parsed files, in file name order; empty when the directory holds
          no non-test Go files
        - Report with per-file statistics

    Raises
    ------
    ParseError
        If the directory cannot be listed or any file fails to parse.
    """
    try:
        files = list_source_files(folder_path)
    except OSError as e:
        raise ParseError(
            f"Failed to read directory {folder_path}: {e}", file=str(folder_path)
        ) from e

    parsed_files: list[ParsedFile] = []
    results: list[FileIngestionResult] = []
    for file_path in files:
        parsed, result = ingest_file(file_path)
        parsed_files.append(parsed)
        results.append(result)

    report = IngestionReport(
        package_path=str(folder_path),
        total_files=len(results),
        packages=tuple(sorted({r.package for r in results})),
        file_results=tuple(results),
    )
    return parsed_files, report
