"""Go source parsing.

Main entry points:
- ingest_folder: Parse every non-test Go file of a package directory
- ingest_file: Parse a single file from disk
- parse_source: Parse in-memory Go source
"""

from goexphash.parse.base import ParsedFile
from goexphash.parse.golang import parse_source
from goexphash.parse.ingestion import (
    FileIngestionResult,
    IngestionReport,
    ingest_file,
    ingest_folder,
    list_source_files,
)

__all__ = [
    "ParsedFile",
    "FileIngestionResult",
    "IngestionReport",
    "parse_source",
    "ingest_file",
    "ingest_folder",
    "list_source_files",
]
