"""Deterministic fingerprints of the exported API of Go packages.

This package provides:
- Data models (goexphash.models) - syntax snapshots, declarations, entries
- Parsing (goexphash.parse) - Go source ingestion via tree-sitter
- Canonicalization (goexphash.canonical) - rendering and block splitting
- Extraction (goexphash.extract) - export filtering and classification
- Fingerprint (goexphash.fingerprint) - ordering and hashing
- Engine (goexphash.engine) - pipeline orchestration
- Audit (goexphash.audit) - structured JSONL events
- CLI (goexphash.cli) - command-line interface
- Public API (goexphash.api) - high-level convenience functions
"""

__version__ = "0.1.0"

from goexphash.api import hash_directory, hash_package, hash_sources, resolve_package
from goexphash.engine import HashConfig, HashResult
from goexphash.errors import (
    ConfigurationError,
    FetchError,
    GoExpHashError,
    ParseError,
    ResolutionError,
)
from goexphash.models import CanonicalEntry, EntryKind

__all__ = [
    "__version__",
    "CanonicalEntry",
    "EntryKind",
    "HashConfig",
    "HashResult",
    "hash_package",
    "hash_directory",
    "hash_sources",
    "resolve_package",
    "GoExpHashError",
    "ConfigurationError",
    "ResolutionError",
    "FetchError",
    "ParseError",
]
