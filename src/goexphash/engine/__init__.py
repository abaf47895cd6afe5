"""Fingerprint pipeline engine.

This package provides the main entry point for running the complete
parse, extract and hash pipeline over a package directory, including
configuration and result types.
"""

from goexphash.engine.config import HashConfig, HashResult
from goexphash.engine.runner import hash_directory, hash_parsed_files

__all__ = [
    "HashConfig",
    "HashResult",
    "hash_directory",
    "hash_parsed_files",
]
