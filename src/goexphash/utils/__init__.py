"""Common utility functions for goexphash.

This module consolidates shared utility functions used across the codebase,
including hashing and timestamps.
"""

from goexphash.utils.hashing import (
    FINGERPRINT_ALGORITHM,
    calculate_file_digest,
    calculate_fingerprint_digest,
    format_sha256,
)
from goexphash.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "FINGERPRINT_ALGORITHM",
    "calculate_file_digest",
    "calculate_fingerprint_digest",
    "format_sha256",
]
