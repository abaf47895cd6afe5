"""Hashing utilities for goexphash.

This module provides consistent hashing functions for files and descriptor
buffers.
"""

import hashlib

__all__ = [
    "FINGERPRINT_ALGORITHM",
    "format_sha256",
    "calculate_file_digest",
    "calculate_fingerprint_digest",
]

# SHA-512 truncated to 256 bits, as used by the Go tooling this mirrors
FINGERPRINT_ALGORITHM = "sha512_256"


def format_sha256(hex_digest: str) -> str:
    """Format SHA256 hash with standard prefix.

    Parameters
    ----------
    hex_digest : str
        Raw hexadecimal digest.

    Returns
    -------
    str
        Formatted hash with "sha256:" prefix.
    """
    return f"sha256:{hex_digest}"


def calculate_file_digest(file_bytes: bytes) -> str:
    """Calculate SHA-256 digest of file bytes.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        SHA-256 digest in format "sha256:<hex>".

    Notes
    -----
    Only used for ingestion reports; the package fingerprint uses
    :func:`calculate_fingerprint_digest`.
    """
    digest = hashlib.sha256(file_bytes).hexdigest()
    return format_sha256(digest)


def calculate_fingerprint_digest(buffer: bytes) -> str:
    """Calculate the SHA-512/256 digest of a descriptor buffer.

    Parameters
    ----------
    buffer : bytes
        Concatenated, newline-terminated canonical entries.

    Returns
    -------
    str
        Lowercase hexadecimal digest (64 characters), without prefix.
    """
    return hashlib.new(FINGERPRINT_ALGORITHM, buffer).hexdigest()
