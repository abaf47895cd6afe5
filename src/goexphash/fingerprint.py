"""Deterministic ordering and hashing of canonical entries."""

from collections.abc import Iterable, Sequence

from goexphash.models import CanonicalEntry
from goexphash.utils import calculate_fingerprint_digest

__all__ = ["sort_entries", "descriptor_buffer", "hash_entries", "fingerprint"]

ENTRY_TERMINATOR = b"\n"


def sort_entries(entries: Iterable[CanonicalEntry]) -> list[CanonicalEntry]:
    """Sort entries byte-wise ascending by their UTF-8 text.

    This removes any dependence on directory listing order, file order or
    declaration order.

    Parameters
    ----------
    entries : Iterable[CanonicalEntry]
        Entries in any order.

    Returns
    -------
    list[CanonicalEntry]
        Sorted entries.
    """
    return sorted(entries, key=lambda e: e.text.encode("utf-8"))


def descriptor_buffer(entries: Sequence[CanonicalEntry]) -> bytes:
    """Concatenate entries in the given order, each terminated by a newline."""
    return b"".join(e.text.encode("utf-8") + ENTRY_TERMINATOR for e in entries)


def hash_entries(entries: Sequence[CanonicalEntry]) -> str:
    """Hash already-sorted entries.

    Parameters
    ----------
    entries : Sequence[CanonicalEntry]
        Entries in final order.

    Returns
    -------
    str
        Lowercase hex SHA-512/256 digest of the descriptor buffer.
    """
    return calculate_fingerprint_digest(descriptor_buffer(entries))


def fingerprint(entries: Iterable[CanonicalEntry]) -> str:
    """Sort and hash entries in one step."""
    return hash_entries(sort_entries(entries))
