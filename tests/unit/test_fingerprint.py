"""Tests for entry ordering and hashing."""

import hashlib

import pytest

from goexphash.fingerprint import descriptor_buffer, fingerprint, hash_entries, sort_entries
from goexphash.models import CanonicalEntry, EntryKind
from goexphash.utils import calculate_file_digest, calculate_fingerprint_digest


def _entries(*texts: str) -> list[CanonicalEntry]:
    return [CanonicalEntry(kind=EntryKind.SINGLE_CONST, text=t) for t in texts]


@pytest.mark.unit
def test_sort_entries_bytewise() -> None:
    """Test entries sort by UTF-8 bytes: upper case before lower case."""
    ordered = sort_entries(_entries("func b()", "func B()", "const Z = 1", "func a()"))

    assert [e.text for e in ordered] == ["const Z = 1", "func B()", "func a()", "func b()"]


@pytest.mark.unit
def test_sort_entries_non_ascii() -> None:
    """Test multi-byte characters sort after ASCII."""
    ordered = sort_entries(_entries("const É = 1", "const Z = 1"))

    assert [e.text for e in ordered] == ["const Z = 1", "const É = 1"]


@pytest.mark.unit
def test_descriptor_buffer_terminates_every_entry() -> None:
    """Test each entry is followed by a newline, including the last."""
    buffer = descriptor_buffer(_entries("const Bar = 1", "func Foo(x int) string"))

    assert buffer == b"const Bar = 1\nfunc Foo(x int) string\n"


@pytest.mark.unit
def test_hash_entries_matches_sha512_256() -> None:
    """Test the digest is SHA-512/256 over the descriptor buffer."""
    digest = hash_entries(_entries("const Bar = 1", "func Foo(x int) string"))

    expected = hashlib.new("sha512_256", b"const Bar = 1\nfunc Foo(x int) string\n").hexdigest()
    assert digest == expected
    assert len(digest) == 64
    assert digest == digest.lower()


@pytest.mark.unit
def test_hash_entries_empty() -> None:
    """Test a package without exported API hashes the empty buffer."""
    assert hash_entries([]) == hashlib.new("sha512_256", b"").hexdigest()


@pytest.mark.unit
def test_fingerprint_order_independent() -> None:
    """Test permuting entries does not change the fingerprint."""
    forward = fingerprint(_entries("const A = 1", "const B = 2", "func C()"))
    backward = fingerprint(_entries("func C()", "const B = 2", "const A = 1"))

    assert forward == backward


@pytest.mark.unit
def test_hashing_utils() -> None:
    """Test file digests carry a prefix and fingerprint digests do not."""
    assert calculate_file_digest(b"x") == "sha256:" + hashlib.sha256(b"x").hexdigest()
    assert calculate_fingerprint_digest(b"x") == hashlib.new("sha512_256", b"x").hexdigest()
