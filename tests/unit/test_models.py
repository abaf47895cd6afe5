"""Tests for syntax snapshots and declaration models."""

import pytest

from goexphash.models import (
    CanonicalEntry,
    DeclarationKind,
    EntryKind,
    SyntaxNode,
    leaf,
)


@pytest.mark.unit
def test_syntax_node_is_immutable() -> None:
    """Test nodes cannot be modified in place."""
    node = leaf("identifier", "Foo", named=True)

    with pytest.raises(AttributeError):
        node.text = "Bar"  # type: ignore[misc]


@pytest.mark.unit
def test_syntax_node_field_lookup_skips_punctuation() -> None:
    """Test field lookups return named children only."""
    names = SyntaxNode(
        type="const_spec",
        children=(
            SyntaxNode(type="identifier", text="A", field="name"),
            SyntaxNode(type=",", text=",", field="name", named=False),
            SyntaxNode(type="identifier", text="B", field="name"),
        ),
    )

    assert [n.text for n in names.children_by_field("name")] == ["A", "B"]
    assert names.child_by_field("name").text == "A"
    assert names.child_by_field("value") is None


@pytest.mark.unit
def test_with_children_returns_copy() -> None:
    """Test with_children leaves the original untouched."""
    node = SyntaxNode(type="list", children=(leaf("a"),))

    copy = node.with_children([leaf("b")])

    assert [c.text for c in node.children] == ["a"]
    assert [c.text for c in copy.children] == ["b"]


@pytest.mark.unit
def test_named_children_exclude_comments() -> None:
    """Test comments are not reported as named children."""
    node = SyntaxNode(
        type="list",
        children=(leaf("comment", "// x", named=True), leaf("identifier", "A", named=True)),
    )

    assert [c.text for c in node.named_children] == ["A"]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kind", "grouped", "expected"),
    [
        (DeclarationKind.FUNCTION, False, EntryKind.FUNCTION),
        (DeclarationKind.METHOD, False, EntryKind.FUNCTION),
        (DeclarationKind.CONST, True, EntryKind.CONST_BLOCK_MEMBER),
        (DeclarationKind.VAR, True, EntryKind.VAR_BLOCK_MEMBER),
        (DeclarationKind.TYPE, True, EntryKind.TYPE_BLOCK_MEMBER),
        (DeclarationKind.CONST, False, EntryKind.SINGLE_CONST),
        (DeclarationKind.VAR, False, EntryKind.SINGLE_VAR),
        (DeclarationKind.TYPE, False, EntryKind.SINGLE_TYPE),
        (DeclarationKind.IMPORT, True, EntryKind.IMPORT),
    ],
)
def test_entry_kind_for_declaration(
    kind: DeclarationKind, grouped: bool, expected: EntryKind
) -> None:
    """Test the declaration kind to entry kind mapping."""
    assert EntryKind.for_declaration(kind, grouped) is expected


@pytest.mark.unit
def test_declaration_kind_keyword() -> None:
    """Test methods share the func keyword."""
    assert DeclarationKind.METHOD.keyword == "func"
    assert DeclarationKind.CONST.keyword == "const"


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", " const A = 1", "const A = 1 ", "const  A = 1", "a\nb"])
def test_canonical_entry_rejects_unnormalized_text(text: str) -> None:
    """Test the single-line, normalized-whitespace invariant."""
    with pytest.raises(ValueError):
        CanonicalEntry(kind=EntryKind.SINGLE_CONST, text=text)


@pytest.mark.unit
def test_declaration_raw_text(declarations_of) -> None:
    """Test raw_text renders blocks over several lines and singles on one."""
    decls = declarations_of("package p\n\nconst (\n\tA = 1\n\tB = 2\n)\n\nconst C = 3\n")

    assert decls[0].raw_text == "const (\n\tA = 1\n\tB = 2\n)"
    assert decls[1].raw_text == "const C = 3"
