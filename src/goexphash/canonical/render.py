"""Token renderer for Go syntax trees.

Renders a :class:`~goexphash.models.SyntaxNode` to a single line of Go text
with fixed, gofmt-like spacing. Spacing is derived from the tokens and their
parent node types only, never from the source layout, so re-indenting or
re-spacing a declaration cannot change its rendering.

Comments and statement terminators are dropped. Members of a struct or
interface body are joined with `; `, as gofmt prints a one-line body, so an
embedded type followed by another never reads like a named field. Trailing
commas before a closing bracket are dropped, since gofmt adds them whenever a
list is split over several lines.
"""

from collections.abc import Collection
from typing import NamedTuple

from goexphash.models import SyntaxNode

__all__ = ["Token", "render_node", "tokenize"]

# Tokens that behave like operands when deciding about a following bracket
_OPERAND_TYPES = frozenset(
    {
        "identifier",
        "type_identifier",
        "field_identifier",
        "package_identifier",
        "blank_identifier",
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
        "true",
        "false",
        "nil",
        "iota",
    }
)

_NO_SPACE_BEFORE = frozenset({")", "]", ",", ";", ":", ".", "++", "--"})
_NO_SPACE_AFTER = frozenset({"(", "[", ".", "..."})

_UNARY_OPERATORS = frozenset({"*", "&", "-", "+", "!", "^", "<-", "~"})
_UNARY_PARENTS = frozenset({"unary_expression", "pointer_type", "negated_type"})

# Brackets that belong to a type literal: `[]T`, `[N]T`, `[...]T`, `map[K]V`
_TYPE_BRACKET_PARENTS = frozenset(
    {"slice_type", "array_type", "implicit_length_array_type", "map_type"}
)

_EMPTY_BODY_PARENTS = frozenset({"field_declaration_list", "interface_type"})
_MEMBER_LIST_PARENTS = _EMPTY_BODY_PARENTS
_NON_MEMBER_TYPES = frozenset({"comment", "filter_marker"})
_CLOSERS = frozenset({")", "]", "}"})


class Token(NamedTuple):
    """A rendered leaf with the context needed to space it."""

    text: str
    type: str
    parent: str
    grandparent: str


def tokenize(node: SyntaxNode, *, skip_fields: Collection[str] = ()) -> list[Token]:
    """Flatten a syntax tree into renderable tokens.

    Parameters
    ----------
    node : SyntaxNode
        Root of the subtree to render.
    skip_fields : Collection[str], optional
        Field names whose children of ``node`` itself are omitted
        (e.g. ``{"body"}`` for a function signature).

    Returns
    -------
    list[Token]
        Tokens in source order, without comments, terminators or trailing
        commas. Struct and interface members are separated by `;` tokens.
    """
    tokens: list[Token] = []
    if node.is_leaf:
        _emit(node, "", "", tokens)
    else:
        for child in node.children:
            if child.field is not None and child.field in skip_fields:
                continue
            _collect(child, node, "", tokens)
    return _drop_trailing_commas(tokens)


def render_node(node: SyntaxNode, *, skip_fields: Collection[str] = ()) -> str:
    """Render a syntax tree as one line of Go text.

    Parameters
    ----------
    node : SyntaxNode
        Root of the subtree to render.
    skip_fields : Collection[str], optional
        Field names of direct children of ``node`` to omit.

    Returns
    -------
    str
        Rendered text.
    """
    tokens = tokenize(node, skip_fields=skip_fields)
    parts: list[str] = []
    for i, tok in enumerate(tokens):
        if i:
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None
            if _needs_space(tokens[i - 1], tok, nxt):
                parts.append(" ")
        parts.append(tok.text)
    return "".join(parts)


def _collect(node: SyntaxNode, parent: SyntaxNode, grandparent: str, out: list[Token]) -> None:
    if node.type == "comment":
        return
    if node.is_leaf:
        _emit(node, parent.type, grandparent, out)
        return
    separate = node.type in _MEMBER_LIST_PARENTS
    seen_member = False
    for child in node.children:
        if separate and child.named and child.type not in _NON_MEMBER_TYPES:
            if seen_member:
                out.append(Token(";", ";", node.type, parent.type))
            seen_member = True
        _collect(child, node, parent.type, out)


def _emit(node: SyntaxNode, parent: str, grandparent: str, out: list[Token]) -> None:
    text = node.text
    if not node.named:
        if not text.strip() or text == "\x00":
            return
        if text == ";" and parent != "for_clause":
            return
    if not text:
        return
    out.append(Token(text, node.type, parent, grandparent))


def _drop_trailing_commas(tokens: list[Token]) -> list[Token]:
    kept: list[Token] = []
    for i, tok in enumerate(tokens):
        if tok.text == "," and i + 1 < len(tokens) and tokens[i + 1].text in _CLOSERS:
            continue
        kept.append(tok)
    return kept


def _needs_space(prev: Token, cur: Token, nxt: Token | None) -> bool:
    if prev.text in _NO_SPACE_AFTER:
        return False
    if prev.text in _UNARY_OPERATORS and prev.parent in _UNARY_PARENTS:
        return False
    if prev.text == "*" and prev.parent == "field_declaration":
        # embedded pointer field: `*Base`
        return False
    if prev.text == "{" and prev.parent == "literal_value":
        return False
    if prev.parent == "channel_type" and {prev.text, cur.text} == {"chan", "<-"}:
        return False
    if prev.text == ":" and prev.parent == "slice_expression":
        return False
    if prev.text == "]" and prev.parent in _TYPE_BRACKET_PARENTS:
        return False

    if cur.text in _NO_SPACE_BEFORE:
        return False
    if cur.text == "..." and cur.parent == "argument_list":
        return False

    if cur.text == "(":
        if cur.parent == "parameter_list":
            if prev.text == ")":
                # result list after the parameter list
                return True
            if prev.text == "func":
                # receiver of a method declaration
                return cur.grandparent == "method_declaration"
            return False
        return not _is_operand_end(prev)

    if cur.text == "[":
        if cur.parent in _TYPE_BRACKET_PARENTS:
            return prev.text != "map"
        return not _is_operand_end(prev)

    if cur.text == "{":
        if cur.parent == "literal_value":
            return False
        if nxt is not None and nxt.text == "}" and cur.parent in _EMPTY_BODY_PARENTS:
            return False
        return True

    if cur.text == "}":
        return not (cur.parent == "literal_value" or prev.text == "{")

    return True


def _is_operand_end(tok: Token) -> bool:
    return tok.type in _OPERAND_TYPES or tok.text in _CLOSERS or tok.text == "func"
