"""Export filtering for top-level declarations.

Mirrors what Go's ``ast.FileExports`` keeps, but as a pure function: the
input declarations are never modified, filtered copies are returned.

Rules
-----
- functions and methods survive iff their name is exported;
- const/var specs keep only their exported names and vanish when none are
  left (their values are kept as written);
- type specs and aliases survive iff the type name is exported;
- inside surviving types, unexported struct fields, interface methods and
  embedded types are removed and a marker comment records the removal;
- inside composite-literal values, elements keyed by an unexported
  identifier are removed;
- grouped declarations left without members vanish;
- imports pass through untouched.
"""

from collections.abc import Iterable
from dataclasses import replace

from goexphash.models import (
    SPEC_TYPES,
    Declaration,
    DeclarationKind,
    SyntaxNode,
    leaf,
)

__all__ = [
    "FILTERED_FIELDS_MARKER",
    "FILTERED_METHODS_MARKER",
    "is_exported",
    "filter_exports",
    "filter_declaration",
]

FILTERED_FIELDS_MARKER = "/* contains filtered or unexported fields */"
FILTERED_METHODS_MARKER = "/* contains filtered or unexported methods */"

# Predeclared identifiers that may be embedded in interfaces (constraints)
_PREDECLARED = frozenset(
    {
        "any",
        "bool",
        "byte",
        "comparable",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

_METHOD_ELEM_TYPES = frozenset({"method_elem", "method_spec"})
_TYPE_ELEM_TYPES = frozenset({"type_elem", "constraint_elem", "interface_type_name"})
_SPEC_LIST_TYPES = frozenset({"var_spec_list", "import_spec_list"})


def is_exported(name: str) -> bool:
    """Check Go's export rule: the identifier starts with an upper-case letter.

    Parameters
    ----------
    name : str
        Identifier.

    Returns
    -------
    bool
        True if the identifier is exported.
    """
    return bool(name) and name[0].isupper()


def filter_exports(declarations: Iterable[Declaration]) -> list[Declaration]:
    """Keep only the exported part of each declaration.

    Parameters
    ----------
    declarations : Iterable[Declaration]
        Declarations of one file, in source order.

    Returns
    -------
    list[Declaration]
        New declarations restricted to exported items, in the same order.
    """
    kept: list[Declaration] = []
    for decl in declarations:
        filtered = filter_declaration(decl)
        if filtered is not None:
            kept.append(filtered)
    return kept


def filter_declaration(decl: Declaration) -> Declaration | None:
    """Filter one declaration.

    Parameters
    ----------
    decl : Declaration
        Declaration to filter.

    Returns
    -------
    Declaration | None
        Filtered copy, the declaration itself if nothing changes, or None
        if nothing exported remains.
    """
    if decl.kind in (DeclarationKind.FUNCTION, DeclarationKind.METHOD):
        return decl if decl.names and is_exported(decl.names[0]) else None
    if decl.kind is DeclarationKind.IMPORT:
        return decl

    node, remaining = _filter_spec_container(decl.node)
    if remaining == 0:
        return None
    return replace(decl, node=node)


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------


def _filter_spec_container(node: SyntaxNode) -> tuple[SyntaxNode, int]:
    children: list[SyntaxNode] = []
    remaining = 0
    for child in node.children:
        if child.type in SPEC_TYPES:
            spec = _filter_spec(child)
            if spec is None:
                continue
            children.append(spec)
            remaining += 1
        elif child.type in _SPEC_LIST_TYPES:
            inner, count = _filter_spec_container(child)
            children.append(inner)
            remaining += count
        else:
            children.append(child)
    return node.with_children(children), remaining


def _filter_spec(spec: SyntaxNode) -> SyntaxNode | None:
    if spec.type in ("const_spec", "var_spec"):
        return _filter_value_spec(spec)
    if spec.type in ("type_spec", "type_alias"):
        name = spec.child_by_field("name")
        if name is None or not is_exported(name.text):
            return None
        return spec.with_children(
            _filter_type(c) if c.field == "type" else c for c in spec.children
        )
    return spec


def _filter_value_spec(spec: SyntaxNode) -> SyntaxNode | None:
    children = spec.children
    idx = 0
    while idx < len(children) and (children[idx].field == "name" or children[idx].type == ","):
        idx += 1

    names = [c for c in children[:idx] if c.field == "name" and is_exported(c.text)]
    if not names:
        return None

    rest: list[SyntaxNode] = []
    for child in children[idx:]:
        if child.field == "type":
            rest.append(_filter_type(child))
        elif child.field == "value":
            rest.append(_filter_values(child))
        else:
            rest.append(child)
    return spec.with_children(_comma_join(names) + rest)


def _comma_join(nodes: list[SyntaxNode]) -> list[SyntaxNode]:
    joined: list[SyntaxNode] = []
    for i, node in enumerate(nodes):
        if i:
            joined.append(leaf(","))
        joined.append(node)
    return joined


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


def _filter_type(node: SyntaxNode) -> SyntaxNode:
    if node.type == "field_declaration_list":
        return _filter_fields(node)
    if node.type == "interface_type":
        return _filter_interface(node)
    if node.is_leaf:
        return node
    return node.with_children(_filter_type(c) for c in node.children)


def _filter_fields(node: SyntaxNode) -> SyntaxNode:
    children: list[SyntaxNode] = []
    incomplete = False
    for child in node.children:
        if child.type != "field_declaration":
            children.append(child)
            continue
        field = _filter_field(child)
        if field is None or len(field.children_by_field("name")) < len(
            child.children_by_field("name")
        ):
            incomplete = True
        if field is not None:
            children.append(field)

    if incomplete:
        children = _insert_before_closer(children, FILTERED_FIELDS_MARKER)
    return node.with_children(children)


def _filter_field(field: SyntaxNode) -> SyntaxNode | None:
    names = field.children_by_field("name")
    if not names:
        embedded = field.child_by_field("type")
        name = _embedded_name(embedded) if embedded is not None else None
        return field if name is not None and is_exported(name) else None

    exported = [n for n in names if is_exported(n.text)]
    if not exported:
        return None

    if len(exported) == len(names):
        return field.with_children(
            _filter_type(c) if c.field == "type" else c for c in field.children
        )

    rest = [
        _filter_type(c) if c.field == "type" else c
        for c in field.children
        if c.field != "name" and c.type != ","
    ]
    return field.with_children(_comma_join(exported) + rest)


def _filter_interface(node: SyntaxNode) -> SyntaxNode:
    children: list[SyntaxNode] = []
    incomplete = False
    for child in node.children:
        if child.type in _METHOD_ELEM_TYPES:
            name = child.child_by_field("name")
            if name is None or not is_exported(name.text):
                incomplete = True
                continue
            children.append(_filter_type(child))
        elif child.type in _TYPE_ELEM_TYPES and not _keeps_embedded(child):
            incomplete = True
        else:
            children.append(_filter_type(child) if child.named else child)

    if incomplete:
        children = _insert_before_closer(children, FILTERED_METHODS_MARKER)
    return node.with_children(children)


def _keeps_embedded(elem: SyntaxNode) -> bool:
    """Decide whether an embedded interface element survives filtering.

    A lone embedded interface name survives iff it is exported or
    predeclared; unions and approximation elements (``~int | string``) are
    type sets and always survive.
    """
    members = elem.named_children if not elem.is_leaf else [elem]
    if len(members) != 1:
        return True
    name = _embedded_name(members[0])
    if name is None:
        return True
    return is_exported(name) or name in _PREDECLARED


def _embedded_name(node: SyntaxNode) -> str | None:
    if node.type in ("type_identifier", "identifier"):
        return node.text
    if node.type == "qualified_type":
        name = node.child_by_field("name")
        return name.text if name is not None else None
    if node.type in ("generic_type", "pointer_type", "parenthesized_type"):
        inner = node.child_by_field("type")
        if inner is None:
            named = node.named_children
            inner = named[0] if named else None
        return _embedded_name(inner) if inner is not None else None
    return None


def _insert_before_closer(children: list[SyntaxNode], marker: str) -> list[SyntaxNode]:
    marker_node = leaf("filter_marker", marker, named=True)
    for i in range(len(children) - 1, -1, -1):
        if children[i].type == "}":
            return children[:i] + [marker_node] + children[i:]
    return children + [marker_node]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def _filter_values(expression_list: SyntaxNode) -> SyntaxNode:
    if expression_list.type != "expression_list":
        return _filter_value(expression_list)
    return expression_list.with_children(_filter_value(c) for c in expression_list.children)


def _filter_value(node: SyntaxNode) -> SyntaxNode:
    if node.type == "composite_literal":
        return node.with_children(
            _filter_literal(c) if c.type == "literal_value" else c for c in node.children
        )
    if node.type == "literal_value":
        return _filter_literal(node)
    return node


def _filter_literal(literal: SyntaxNode) -> SyntaxNode:
    elements = [c for c in literal.children if c.named and c.type != "comment"]
    kept: list[SyntaxNode] = []
    for element in elements:
        if element.type == "keyed_element":
            key = _unwrap_element(element.named_children[0])
            if key.type in ("identifier", "field_identifier") and not is_exported(key.text):
                continue
            kept.append(element.with_children(_filter_element_value(c) for c in element.children))
        else:
            kept.append(_filter_element_value(element))

    if len(kept) == len(elements):
        return literal.with_children(
            _filter_element_value(c) if c.named else c for c in literal.children
        )

    children = [leaf("{")] + _comma_join(kept)
    children.append(leaf("filter_marker", FILTERED_FIELDS_MARKER, named=True))
    children.append(leaf("}"))
    return literal.with_children(children)


def _filter_element_value(node: SyntaxNode) -> SyntaxNode:
    if node.type == "literal_element":
        return node.with_children(_filter_value(c) for c in node.children)
    return _filter_value(node)


def _unwrap_element(node: SyntaxNode) -> SyntaxNode:
    if node.type == "literal_element" and len(node.named_children) == 1:
        return node.named_children[0]
    return node
