"""Canonical text forms for Go declarations.

- render: token renderer with fixed spacing
- blocks: grouped declaration rendering and splitting
- text: whitespace normalization and signature extraction
"""

from goexphash.canonical.blocks import render_block, split_block
from goexphash.canonical.render import render_node, tokenize
from goexphash.canonical.text import function_signature, normalize_whitespace

__all__ = [
    "render_node",
    "tokenize",
    "render_block",
    "split_block",
    "normalize_whitespace",
    "function_signature",
]
