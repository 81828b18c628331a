#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown documents.

The parser turns Markdown text into these nodes; the component renderer walks
them and asks the binding table how to render each node kind.

Examples
--------
    >>> from mdcompose.ast import Document, Heading, NodeKind, Text
    >>> doc = Document(children=[Heading(level=1, children=[Text("Title")])])
    >>> doc.children[0].kind is NodeKind.HEADING_1
    True

"""

from __future__ import annotations

from mdcompose.ast.nodes import (
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardLineBreak,
    Heading,
    Image,
    InlineCall,
    Link,
    ListItem,
    Node,
    NodeKind,
    OrderedList,
    Paragraph,
    StrongEmphasis,
    TableBlock,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
    heading_kind,
)

__all__ = [
    "BulletList",
    "Code",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "HardLineBreak",
    "Heading",
    "Image",
    "InlineCall",
    "Link",
    "ListItem",
    "Node",
    "NodeKind",
    "OrderedList",
    "Paragraph",
    "StrongEmphasis",
    "TableBlock",
    "TableBody",
    "TableCell",
    "TableHead",
    "TableRow",
    "Text",
    "ThematicBreak",
    "heading_kind",
]
