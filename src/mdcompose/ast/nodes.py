#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/ast/nodes.py
"""AST node classes for Markdown documents.

This module defines the node hierarchy produced by the Markdown parser and
consumed by the component renderer. Each node represents a structural or
inline element of the document and reports a :class:`NodeKind`, the key used
to look up the binding that renders it.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, FencedCodeBlock, ThematicBreak
    - BulletList, OrderedList, ListItem
    - TableBlock, TableHead, TableBody, TableRow, TableCell

Inline nodes:
    - Text, Emphasis, StrongEmphasis, Code
    - Link, Image, HardLineBreak, InlineCall

Every node exposes an ordered ``children`` list. Nodes that carry literal text
(Text, Code, FencedCodeBlock, InlineCall) keep it in a ``literal`` field.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from mdcompose.constants import Alignment, TaskStatus


class NodeKind(str, Enum):
    """Closed set of node kinds that have a rendering binding.

    The value of each member is the short name used to refer to the binding in
    configuration files (``h1``, ``a``, ``inline_code``...).
    """

    TEXT = "text"
    HEADING_1 = "h1"
    HEADING_2 = "h2"
    HEADING_3 = "h3"
    HEADING_4 = "h4"
    HEADING_5 = "h5"
    HEADING_6 = "h6"
    PARAGRAPH = "p"
    LINE_BREAK = "br"
    LINK = "a"
    EMPHASIS = "em"
    STRONG_EMPHASIS = "strong"
    THEMATIC_BREAK = "hr"
    BULLET_LIST = "ul"
    ORDERED_LIST = "ol"
    LIST_ITEM = "li"
    CODE_BLOCK = "code"
    INLINE_CODE = "inline_code"
    IMAGE = "img"
    TABLE = "table"
    TABLE_HEAD = "thead"
    TABLE_BODY = "tbody"
    TABLE_ROW = "tr"
    TABLE_DATA_CELL = "td"
    TABLE_HEADER_CELL = "th"
    INLINE_CALL = "inline_call"

    @classmethod
    def from_name(cls, name: str) -> NodeKind:
        """Look up a kind by its short name (``"h1"``) or member name (``"HEADING_1"``).

        Raises
        ------
        ValueError
            If the name matches no kind

        """
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown node kind: {name!r}") from None


_HEADING_KINDS = (
    NodeKind.HEADING_1,
    NodeKind.HEADING_2,
    NodeKind.HEADING_3,
    NodeKind.HEADING_4,
    NodeKind.HEADING_5,
    NodeKind.HEADING_6,
)


def heading_kind(level: int) -> NodeKind:
    """Return the node kind for a heading level.

    Parameters
    ----------
    level : int
        Heading level, 1 through 6

    Raises
    ------
    ValueError
        If level is outside 1-6

    """
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    return _HEADING_KINDS[level - 1]


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    children : list of Node
        Ordered child nodes
    metadata : dict
        Arbitrary metadata associated with this node

    """

    children: list[Node]
    metadata: dict[str, Any]

    @property
    @abstractmethod
    def kind(self) -> Optional[NodeKind]:
        """Return the node kind used to look up this node's binding."""

    def walk(self) -> Iterator[Node]:
        """Yield this node and all of its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    The document itself has no binding; the renderer emits its children
    inside the generated page function.

    Parameters
    ----------
    children : list of Node
        Block-level nodes in the document
    front_matter : dict
        Front matter values, each key mapped to a list of strings
    metadata : dict
        Arbitrary document metadata

    """

    children: list[Node] = field(default_factory=list)
    front_matter: dict[str, list[str]] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> Optional[NodeKind]:
        return None


@dataclass
class Heading(Node):
    """Heading node (levels 1-6)."""

    level: int
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")

    @property
    def kind(self) -> NodeKind:
        return heading_kind(self.level)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PARAGRAPH


@dataclass
class FencedCodeBlock(Node):
    """Code block.

    Parameters
    ----------
    literal : str
        Raw code content, including its trailing newline
    info : str or None
        Info string after the opening fence (language and attributes)

    """

    literal: str
    info: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.CODE_BLOCK

    @property
    def language(self) -> Optional[str]:
        """Return the first word of the info string, if any."""
        if not self.info:
            return None
        parts = self.info.split(maxsplit=1)
        return parts[0] if parts else None


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.THEMATIC_BREAK


@dataclass
class BulletList(Node):
    """Unordered list whose children are ListItem nodes."""

    children: list[Node] = field(default_factory=list)
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BULLET_LIST


@dataclass
class OrderedList(Node):
    """Ordered list whose children are ListItem nodes.

    Parameters
    ----------
    start : int
        Number of the first item

    """

    children: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ORDERED_LIST


@dataclass
class ListItem(Node):
    """List item.

    Parameters
    ----------
    task_status : {"checked", "unchecked"} or None
        Checkbox state for task list items, None for regular items

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LIST_ITEM


@dataclass
class TableBlock(Node):
    """Table; children are a TableHead and an optional TableBody."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TABLE


@dataclass
class TableHead(Node):
    """Table header section holding the header row."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TABLE_HEAD


@dataclass
class TableBody(Node):
    """Table body section holding the data rows."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TABLE_BODY


@dataclass
class TableRow(Node):
    """Table row holding TableCell nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TABLE_ROW


@dataclass
class TableCell(Node):
    """Table cell.

    Parameters
    ----------
    header : bool
        True for cells in the header row
    alignment : {"left", "center", "right"} or None
        Column alignment from the delimiter row

    """

    children: list[Node] = field(default_factory=list)
    header: bool = False
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TABLE_HEADER_CELL if self.header else NodeKind.TABLE_DATA_CELL


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text.

    Parameters
    ----------
    literal : str
        Text content, unescaped

    """

    literal: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.EMPHASIS


@dataclass
class StrongEmphasis(Node):
    """Strongly emphasized (bold) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.STRONG_EMPHASIS


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    literal : str
        Code content, verbatim

    """

    literal: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.INLINE_CODE


@dataclass
class Link(Node):
    """Hyperlink; children hold the link label.

    Parameters
    ----------
    destination : str
        Link target URL
    title : str or None
        Optional link title

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LINK


@dataclass
class Image(Node):
    """Image; children hold the alt text.

    Parameters
    ----------
    destination : str
        Image source URL
    title : str or None
        Optional image title

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.IMAGE


@dataclass
class HardLineBreak(Node):
    """Hard line break."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LINE_BREAK


@dataclass
class InlineCall(Node):
    """Component call written inline with the triple-delimiter syntax.

    ``{{{ .components.widgets.VisitorCounter }}}`` parses into an InlineCall
    whose literal is ``.components.widgets.VisitorCounter``.

    Parameters
    ----------
    literal : str
        Call text between the delimiters, stripped of surrounding whitespace

    """

    literal: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.INLINE_CALL
