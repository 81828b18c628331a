#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/bindings/defaults.py
"""Built-in default binding for every node kind.

Each default maps a node to the text of a component invocation. Most kinds
use a fixed component name and let the renderer descend into the node's
children; text, links, code blocks, inline code and inline calls extract
content from the node and steer traversal through the visit scope.

"""

from __future__ import annotations

from typing import Callable

from mdcompose.ast.nodes import (
    Code,
    FencedCodeBlock,
    InlineCall,
    Link,
    Node,
    NodeKind,
    Text,
)
from mdcompose.bindings.context import RenderContext
from mdcompose.bindings.scope import VisitScope
from mdcompose.constants import CODE_BLOCK_STYLE, CODE_LINE_BREAK, JB_DOM, SILK
from mdcompose.utils.escape import escape_quotes

BindingFunction = Callable[[VisitScope, Node], str]

# Kinds rendered with a fixed component name and default traversal
FIXED_COMPONENTS: dict[NodeKind, str] = {
    NodeKind.IMAGE: f"{JB_DOM}.Img",
    NodeKind.HEADING_1: f"{JB_DOM}.H1",
    NodeKind.HEADING_2: f"{JB_DOM}.H2",
    NodeKind.HEADING_3: f"{JB_DOM}.H3",
    NodeKind.HEADING_4: f"{JB_DOM}.H4",
    NodeKind.HEADING_5: f"{JB_DOM}.H5",
    NodeKind.HEADING_6: f"{JB_DOM}.H6",
    NodeKind.PARAGRAPH: f"{JB_DOM}.P",
    NodeKind.LINE_BREAK: f"{JB_DOM}.Br",
    NodeKind.EMPHASIS: f"{JB_DOM}.Em",
    NodeKind.STRONG_EMPHASIS: f"{JB_DOM}.B",
    NodeKind.THEMATIC_BREAK: f"{JB_DOM}.Hr",
    NodeKind.BULLET_LIST: f"{JB_DOM}.Ul",
    NodeKind.ORDERED_LIST: f"{JB_DOM}.Ol",
    NodeKind.LIST_ITEM: f"{JB_DOM}.Li",
    NodeKind.TABLE: f"{JB_DOM}.Table",
    NodeKind.TABLE_HEAD: f"{JB_DOM}.Thead",
    NodeKind.TABLE_BODY: f"{JB_DOM}.Tbody",
    NodeKind.TABLE_ROW: f"{JB_DOM}.Tr",
    NodeKind.TABLE_DATA_CELL: f"{JB_DOM}.Td",
    NodeKind.TABLE_HEADER_CELL: f"{JB_DOM}.Th",
}


def fixed_template(template: str) -> BindingFunction:
    """Create a binding that always returns ``template`` and never touches the scope.

    Parameters
    ----------
    template : str
        Component invocation text, e.g. ``"org.jetbrains.compose.web.dom.H1"``

    """

    def binding(scope: VisitScope, node: Node) -> str:
        return template

    binding.__name__ = f"fixed_template({template!r})"
    return binding


def _text_binding(context: RenderContext) -> BindingFunction:
    def text(scope: VisitScope, node: Node) -> str:
        assert isinstance(node, Text)
        literal = escape_quotes(node.literal)
        if context.use_enhanced_components:
            return f'{SILK}.text.Text("{literal}")'
        return f'{JB_DOM}.Text("{literal}")'

    return text


def _link_binding(context: RenderContext) -> BindingFunction:
    def link(scope: VisitScope, node: Node) -> str:
        assert isinstance(node, Link)
        if context.use_enhanced_components:
            label = next((child.literal for child in node.children if isinstance(child, Text)), "")
            scope.consume_children()
            return f'{SILK}.navigation.Link("{node.destination}", "{escape_quotes(label)}")'
        return f'{JB_DOM}.A("{node.destination}")'

    return link


def _code_block(scope: VisitScope, node: Node) -> str:
    assert isinstance(node, FencedCodeBlock)
    # One text node per line so line structure survives whitespace collapsing
    scope.replace_children(Text(f"{line}{CODE_LINE_BREAK}") for line in node.literal.strip().split("\n"))
    return f"{JB_DOM}.Code({CODE_BLOCK_STYLE})"


def _inline_code(scope: VisitScope, node: Node) -> str:
    assert isinstance(node, Code)
    scope.replace_children([Text(node.literal)])
    return f"{JB_DOM}.Code"


def _inline_call_binding(context: RenderContext) -> BindingFunction:
    def inline_call(scope: VisitScope, node: Node) -> str:
        assert isinstance(node, InlineCall)
        call = node.literal.strip()
        if call.startswith(".") and context.project_group:
            call = f"{context.project_group}{call}"
        if not call.endswith(")"):
            call = f"{call}()"
        scope.consume_children()
        return call

    return inline_call


def create_default_bindings(context: RenderContext) -> dict[NodeKind, BindingFunction]:
    """Create the default binding for every node kind.

    Parameters
    ----------
    context : RenderContext
        Resolved context; the text and link defaults consult
        ``use_enhanced_components`` and the inline call default uses
        ``project_group``.

    Returns
    -------
    dict
        Exactly one binding per :class:`NodeKind` member

    """
    bindings: dict[NodeKind, BindingFunction] = {
        kind: fixed_template(template) for kind, template in FIXED_COMPONENTS.items()
    }
    bindings[NodeKind.TEXT] = _text_binding(context)
    bindings[NodeKind.LINK] = _link_binding(context)
    bindings[NodeKind.CODE_BLOCK] = _code_block
    bindings[NodeKind.INLINE_CODE] = _inline_code
    bindings[NodeKind.INLINE_CALL] = _inline_call_binding(context)
    return bindings
