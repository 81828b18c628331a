#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/bindings/scope.py
"""Per-visit scope handed to binding functions.

A binding function may use the scope to change which nodes the renderer
descends into after emitting the node's template:

- ``children_override is None``: descend into the node's real children
- ``children_override == []``: do not descend
- non-empty ``children_override``: descend into these nodes instead

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from mdcompose.ast.nodes import Node


@dataclass
class VisitScope:
    """Mutable context for a single node visit.

    A fresh scope is created for every node; it is never shared between nodes.
    """

    children_override: Optional[list[Node]] = None

    def consume_children(self) -> None:
        """Mark the node's children as already handled so the renderer skips them."""
        self.children_override = []

    def replace_children(self, nodes: Iterable[Node]) -> None:
        """Visit ``nodes`` instead of the node's real children."""
        self.children_override = list(nodes)


class RenderResult(NamedTuple):
    """Outcome of rendering one node through its binding.

    Unpacks as ``(template, scope)``.
    """

    template: str
    scope: VisitScope

    @property
    def children_override(self) -> Optional[list[Node]]:
        return self.scope.children_override

    def children_for(self, node: Node) -> list[Node]:
        """Return the nodes to descend into after this node's template."""
        override = self.scope.children_override
        return node.children if override is None else override
