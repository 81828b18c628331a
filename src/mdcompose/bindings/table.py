#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/bindings/table.py
"""Binding table mapping node kinds to binding functions.

The table is configured once per session: it starts from the default
bindings, callers replace the ones they want, and the first render pass
freezes it. A frozen table is read-only, so independent documents may be
rendered from it concurrently.

"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from mdcompose.ast.nodes import Node, NodeKind
from mdcompose.bindings.context import RenderContext
from mdcompose.bindings.defaults import BindingFunction, create_default_bindings
from mdcompose.bindings.scope import RenderResult, VisitScope
from mdcompose.exceptions import BindingTableFrozenError, UnboundNodeKindError, ValidationError

logger = logging.getLogger(__name__)

KindKey = Union[NodeKind, str]


def _coerce_kind(kind: KindKey) -> NodeKind:
    if isinstance(kind, NodeKind):
        return kind
    try:
        return NodeKind.from_name(kind)
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="kind", parameter_value=kind, original_error=e) from e


class BindingTable:
    """Holds exactly one binding function per node kind.

    Parameters
    ----------
    context : RenderContext, optional
        Context the default bindings are created from. Defaults to plain
        components and no project group.
    defaults : bool, default True
        Install the default binding for every kind. A table built with
        ``defaults=False`` only resolves the kinds registered on it.
    bindings : Mapping, optional
        Bindings to register on top of the defaults, keyed by NodeKind or
        binding name (``"h1"``, ``"a"``...)

    Examples
    --------
    Replace the heading component:

        >>> table = BindingTable(RenderContext(use_enhanced_components=True))
        >>> table.register(NodeKind.HEADING_1, lambda scope, node: "com.example.Title")
        >>> table.render(Heading(level=1)).template
        'com.example.Title'

    """

    def __init__(
        self,
        context: Optional[RenderContext] = None,
        defaults: bool = True,
        bindings: Optional[Mapping[KindKey, BindingFunction]] = None,
    ):
        """Initialize the table from a render context."""
        self.context = context or RenderContext()
        self._bindings: dict[NodeKind, BindingFunction] = create_default_bindings(self.context) if defaults else {}
        self._frozen = False
        if bindings:
            self.register_many(bindings)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the table read-only. Called automatically by the first render."""
        if not self._frozen:
            logger.debug("Freezing binding table with %d bindings", len(self._bindings))
        self._frozen = True

    def copy(self) -> BindingTable:
        """Return an unfrozen copy holding the same bindings."""
        clone = BindingTable(self.context, defaults=False)
        clone._bindings = dict(self._bindings)
        return clone

    def register(self, kind: KindKey, fn: BindingFunction) -> None:
        """Replace the binding for ``kind``.

        Parameters
        ----------
        kind : NodeKind or str
            Node kind or its binding name
        fn : callable
            ``fn(scope, node) -> str``; must not mutate the node

        Raises
        ------
        BindingTableFrozenError
            If the table has already been used for rendering
        ValidationError
            If ``kind`` names no node kind or ``fn`` is not callable

        """
        node_kind = _coerce_kind(kind)
        if self._frozen:
            raise BindingTableFrozenError(node_kind)
        if not callable(fn):
            raise ValidationError(
                f"Binding for {node_kind.value!r} must be callable, got {type(fn).__name__}",
                parameter_name="fn",
                parameter_value=fn,
            )
        logger.debug("Registering binding for %s", node_kind.value)
        self._bindings[node_kind] = fn

    def register_many(self, bindings: Mapping[KindKey, BindingFunction]) -> None:
        """Register several bindings at once."""
        for kind, fn in bindings.items():
            self.register(kind, fn)

    def resolve(self, kind: KindKey) -> BindingFunction:
        """Return the binding registered for ``kind``.

        Raises
        ------
        UnboundNodeKindError
            If no binding is registered for the kind

        """
        node_kind = _coerce_kind(kind)
        try:
            return self._bindings[node_kind]
        except KeyError:
            raise UnboundNodeKindError(node_kind) from None

    def render(self, node: Node, kind: Optional[KindKey] = None) -> RenderResult:
        """Render one node through its binding.

        Parameters
        ----------
        node : Node
            Node to render
        kind : NodeKind or str, optional
            Kind whose binding to use; defaults to ``node.kind``

        Returns
        -------
        RenderResult
            The template and the visit scope the binding was given

        """
        if kind is None:
            if node.kind is None:
                raise ValidationError(
                    f"{type(node).__name__} has no node kind and cannot be rendered through a binding",
                    parameter_name="node",
                    parameter_value=node,
                )
            kind = node.kind
        binding = self.resolve(kind)
        self.freeze()

        scope = VisitScope()
        template = binding(scope, node)
        return RenderResult(template, scope)

    def __contains__(self, kind: object) -> bool:
        if isinstance(kind, (NodeKind, str)):
            try:
                return _coerce_kind(kind) in self._bindings
            except ValidationError:
                return False
        return False

    def __len__(self) -> int:
        return len(self._bindings)
