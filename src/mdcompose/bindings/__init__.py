#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/bindings/__init__.py
"""Component bindings: which component renders which node kind.

- :class:`BindingTable` holds one binding function per :class:`~mdcompose.ast.NodeKind`
- :class:`VisitScope` lets a binding redirect traversal of a node's children
- :func:`create_default_bindings` supplies the built-in binding for every kind
- :class:`RenderContext` carries the inputs the defaults depend on

"""

from mdcompose.bindings.context import RenderContext, detect_enhanced_components
from mdcompose.bindings.defaults import BindingFunction, create_default_bindings, fixed_template
from mdcompose.bindings.scope import RenderResult, VisitScope
from mdcompose.bindings.table import BindingTable

__all__ = [
    "BindingFunction",
    "BindingTable",
    "RenderContext",
    "RenderResult",
    "VisitScope",
    "create_default_bindings",
    "detect_enhanced_components",
    "fixed_template",
]
