#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdcompose - generate Compose UI component calls from Markdown.

mdcompose parses Markdown into a small AST and renders every node through a
binding table: one binding function per node kind, each returning the text of
the component invocation that renders it. The defaults target the plain
``org.jetbrains.compose.web.dom`` components, or the Silk components when the
project depends on them; any kind can be rebound.

Examples
--------
Convert one document:

    >>> from mdcompose import MarkdownConfig, convert_markdown
    >>> source = convert_markdown("# Hello", MarkdownConfig(project_group="org.example"))

Rebind a node kind before rendering:

    >>> from mdcompose import BindingTable, NodeKind
    >>> table = BindingTable()
    >>> table.register(NodeKind.H1, lambda scope, node: "org.example.components.Title")
    >>> source = convert_markdown("# Hello", bindings=table)

"""

__version__ = "1.0.0"

from mdcompose.api import convert_markdown, convert_markdown_tree, page_function_name
from mdcompose.ast import Document, NodeKind
from mdcompose.bindings import (
    BindingTable,
    RenderContext,
    RenderResult,
    VisitScope,
    create_default_bindings,
    detect_enhanced_components,
    fixed_template,
)
from mdcompose.config import load_markdown_config
from mdcompose.exceptions import (
    BindingTableFrozenError,
    DependencyError,
    FileError,
    MdComposeError,
    ParsingError,
    RenderingError,
    UnboundNodeKindError,
    ValidationError,
)
from mdcompose.options import ComponentOptions, ComposeRendererOptions, MarkdownConfig, MarkdownFeatures
from mdcompose.parsers import MarkdownParser, markdown_to_ast
from mdcompose.renderers import ComposeRenderer

__all__ = [
    "__version__",
    # API
    "convert_markdown",
    "convert_markdown_tree",
    "load_markdown_config",
    "markdown_to_ast",
    "page_function_name",
    # Model
    "BindingTable",
    "ComponentOptions",
    "ComposeRenderer",
    "ComposeRendererOptions",
    "Document",
    "MarkdownConfig",
    "MarkdownFeatures",
    "MarkdownParser",
    "NodeKind",
    "RenderContext",
    "RenderResult",
    "VisitScope",
    "create_default_bindings",
    "detect_enhanced_components",
    "fixed_template",
    # Exceptions
    "BindingTableFrozenError",
    "DependencyError",
    "FileError",
    "MdComposeError",
    "ParsingError",
    "RenderingError",
    "UnboundNodeKindError",
    "ValidationError",
]
