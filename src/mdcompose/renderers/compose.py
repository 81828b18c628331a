#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/renderers/compose.py
"""Kotlin Compose source renderer.

This module walks the AST and asks a :class:`~mdcompose.bindings.BindingTable`
how to render each node. The text a binding returns is written verbatim as a
component invocation; the node's children (or the binding's children override)
are rendered inside a trailing content lambda::

    org.jetbrains.compose.web.dom.H1 {
        org.jetbrains.compose.web.dom.Text("Title")
    }

A node with nothing to descend into is written as a plain call, with ``()``
appended when the template does not already end in a call.

"""

from __future__ import annotations

import logging
from typing import Optional

from mdcompose.ast import Document, Node
from mdcompose.bindings import BindingTable
from mdcompose.constants import COMPOSABLE_ANNOTATION, FRONT_MATTER_CONSTANT
from mdcompose.exceptions import MdComposeError, RenderingError
from mdcompose.options.compose import ComposeRendererOptions
from mdcompose.renderers.base import BaseRenderer
from mdcompose.utils.decorators import debug_timer
from mdcompose.utils.escape import escape_kotlin_string

logger = logging.getLogger(__name__)


def _as_call(template: str) -> str:
    return template if template.endswith(")") else f"{template}()"


def _simple_name(qualified: str) -> str:
    return qualified.rsplit(".", 1)[-1]


class ComposeRenderer(BaseRenderer):
    """Render AST documents as Kotlin page source calling UI components.

    Parameters
    ----------
    options : ComposeRendererOptions or None, default = None
        Generated source options
    bindings : BindingTable or None, default = None
        Binding table; a table of plain-component defaults when omitted.
        The table freezes on the first render.
    package : str, default ""
        Package declared at the top of the generated file (omitted when empty)
    page_name : str, default "MarkdownPage"
        Name of the generated page function

    Examples
    --------
        >>> from mdcompose.parsers.markdown import markdown_to_ast
        >>> renderer = ComposeRenderer(package="org.example.pages", page_name="IndexPage")
        >>> source = renderer.render_to_string(markdown_to_ast("# Hello"))

    Notes
    -----
    A renderer keeps no per-render state, so several threads may render
    different documents with one renderer as long as nobody registers
    bindings on its table (which a frozen table refuses anyway).

    """

    def __init__(
        self,
        options: ComposeRendererOptions | None = None,
        bindings: Optional[BindingTable] = None,
        package: str = "",
        page_name: str = "MarkdownPage",
    ):
        """Initialize the renderer with options and a binding table."""
        BaseRenderer._validate_options_type(options, ComposeRendererOptions, "compose")
        options = options or ComposeRendererOptions()
        super().__init__(options)
        self.options: ComposeRendererOptions = options
        self.bindings = bindings if bindings is not None else BindingTable()
        self.package = package
        self.page_name = page_name

    def render_to_string(self, doc: Document) -> str:
        """Render a document as a complete Kotlin page file.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Kotlin source

        Raises
        ------
        RenderingError
            If a binding raises; no partial output is returned
        UnboundNodeKindError
            If a node kind has no binding

        """
        with debug_timer(logger, f"Rendering {self.page_name}"):
            body = self.render_body(doc, depth=1)

        lines: list[str] = []
        if self.package:
            lines.extend([f"package {self.package}", ""])

        imports = [COMPOSABLE_ANNOTATION]
        if self.options.page_annotation:
            imports.append(self.options.page_annotation)
        lines.extend(f"import {name}" for name in sorted(imports))
        lines.append("")

        if self.options.emit_front_matter and doc.front_matter:
            lines.extend(self._render_front_matter(doc.front_matter))
            lines.append("")

        if self.options.page_annotation:
            lines.append(f"@{_simple_name(self.options.page_annotation)}")
        lines.append(f"@{_simple_name(COMPOSABLE_ANNOTATION)}")
        lines.append(f"fun {self.page_name}() {{")

        return "\n".join(lines) + "\n" + body + "}\n"

    def render_body(self, doc: Document, depth: int = 0) -> str:
        """Render only the component calls for the document's children.

        Parameters
        ----------
        doc : Document
            The document node to render
        depth : int, default 0
            Indentation depth of the top-level calls

        Returns
        -------
        str
            One line per call, newline terminated

        """
        output: list[str] = []
        for child in doc.children:
            self._render_node(child, depth, output)
        return "".join(output)

    def _render_node(self, node: Node, depth: int, output: list[str]) -> None:
        """Render one node and, recursively, the nodes its binding descends into."""
        kind = node.kind
        try:
            result = self.bindings.render(node)
        except MdComposeError:
            raise
        except Exception as e:
            label = kind.value if kind is not None else type(node).__name__
            raise RenderingError(
                f"Binding for '{label}' failed: {e}", rendering_stage="binding", original_error=e
            ) from e

        prefix = self.options.indent * depth
        children = result.children_for(node)
        if not children:
            output.append(f"{prefix}{_as_call(result.template)}\n")
            return

        output.append(f"{prefix}{result.template} {{\n")
        for child in children:
            self._render_node(child, depth + 1, output)
        output.append(f"{prefix}}}\n")

    def _render_front_matter(self, front_matter: dict[str, list[str]]) -> list[str]:
        """Render front matter as a ``Map<String, List<String>>`` constant."""
        lines = [f"private val {FRONT_MATTER_CONSTANT}: Map<String, List<String>> = mapOf("]
        for key, values in front_matter.items():
            items = ", ".join(f'"{escape_kotlin_string(value)}"' for value in values)
            lines.append(f'{self.options.indent}"{escape_kotlin_string(key)}" to listOf({items}),')
        lines.append(")")
        return lines
