#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the mdcompose AST."""

from mdcompose.parsers.base import BaseParser
from mdcompose.parsers.inline_call import inline_call_plugin
from mdcompose.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["BaseParser", "MarkdownParser", "inline_call_plugin", "markdown_to_ast"]
