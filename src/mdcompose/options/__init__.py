#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for Markdown parsing, component bindings and source rendering."""

from mdcompose.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdcompose.options.compose import ComponentOptions, ComposeRendererOptions
from mdcompose.options.config import MarkdownConfig
from mdcompose.options.markdown import MarkdownFeatures

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ComponentOptions",
    "ComposeRendererOptions",
    "MarkdownConfig",
    "MarkdownFeatures",
]
