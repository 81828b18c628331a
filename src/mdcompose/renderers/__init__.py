#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the mdcompose AST into output source."""

from mdcompose.renderers.base import BaseRenderer
from mdcompose.renderers.compose import ComposeRenderer

__all__ = ["BaseRenderer", "ComposeRenderer"]
