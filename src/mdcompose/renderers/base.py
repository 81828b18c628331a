#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mdcompose.ast import Document
from mdcompose.exceptions import InvalidOptionsError
from mdcompose.options.base import BaseRendererOptions
from mdcompose.utils.io_utils import OutputTarget, write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """
        write_content(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
