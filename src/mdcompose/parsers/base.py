#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/parsers/base.py
"""Base class for document parsers.

This module defines the abstract base class for parsers that turn source
documents into the mdcompose AST.

"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdcompose.ast import Document
from mdcompose.exceptions import FileError, FileNotFoundError, InvalidOptionsError
from mdcompose.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    Notes
    -----
    ``parse()`` accepts:
    - str: document text
    - Path: file to read
    - bytes: UTF-8 encoded document
    - IO: text or binary file-like object

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, bytes or IO
            Input document

        Returns
        -------
        Document
            AST document node

        """

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load text from the supported input types.

        Raises
        ------
        FileNotFoundError
            If a Path input does not exist
        FileError
            If a Path input cannot be read or decoded

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8-sig")
        if isinstance(input_data, Path):
            if not input_data.is_file():
                raise FileNotFoundError(str(input_data))
            try:
                return input_data.read_text(encoding="utf-8-sig")
            except (OSError, UnicodeDecodeError) as e:
                raise FileError(f"Could not read {input_data}: {e}", file_path=str(input_data), original_error=e) from e

        content = input_data.read()
        if isinstance(content, bytes):
            return content.decode("utf-8-sig")
        if isinstance(input_data, io.TextIOBase) or isinstance(content, str):
            return content
        raise TypeError(f"Unsupported input type: {type(input_data)}")
