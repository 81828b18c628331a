#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for component bindings and Kotlin source rendering.

This module defines the options controlling which components the default
bindings target, the fixed-template overrides read from configuration files,
and the shape of the generated page source.
"""
# src/mdcompose/options/compose.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdcompose.ast.nodes import NodeKind
from mdcompose.constants import (
    DEFAULT_INDENT,
    DEFAULT_PAGE_ANNOTATION,
    DEFAULT_PAGE_SUFFIX,
)
from mdcompose.exceptions import ValidationError
from mdcompose.options.base import BaseRendererOptions, CloneFrozenMixin


@dataclass(frozen=True)
class ComponentOptions(CloneFrozenMixin):
    """Options for the component binding table.

    Parameters
    ----------
    use_enhanced_components : bool or None, default None
        Use Silk components instead of plain Compose HTML components where a
        default binding offers both. None means detect it from the project's
        build files once, when the configuration is resolved.
    overrides : dict of str to str, default {}
        Fixed templates keyed by binding name (``h1``, ``a``, ``inline_code``...).
        Each one replaces the default binding with a function that always
        returns the given template.

    """

    use_enhanced_components: Optional[bool] = field(
        default=None,
        metadata={"help": "Use Silk components where available (default: detect from build files)"},
    )
    overrides: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Fixed template per binding name, e.g. {'h1': 'com.example.Title'}"},
    )

    def __post_init__(self) -> None:
        """Check override names and templates.

        Raises
        ------
        ValidationError
            If an override names an unknown binding or its template is not a string.

        """
        for name, template in self.overrides.items():
            try:
                NodeKind.from_name(name)
            except ValueError as e:
                raise ValidationError(
                    f"Unknown binding name in overrides: {name!r}",
                    parameter_name="overrides",
                    parameter_value=name,
                    original_error=e,
                ) from e
            if not isinstance(template, str):
                raise ValidationError(
                    f"Override template for {name!r} must be a string, got {type(template).__name__}",
                    parameter_name="overrides",
                    parameter_value=template,
                )


@dataclass(frozen=True)
class ComposeRendererOptions(BaseRendererOptions):
    """Options for rendering documents into Kotlin page source.

    Parameters
    ----------
    indent : str, default four spaces
        Indentation unit for nested component blocks.
    page_annotation : str or None, default "com.varabyte.kobweb.core.Page"
        Fully qualified annotation placed on each page function. None omits it.
    page_suffix : str, default "Page"
        Suffix appended to generated page function names.
    emit_front_matter : bool, default True
        Emit front matter as a ``FrontMatter`` map constant in the page file.

    """

    indent: str = field(
        default=DEFAULT_INDENT,
        metadata={"help": "Indentation unit for nested component blocks"},
    )
    page_annotation: Optional[str] = field(
        default=DEFAULT_PAGE_ANNOTATION,
        metadata={"help": "Annotation placed on generated page functions"},
    )
    page_suffix: str = field(
        default=DEFAULT_PAGE_SUFFIX,
        metadata={"help": "Suffix appended to generated page function names"},
    )
    emit_front_matter: bool = field(
        default=True,
        metadata={"help": "Emit front matter as a map constant", "cli_name": "no-front-matter-constant"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation unit.

        Raises
        ------
        ValidationError
            If indent contains anything other than spaces and tabs.

        """
        if not self.indent or self.indent.strip(" \t"):
            raise ValidationError(
                f"indent must be a non-empty run of spaces or tabs, got {self.indent!r}",
                parameter_name="indent",
                parameter_value=self.indent,
            )
