#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the feature toggles that decide which parser
capabilities are active, and therefore which node kinds can appear.
"""
# src/mdcompose/options/markdown.py


from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from mdcompose.constants import (
    DEFAULT_AUTOLINK,
    DEFAULT_FRONT_MATTER,
    DEFAULT_INLINE_CALL,
    DEFAULT_INLINE_CALL_DELIMITERS,
    DEFAULT_TABLES,
    DEFAULT_TASK_LIST,
)
from mdcompose.exceptions import ValidationError
from mdcompose.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

MistunePlugin = Union[str, Callable[[Any], None]]


@dataclass(frozen=True)
class MarkdownFeatures(BaseParserOptions):
    """Feature toggles for the Markdown parser.

    Parameters
    ----------
    autolink : bool, default True
        Convert bare URLs and email addresses into links.
    front_matter : bool, default True
        Read a leading YAML block (``---`` ... ``---``) as front matter.
    inline_call : bool, default True
        Support ``{{{ .components.widgets.VisitorCounter }}}`` component calls.
    inline_call_delimiters : tuple of str, default ("{", "}")
        Opening and closing characters of the inline call syntax. Each is
        repeated three times in the source text.
    tables : bool, default True
        Support pipe tables.
    task_list : bool, default True
        Support ``- [ ]`` / ``- [x]`` task list items.

    Notes
    -----
    No conflict rules exist between toggles. Identical opening and closing
    delimiters are not rejected; the parser's behavior for them is undefined.

    """

    autolink: bool = field(
        default=DEFAULT_AUTOLINK,
        metadata={"help": "Convert URLs and email addresses into links automatically", "cli_name": "no-autolink"},
    )
    front_matter: bool = field(
        default=DEFAULT_FRONT_MATTER,
        metadata={"help": "Parse a leading YAML front matter block", "cli_name": "no-front-matter"},
    )
    inline_call: bool = field(
        default=DEFAULT_INLINE_CALL,
        metadata={"help": "Support {{{ .pkg.Component }}} inline component calls", "cli_name": "no-inline-call"},
    )
    inline_call_delimiters: tuple[str, str] = field(
        default=DEFAULT_INLINE_CALL_DELIMITERS,
        metadata={"help": "Opening and closing characters for inline component calls"},
    )
    tables: bool = field(
        default=DEFAULT_TABLES,
        metadata={"help": "Support pipe tables", "cli_name": "no-tables"},
    )
    task_list: bool = field(
        default=DEFAULT_TASK_LIST,
        metadata={"help": "Support task list items (- [ ] / - [x])", "cli_name": "no-task-list"},
    )

    def __post_init__(self) -> None:
        """Normalize and check the inline call delimiters.

        Raises
        ------
        ValidationError
            If the delimiters are not a pair of single characters.

        """
        delimiters = self.inline_call_delimiters
        if isinstance(delimiters, str) and len(delimiters) == 2:
            delimiters = (delimiters[0], delimiters[1])
        if (
            not isinstance(delimiters, (tuple, list))
            or len(delimiters) != 2
            or not all(isinstance(d, str) and len(d) == 1 for d in delimiters)
        ):
            raise ValidationError(
                f"inline_call_delimiters must be a pair of single characters, got {self.inline_call_delimiters!r}",
                parameter_name="inline_call_delimiters",
                parameter_value=self.inline_call_delimiters,
            )
        object.__setattr__(self, "inline_call_delimiters", tuple(delimiters))

    def create_plugins(self) -> list[MistunePlugin]:
        """Build the mistune plugin list for the enabled features.

        One plugin is added per enabled toggle, always in the same order:
        autolink, inline call, tables, task list. Front matter is handled by
        the parser before tokenizing and contributes no plugin.

        Returns
        -------
        list
            Plugin names and plugin callables accepted by ``mistune.create_markdown``

        """
        from mdcompose.parsers.inline_call import inline_call_plugin

        plugins: list[MistunePlugin] = []
        if self.autolink:
            plugins.append("url")
        if self.inline_call:
            plugins.append(inline_call_plugin(self.inline_call_delimiters))
        if self.tables:
            plugins.append("table")
        if self.task_list:
            plugins.append("task_lists")

        logger.debug("Markdown features resolved to %d parser plugins", len(plugins))
        return plugins
