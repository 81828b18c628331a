#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/parsers/inline_call.py
"""Mistune plugin for inline component calls.

Text wrapped in three opening and three closing delimiters, such as::

    {{{ .components.widgets.VisitorCounter }}}

is emitted as an ``inline_call`` token carrying the text between the
delimiters.

"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional

from mdcompose.constants import DEFAULT_INLINE_CALL_DELIMITERS, INLINE_CALL_DELIMITER_COUNT

INLINE_CALL_TOKEN = "inline_call"


def inline_call_pattern(delimiters: tuple[str, str] = DEFAULT_INLINE_CALL_DELIMITERS) -> str:
    """Return the regular expression source matching an inline call.

    Parameters
    ----------
    delimiters : tuple of str
        Opening and closing delimiter characters

    """
    open_char, close_char = delimiters
    opening = re.escape(open_char * INLINE_CALL_DELIMITER_COUNT)
    closing = re.escape(close_char * INLINE_CALL_DELIMITER_COUNT)
    return rf"{opening}(?P<inline_call_text>[\s\S]+?){closing}"


def _parse_inline_call(inline: Any, m: re.Match, state: Any) -> Optional[int]:
    call = m.group("inline_call_text").strip()
    if not call:
        # No match; mistune keeps the delimiters as text
        return None
    state.append_token({"type": INLINE_CALL_TOKEN, "raw": call})
    return m.end()


def inline_call_plugin(delimiters: tuple[str, str] = DEFAULT_INLINE_CALL_DELIMITERS) -> Callable[[Any], None]:
    """Create a mistune plugin recognizing inline calls with the given delimiters.

    Parameters
    ----------
    delimiters : tuple of str
        Opening and closing delimiter characters

    Returns
    -------
    callable
        Plugin to pass in ``mistune.create_markdown(plugins=[...])``

    """
    pattern = inline_call_pattern(delimiters)

    def plugin(md: Any) -> None:
        md.inline.register(INLINE_CALL_TOKEN, pattern, _parse_inline_call, before="link")

    return plugin
