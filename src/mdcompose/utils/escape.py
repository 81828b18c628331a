#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/utils/escape.py
"""Text escaping utilities for generated Kotlin source.

"""

from __future__ import annotations


def escape_quotes(text: str) -> str:
    r"""Escape double quotes so text can sit inside a Kotlin string literal.

    Only the quote character is touched; backslash sequences already present
    in the text (such as the ``\n`` marker added to code block lines) pass
    through unchanged.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with every ``"`` replaced by ``\"``

    Examples
    --------
        >>> escape_quotes('He said "hi"')
        'He said \\"hi\\"'

    """
    if not text:
        return text
    return text.replace('"', '\\"')


def escape_kotlin_string(text: str) -> str:
    r"""Escape arbitrary text for a double-quoted Kotlin string literal.

    Unlike :func:`escape_quotes`, this also escapes backslashes, ``$`` template
    markers and control characters. Used for values that never went through a
    binding, such as front matter.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_kotlin_string('cost: $5\n')
        'cost: \\$5\\n'

    """
    if not text:
        return text

    replacements = {
        "\\": "\\\\",
        '"': '\\"',
        "$": "\\$",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
    return "".join(replacements.get(char, char) for char in text)
