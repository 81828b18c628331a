#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/parsers/markdown.py
"""Markdown to AST parser.

This module converts Markdown documents into the mdcompose AST using the
mistune parser. The active mistune plugins come from the
:class:`~mdcompose.options.MarkdownFeatures` toggles; front matter is read
before tokenizing.

"""

from __future__ import annotations

import html
import logging
from typing import Any, Literal, Optional

import yaml

from mdcompose.ast import (
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardLineBreak,
    Heading,
    Image,
    InlineCall,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    StrongEmphasis,
    TableBlock,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)
from mdcompose.constants import DEPS_MARKDOWN, FRONT_MATTER_FENCE
from mdcompose.exceptions import ParsingError
from mdcompose.options.markdown import MarkdownFeatures
from mdcompose.parsers.base import BaseParser, ParserInput
from mdcompose.parsers.inline_call import INLINE_CALL_TOKEN
from mdcompose.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


def _front_matter_values(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    features : MarkdownFeatures or None, default = None
        Parser feature toggles

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")

    Without tables:

        >>> parser = MarkdownParser(MarkdownFeatures(tables=False))
        >>> doc = parser.parse(markdown_text)

    """

    def __init__(self, features: MarkdownFeatures | None = None):
        """Initialize the Markdown parser with its feature toggles."""
        BaseParser._validate_options_type(features, MarkdownFeatures, "markdown")
        features = features or MarkdownFeatures()
        super().__init__(features)
        self.features: MarkdownFeatures = features

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, bytes or IO
            Markdown input to parse

        Returns
        -------
        Document
            AST document node, with front matter when that feature is enabled

        Raises
        ------
        ParsingError
            If the front matter block is not valid YAML

        """
        markdown_content = self._load_text_content(input_data)

        front_matter: dict[str, list[str]] = {}
        if self.features.front_matter:
            markdown_content, front_matter = self._extract_front_matter(markdown_content)

        import mistune

        markdown = mistune.create_markdown(renderer=None, plugins=self.features.create_plugins())
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children, front_matter=front_matter)

    def _extract_front_matter(self, content: str) -> tuple[str, dict[str, list[str]]]:
        """Split a leading YAML front matter block from the content.

        Parameters
        ----------
        content : str
            Markdown content

        Returns
        -------
        tuple
            (remaining content, front matter mapping)

        """
        if not (content.startswith(FRONT_MATTER_FENCE + "\n") or content.startswith(FRONT_MATTER_FENCE + "\r\n")):
            return content, {}

        lines = content.splitlines(keepends=True)
        end_index = next((i for i in range(1, len(lines)) if lines[i].strip() == FRONT_MATTER_FENCE), -1)
        if end_index <= 0:
            return content, {}

        yaml_content = "".join(lines[1:end_index])
        remaining_content = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ParsingError(f"Invalid YAML front matter: {e}", parsing_stage="front_matter", original_error=e) from e

        if data is None:
            return remaining_content, {}
        if not isinstance(data, dict):
            logger.warning("Ignoring front matter that is not a mapping (got %s)", type(data).__name__)
            return remaining_content, {}

        front_matter = {str(key): _front_matter_values(value) for key, value in data.items()}
        logger.debug("Parsed front matter keys: %s", ", ".join(front_matter))
        return remaining_content, front_matter

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return self._process_paragraph(token)
        elif token_type == "block_text":
            # Tight list item content: inline nodes go straight into the item
            return self._process_inline_tokens(token.get("children", []))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            # No node kind for quotes; keep the quoted content
            logger.debug("Unwrapping block quote")
            return self._process_tokens(token.get("children", []))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "blank_line":
            return None

        logger.debug("Dropping unsupported block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_paragraph(self, token: dict[str, Any]) -> Node:
        """Process paragraph token.

        A paragraph whose only content is an inline call is replaced by the
        call itself, so a call written on its own line is not wrapped in a
        paragraph component.

        """
        content = self._process_inline_tokens(token.get("children", []))
        if len(content) == 1 and isinstance(content[0], InlineCall):
            return content[0]
        return Paragraph(children=content)

    def _process_code_block(self, token: dict[str, Any]) -> FencedCodeBlock:
        attrs = token.get("attrs", {})
        info = attrs.get("info") if isinstance(attrs, dict) else None
        info = info.strip() if isinstance(info, str) and info.strip() else None
        return FencedCodeBlock(literal=token.get("raw", ""), info=info)

    def _process_list(self, token: dict[str, Any]) -> BulletList | OrderedList:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        items: list[Node] = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        if ordered:
            return OrderedList(children=items, start=attrs.get("start", 1), tight=tight)
        return BulletList(children=items, tight=tight)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        content = self._process_tokens(token.get("children", []))

        task_status: Optional[Literal["checked", "unchecked"]] = None
        attrs = token.get("attrs", {})
        if token.get("type") == "task_list_item" and isinstance(attrs, dict) and "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> TableBlock:
        """Process table token.

        Mistune puts header cells directly under ``table_head``; they are
        wrapped in a TableRow so head and body share the same structure.

        """
        sections: list[Node] = []
        for section_token in token.get("children", []):
            section_type = section_token.get("type", "")
            if section_type == "table_head":
                cells = self._process_table_cells(section_token.get("children", []), header=True)
                sections.append(TableHead(children=[TableRow(children=cells)]))
            elif section_type == "table_body":
                rows: list[Node] = [
                    TableRow(children=self._process_table_cells(row.get("children", []), header=False))
                    for row in section_token.get("children", [])
                ]
                sections.append(TableBody(children=rows))

        return TableBlock(children=sections)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]], header: bool) -> list[Node]:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            attrs = cell_token.get("attrs", {})
            alignment = attrs.get("align") if isinstance(attrs, dict) else None
            content = self._process_inline_tokens(cell_token.get("children", []))
            cells.append(TableCell(children=content, header=header, alignment=alignment))
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text runs.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []
        if not isinstance(tokens, list):
            return nodes

        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(literal=nodes[-1].literal + node.literal)
            else:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        # mistune leaves character references such as &amp; undecoded
        return Text(literal=html.unescape(token.get("raw", "")))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        return Text(literal=" ")

    def _handle_strong_token(self, token: dict[str, Any]) -> StrongEmphasis:
        return StrongEmphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(literal=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            destination=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            destination=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> HardLineBreak:
        return HardLineBreak()

    def _handle_inline_call_token(self, token: dict[str, Any]) -> InlineCall:
        return InlineCall(literal=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unsupported tokens

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "softbreak": self._handle_softbreak_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            INLINE_CALL_TOKEN: self._handle_inline_call_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Dropping unsupported inline token: %s", token_type)
        return None


def markdown_to_ast(markdown_content: ParserInput, features: MarkdownFeatures | None = None) -> Document:
    r"""Convert Markdown to AST.

    Parameters
    ----------
    markdown_content : str, Path, bytes or IO
        Markdown to parse
    features : MarkdownFeatures or None, default = None
        Parser feature toggles

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from mdcompose.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(features).parse(markdown_content)
