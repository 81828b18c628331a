#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_default_bindings.py
"""Unit tests for the built-in default bindings."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdcompose.ast import (
    Code,
    FencedCodeBlock,
    Heading,
    InlineCall,
    Link,
    Paragraph,
    StrongEmphasis,
    TableCell,
    Text,
)
from mdcompose.ast.nodes import NodeKind
from mdcompose.bindings import BindingTable, RenderContext, VisitScope, create_default_bindings
from mdcompose.bindings.defaults import FIXED_COMPONENTS

JB_DOM = "org.jetbrains.compose.web.dom"
SILK = "com.varabyte.kobweb.silk.components"


@pytest.mark.unit
class TestFixedComponents:
    """Tests for kinds rendered with a fixed component name."""

    @pytest.mark.parametrize("kind,template", sorted(FIXED_COMPONENTS.items()))
    def test_default_traversal(self, kind, template):
        """Test that fixed-component bindings keep the default traversal."""
        bindings = create_default_bindings(RenderContext())
        scope = VisitScope()
        assert bindings[kind](scope, Paragraph()) == template
        assert scope.children_override is None

    def test_heading_levels(self, plain_table):
        """Test the heading components for each level."""
        for level in range(1, 7):
            assert plain_table.render(Heading(level=level)).template == f"{JB_DOM}.H{level}"

    def test_table_cells(self, plain_table):
        """Test header and data cell components."""
        assert plain_table.render(TableCell(header=True)).template == f"{JB_DOM}.Th"
        assert plain_table.render(TableCell()).template == f"{JB_DOM}.Td"

    def test_strong_uses_bold(self, plain_table):
        """Test that strong emphasis renders with the B component."""
        assert plain_table.render(StrongEmphasis()).template == f"{JB_DOM}.B"

    def test_every_kind_has_default(self):
        """Test that create_default_bindings covers every kind."""
        assert set(create_default_bindings(RenderContext())) == set(NodeKind)


@pytest.mark.unit
class TestTextBinding:
    """Tests for the text binding."""

    def test_plain(self, plain_table):
        """Test plain text component."""
        result = plain_table.render(Text("Hello"))
        assert result.template == f'{JB_DOM}.Text("Hello")'
        assert result.children_override is None

    def test_enhanced(self, enhanced_table):
        """Test enhanced text component."""
        assert enhanced_table.render(Text("Hello")).template == f'{SILK}.text.Text("Hello")'

    def test_quotes_escaped(self, plain_table):
        """Test that double quotes in text are escaped."""
        template = plain_table.render(Text('He said "hi"')).template
        assert 'He said \\"hi\\"' in template

    @given(st.text(max_size=50))
    def test_no_unescaped_quotes(self, literal):
        """Test that every quote in the literal is escaped in the template."""
        template = BindingTable().render(Text(literal)).template
        inner = template[len(f'{JB_DOM}.Text("') : -len('")')]
        assert inner == literal.replace('"', '\\"')


@pytest.mark.unit
class TestLinkBinding:
    """Tests for the link binding."""

    def test_enhanced_link_consumes_children(self, enhanced_table):
        """Test that the enhanced link carries its label and skips its children."""
        result = enhanced_table.render(Link(destination="/page", children=[Text("Click")]))
        assert result.template == f'{SILK}.navigation.Link("/page", "Click")'
        assert result.children_override == []

    def test_enhanced_link_without_text(self, enhanced_table):
        """Test that an enhanced link without a text child gets an empty label."""
        result = enhanced_table.render(Link(destination="/page", children=[Code("x")]))
        assert result.template == f'{SILK}.navigation.Link("/page", "")'

    def test_enhanced_link_label_escaped(self, enhanced_table):
        """Test that quotes in the link label are escaped."""
        result = enhanced_table.render(Link(destination="/q", children=[Text('say "x"')]))
        assert '"say \\"x\\""' in result.template

    def test_plain_link_keeps_children(self, plain_table):
        """Test that the plain link lets the renderer visit its children."""
        node = Link(destination="/page", children=[Text("Click")])
        result = plain_table.render(node)
        assert result.template == f'{JB_DOM}.A("/page")'
        assert "Click" not in result.template
        assert result.children_override is None
        assert result.children_for(node) == node.children


@pytest.mark.unit
class TestCodeBindings:
    """Tests for code block and inline code bindings."""

    def test_code_block_lines(self, plain_table):
        """Test that each code line becomes a text node with a line break marker."""
        result = plain_table.render(FencedCodeBlock(literal="a\nb\n"))
        assert result.template.startswith(f"{JB_DOM}.Code(")
        assert result.children_override == [Text("a\\n"), Text("b\\n")]

    def test_code_block_strips_surrounding_blank_lines(self, plain_table):
        """Test that leading and trailing blank lines are dropped."""
        result = plain_table.render(FencedCodeBlock(literal="\n  x = 1\n\n"))
        assert result.children_override == [Text("x = 1\\n")]

    def test_code_block_does_not_mutate_node(self, plain_table):
        """Test that the binding leaves the node untouched."""
        node = FencedCodeBlock(literal="a\nb\n", info="kotlin")
        plain_table.render(node)
        assert node.literal == "a\nb\n"
        assert node.children == []

    def test_inline_code(self, plain_table):
        """Test that inline code renders its literal as a single text child."""
        result = plain_table.render(Code("val x = 1"))
        assert result.template == f"{JB_DOM}.Code"
        assert result.children_override == [Text("val x = 1")]


@pytest.mark.unit
class TestInlineCallBinding:
    """Tests for the inline call binding."""

    def test_relative_call_gets_project_group(self, enhanced_table):
        """Test that a call starting with '.' is resolved against the project group."""
        result = enhanced_table.render(InlineCall(".components.widgets.VisitorCounter"))
        assert result.template == "org.example.site.components.widgets.VisitorCounter()"
        assert result.children_override == []

    def test_relative_call_without_group(self, plain_table):
        """Test that relative calls stay as written without a project group."""
        assert plain_table.render(InlineCall(".Widget")).template == ".Widget()"

    def test_call_with_arguments(self, plain_table):
        """Test that calls already ending in ')' are left as written."""
        result = plain_table.render(InlineCall(' org.example.Badge("new") '))
        assert result.template == 'org.example.Badge("new")'
