#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_binding_table.py
"""Unit tests for the binding table.

Tests cover:
- Every node kind resolves in a default table
- Registering replacements by kind and by short name
- Freezing on first render and copying
- Sparse tables without defaults

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdcompose.ast import Heading, Paragraph, Text
from mdcompose.ast.nodes import NodeKind
from mdcompose.bindings import BindingTable, RenderContext, VisitScope, fixed_template
from mdcompose.exceptions import BindingTableFrozenError, UnboundNodeKindError, ValidationError


@pytest.mark.unit
class TestDefaultTable:
    """Tests for a table built with the default bindings."""

    @pytest.mark.parametrize("enhanced", [False, True])
    def test_every_kind_resolves(self, enhanced):
        """Test that a default table has a binding for every kind."""
        table = BindingTable(RenderContext(use_enhanced_components=enhanced))
        for kind in NodeKind:
            assert callable(table.resolve(kind))
        assert len(table) == len(NodeKind)

    def test_default_context(self):
        """Test that the table defaults to plain components."""
        table = BindingTable()
        assert table.context == RenderContext()
        assert table.render(Text("hi")).template == 'org.jetbrains.compose.web.dom.Text("hi")'

    def test_contains(self, plain_table):
        """Test membership by kind and by short name."""
        assert NodeKind.LINK in plain_table
        assert "h1" in plain_table
        assert "blockquote" not in plain_table
        assert 42 not in plain_table


@pytest.mark.unit
class TestRegister:
    """Tests for replacing bindings."""

    @pytest.mark.parametrize("kind", list(NodeKind))
    def test_override_every_kind(self, plain_table, kind):
        """Test that any kind can be rebound and the replacement is used."""

        def custom(scope: VisitScope, node) -> str:
            return f"com.example.{kind.name}"

        plain_table.register(kind, custom)
        assert plain_table.resolve(kind) is custom

    def test_register_by_short_name(self, plain_table):
        """Test registering with the binding name used in config files."""
        plain_table.register("h1", fixed_template("com.example.Title"))
        assert plain_table.render(Heading(level=1)).template == "com.example.Title"

    def test_register_unknown_name(self, plain_table):
        """Test that unknown binding names are rejected."""
        with pytest.raises(ValidationError):
            plain_table.register("blockquote", fixed_template("X"))

    def test_register_not_callable(self, plain_table):
        """Test that bindings must be callable."""
        with pytest.raises(ValidationError, match="must be callable"):
            plain_table.register(NodeKind.PARAGRAPH, "org.example.P")

    def test_register_many(self, plain_table):
        """Test registering several bindings at once."""
        plain_table.register_many({"h1": fixed_template("A"), NodeKind.PARAGRAPH: fixed_template("B")})
        assert plain_table.render(Heading(level=1)).template == "A"
        assert plain_table.render(Paragraph()).template == "B"

    def test_bindings_argument(self):
        """Test passing replacements to the constructor."""
        table = BindingTable(bindings={"p": fixed_template("org.example.P")})
        assert table.render(Paragraph()).template == "org.example.P"

    def test_fixed_template_leaves_scope_untouched(self):
        """Test that a fixed template binding does not steer traversal."""
        scope = VisitScope()
        assert fixed_template("X")(scope, Paragraph()) == "X"
        assert scope.children_override is None


@pytest.mark.unit
class TestFreeze:
    """Tests for the configure-then-render lifecycle."""

    def test_first_render_freezes(self, plain_table):
        """Test that rendering freezes the table."""
        assert not plain_table.frozen
        plain_table.render(Text("x"))
        assert plain_table.frozen

    def test_register_after_render_fails(self, plain_table):
        """Test that a frozen table refuses new bindings."""
        plain_table.render(Text("x"))
        with pytest.raises(BindingTableFrozenError) as exc_info:
            plain_table.register(NodeKind.TEXT, fixed_template("X"))
        assert exc_info.value.kind is NodeKind.TEXT

    def test_copy_is_unfrozen(self, plain_table):
        """Test that a copy of a frozen table can be reconfigured independently."""
        plain_table.freeze()
        clone = plain_table.copy()
        assert not clone.frozen

        clone.register(NodeKind.PARAGRAPH, fixed_template("org.example.P"))
        assert clone.render(Paragraph()).template == "org.example.P"
        assert plain_table.render(Paragraph()).template == "org.jetbrains.compose.web.dom.P"


@pytest.mark.unit
class TestSparseTable:
    """Tests for tables created without defaults."""

    def test_unbound_kind(self):
        """Test that rendering an unbound kind raises UnboundNodeKindError."""
        table = BindingTable(defaults=False)
        with pytest.raises(UnboundNodeKindError) as exc_info:
            table.render(Heading(level=2))
        assert exc_info.value.kind is NodeKind.HEADING_2

    def test_registered_kind_resolves(self):
        """Test that registered kinds resolve in a sparse table."""
        table = BindingTable(defaults=False, bindings={"p": fixed_template("P")})
        assert len(table) == 1
        assert table.render(Paragraph()).template == "P"

    def test_render_with_explicit_kind(self, plain_table):
        """Test rendering a node through another kind's binding."""
        result = plain_table.render(Paragraph(), kind="h2")
        assert result.template == "org.jetbrains.compose.web.dom.H2"


@pytest.mark.unit
class TestIdempotence:
    """Rendering the same node twice gives the same result."""

    @given(literal=st.text(max_size=40), enhanced=st.booleans())
    def test_text_render_is_idempotent(self, literal, enhanced):
        """Test that text rendering is a pure function of its input."""
        table = BindingTable(RenderContext(use_enhanced_components=enhanced))
        node = Text(literal)
        first = table.render(node)
        second = table.render(node)
        assert first.template == second.template
        assert first.children_override == second.children_override
        assert node.literal == literal
