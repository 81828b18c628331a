#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api_conversion.py
"""Integration tests for the high-level conversion API.

These tests run Markdown through the parser, binding table and renderer
together and check the generated Kotlin source.

"""

import pytest

from mdcompose import (
    BindingTable,
    ComponentOptions,
    MarkdownConfig,
    MarkdownFeatures,
    NodeKind,
    convert_markdown,
    convert_markdown_tree,
    page_function_name,
)
from mdcompose.api import package_segment, page_file_stem
from mdcompose.exceptions import FileNotFoundError, ParsingError, ValidationError

JB_DOM = "org.jetbrains.compose.web.dom"
SILK = "com.varabyte.kobweb.silk.components"


@pytest.mark.unit
class TestNaming:
    """Tests for page and package naming helpers."""

    @pytest.mark.parametrize(
        "path,stem",
        [
            ("index.md", "Index"),
            ("my-post.md", "MyPost"),
            ("getting_started.markdown", "GettingStarted"),
            ("2024-recap.md", "_2024Recap"),
            ("---.md", "Index"),
        ],
    )
    def test_page_file_stem(self, path, stem):
        """Test converting file names to Kotlin file stems."""
        assert page_file_stem(path) == stem

    def test_page_function_name(self):
        """Test page function names with the default and custom suffix."""
        assert page_function_name("blog/my-post.md") == "MyPostPage"
        assert page_function_name("about.md", suffix="Screen") == "AboutScreen"

    @pytest.mark.parametrize("name,segment", [("Blog", "blog"), ("how-to", "how_to"), ("2024", "_2024"), ("--", "_")])
    def test_package_segment(self, name, segment):
        """Test converting directory names to package segments."""
        assert package_segment(name) == segment


@pytest.mark.integration
class TestConvertMarkdown:
    """Tests for converting one document."""

    def test_plain_components(self, sample_markdown, tmp_path):
        """Test a full document with the plain components."""
        config = MarkdownConfig(
            project_group="org.example.site", components=ComponentOptions(use_enhanced_components=False)
        )
        source = convert_markdown(sample_markdown, config, page_name="SamplePage", project_dir=tmp_path)

        assert source.startswith("package org.example.site.pages\n")
        assert "fun SamplePage() {" in source
        assert f"    {JB_DOM}.H1 {{\n" in source
        assert f'{JB_DOM}.Text("Sample Document")' in source
        assert f"{JB_DOM}.B {{" in source
        assert f"{JB_DOM}.Em {{" in source
        assert f'{JB_DOM}.Text("inline code")' in source
        assert f'{JB_DOM}.A("/docs") {{' in source
        assert f'{JB_DOM}.A("https://example.com") {{' in source
        assert f"{JB_DOM}.Th {{" in source
        assert f'{JB_DOM}.Text("    println(\\"Hello\\")\\n")' in source
        assert "    org.example.site.components.widgets.VisitorCounter()\n" in source
        assert f"    {JB_DOM}.Hr()\n" in source
        assert '"tags" to listOf("docs", "sample"),' in source

    def test_enhanced_components(self, sample_markdown, tmp_path):
        """Test that enhanced components change text and link rendering."""
        config = MarkdownConfig(components=ComponentOptions(use_enhanced_components=True))
        source = convert_markdown(sample_markdown, config, package="", project_dir=tmp_path)

        assert not source.startswith("package")
        assert f'{SILK}.text.Text("Sample Document")' in source
        assert f'{SILK}.navigation.Link("/docs", "the docs")\n' in source
        assert f'{JB_DOM}.Text("the docs")' not in source
        assert f"{JB_DOM}.A(" not in source

    def test_detected_from_project(self, kobweb_project):
        """Test that the component library is detected from the project directory."""
        source = convert_markdown("[Home](/)", project_dir=kobweb_project)
        assert f'{SILK}.navigation.Link("/", "Home")' in source

    def test_overrides(self, tmp_path):
        """Test configured binding overrides."""
        config = MarkdownConfig(components=ComponentOptions(overrides={"h1": "org.example.Title"}))
        source = convert_markdown("# Hi", config, project_dir=tmp_path)
        assert "    org.example.Title {\n" in source

    def test_shared_table(self, tmp_path):
        """Test rendering several documents from one pre-built table."""
        table = BindingTable()
        table.register(NodeKind.PARAGRAPH, lambda scope, node: "org.example.Para")
        first = convert_markdown("one", bindings=table)
        second = convert_markdown("two", bindings=table)
        assert "org.example.Para {" in first
        assert "org.example.Para {" in second
        assert table.frozen

    def test_features_respected(self, tmp_path):
        """Test that disabled features change the output."""
        config = MarkdownConfig(features=MarkdownFeatures(inline_call=False))
        source = convert_markdown("{{{ .Widget }}}", config, project_dir=tmp_path)
        assert f'{JB_DOM}.Text("{{{{{{ .Widget }}}}}}")' in source


@pytest.mark.integration
class TestConvertMarkdownTree:
    """Tests for converting a directory of Markdown files."""

    def test_tree(self, tmp_path):
        """Test that each Markdown file becomes a Kotlin page in a matching package."""
        resources = tmp_path / "resources"
        markdown = resources / "markdown"
        (markdown / "Blog" / "how-to").mkdir(parents=True)
        (markdown / "index.md").write_text("# Home\n", encoding="utf-8")
        (markdown / "Blog" / "how-to" / "first-steps.md").write_text("Steps\n", encoding="utf-8")
        (markdown / "notes.txt").write_text("ignored", encoding="utf-8")

        out = tmp_path / "generated"
        config = MarkdownConfig(project_group="org.example")
        written = convert_markdown_tree(resources, out, config, project_dir=tmp_path)

        assert written == [out / "blog" / "how_to" / "FirstSteps.kt", out / "Index.kt"]
        nested = (out / "blog" / "how_to" / "FirstSteps.kt").read_text(encoding="utf-8")
        assert nested.startswith("package org.example.pages.blog.how_to\n")
        assert "fun FirstStepsPage() {" in nested
        assert "fun IndexPage() {" in (out / "Index.kt").read_text(encoding="utf-8")

    def test_custom_markdown_path(self, tmp_path):
        """Test reading Markdown from a configured directory."""
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "about.md").write_text("About\n", encoding="utf-8")
        written = convert_markdown_tree(tmp_path, tmp_path / "out", MarkdownConfig(markdown_path="docs"))
        assert [path.name for path in written] == ["About.kt"]

    @pytest.mark.parametrize("names", [("my-post.md", "my_post.md"), ("a.md", "a.markdown")])
    def test_colliding_pages_rejected(self, tmp_path, names):
        """Test that two files mapping to one Kotlin file fail before anything is written."""
        markdown = tmp_path / "markdown"
        markdown.mkdir()
        for name in names:
            (markdown / name).write_text("Text\n", encoding="utf-8")
        out = tmp_path / "out"

        with pytest.raises(ValidationError) as exc_info:
            convert_markdown_tree(tmp_path, out, project_dir=tmp_path)

        assert all(name in str(exc_info.value) for name in names)
        assert not out.exists()

    def test_same_stem_in_different_directories(self, tmp_path):
        """Test that equal file names in different directories do not collide."""
        markdown = tmp_path / "markdown"
        (markdown / "blog").mkdir(parents=True)
        (markdown / "index.md").write_text("Home\n", encoding="utf-8")
        (markdown / "blog" / "index.md").write_text("Blog\n", encoding="utf-8")
        written = convert_markdown_tree(tmp_path, tmp_path / "out", project_dir=tmp_path)
        assert len(set(written)) == 2

    def test_missing_markdown_directory(self, tmp_path):
        """Test that a missing markdown directory raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            convert_markdown_tree(tmp_path, tmp_path / "out")

    def test_error_propagates(self, tmp_path):
        """Test that a parse failure stops the conversion."""
        markdown = tmp_path / "markdown"
        markdown.mkdir()
        (markdown / "bad.md").write_text("---\ntitle: [x\n---\n", encoding="utf-8")
        with pytest.raises(ParsingError):
            convert_markdown_tree(tmp_path, tmp_path / "out", project_dir=tmp_path)
