#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/api.py
"""High-level conversion API.

These functions tie the pieces together for one configuration session:
parse Markdown with the configured features, resolve the render context and
binding table once, and render each document into a Kotlin page.

Examples
--------
Convert a single document:

    >>> from mdcompose import MarkdownConfig, convert_markdown
    >>> source = convert_markdown("# Hello", MarkdownConfig(project_group="org.example"), page_name="HelloPage")

Convert every Markdown file under ``src/jsMain/resources/markdown``:

    >>> from mdcompose import convert_markdown_tree
    >>> written = convert_markdown_tree("src/jsMain/resources", "build/generated/pages", MarkdownConfig())

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union

from mdcompose.bindings import BindingTable
from mdcompose.constants import KOTLIN_EXTENSION, MARKDOWN_EXTENSIONS
from mdcompose.exceptions import FileNotFoundError, MdComposeError, ValidationError
from mdcompose.options import MarkdownConfig
from mdcompose.parsers.base import ParserInput
from mdcompose.parsers.markdown import MarkdownParser
from mdcompose.renderers.compose import ComposeRenderer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _pascal_case(text: str) -> str:
    parts = [part for part in re.split(r"[^0-9A-Za-z]+", text) if part]
    name = "".join(part[0].upper() + part[1:] for part in parts)
    if name and name[0].isdigit():
        name = f"_{name}"
    return name


def page_file_stem(path: PathLike) -> str:
    """Return the Kotlin file stem for a Markdown file (``my-post.md`` -> ``MyPost``)."""
    return _pascal_case(Path(path).stem) or "Index"


def page_function_name(path: PathLike, suffix: str = "Page") -> str:
    """Return the page function name for a Markdown file (``my-post.md`` -> ``MyPostPage``)."""
    return f"{page_file_stem(path)}{suffix}"


def package_segment(name: str) -> str:
    """Sanitize a directory name into a Kotlin package segment."""
    segment = re.sub(r"[^0-9a-z_]+", "_", name.lower()).strip("_") or "_"
    if segment[0].isdigit():
        segment = f"_{segment}"
    return segment


def convert_markdown(
    markdown: ParserInput,
    config: Optional[MarkdownConfig] = None,
    page_name: str = "MarkdownPage",
    package: Optional[str] = None,
    bindings: Optional[BindingTable] = None,
    project_dir: Optional[PathLike] = None,
) -> str:
    """Convert one Markdown document into Kotlin page source.

    Parameters
    ----------
    markdown : str, Path, bytes or IO
        Markdown input
    config : MarkdownConfig, optional
        Session configuration; defaults are used when omitted
    page_name : str, default "MarkdownPage"
        Name of the generated page function
    package : str, optional
        Package of the generated file; defaults to ``config.pages_package``
    bindings : BindingTable, optional
        Pre-built binding table; built from ``config`` when omitted
    project_dir : str or Path, optional
        Project root used to detect the enhanced component library

    Returns
    -------
    str
        Kotlin source

    """
    config = config or MarkdownConfig()
    if bindings is None:
        bindings = config.create_binding_table(project_dir)

    doc = MarkdownParser(config.features).parse(markdown)
    renderer = ComposeRenderer(
        config.renderer,
        bindings=bindings,
        package=config.pages_package if package is None else package,
        page_name=page_name,
    )
    return renderer.render_to_string(doc)


def convert_markdown_tree(
    source_dir: PathLike,
    output_dir: PathLike,
    config: Optional[MarkdownConfig] = None,
    bindings: Optional[BindingTable] = None,
    project_dir: Optional[PathLike] = None,
) -> list[Path]:
    """Convert every Markdown file under ``source_dir / config.markdown_path``.

    ``blog/my-post.md`` becomes ``<output_dir>/blog/MyPost.kt`` declaring
    package ``<pages package>.blog`` and page function ``MyPostPage``.

    Parameters
    ----------
    source_dir : str or Path
        Resource root holding the markdown directory
    output_dir : str or Path
        Directory receiving the generated Kotlin files
    config : MarkdownConfig, optional
        Session configuration
    bindings : BindingTable, optional
        Pre-built binding table shared by all pages
    project_dir : str or Path, optional
        Project root used to detect the enhanced component library

    Returns
    -------
    list of Path
        Written files, in the order they were generated

    Raises
    ------
    FileNotFoundError
        If the markdown directory does not exist
    ValidationError
        If two Markdown files map to the same Kotlin file
    MdComposeError
        If any document fails to parse or render; files already written stay

    """
    config = config or MarkdownConfig()
    markdown_root = Path(source_dir) / config.markdown_path
    if not markdown_root.is_dir():
        raise FileNotFoundError(str(markdown_root), message=f"Markdown directory not found: {markdown_root}")

    if bindings is None:
        bindings = config.create_binding_table(project_dir)
    parser = MarkdownParser(config.features)

    sources = sorted(
        path for path in markdown_root.rglob("*") if path.is_file() and path.suffix.lower() in MARKDOWN_EXTENSIONS
    )
    logger.info("Found %d Markdown file(s) under %s", len(sources), markdown_root)

    # A target collision fails before any page is written
    planned: dict[Path, tuple[Path, str]] = {}
    for source in sources:
        relative_dir = source.parent.relative_to(markdown_root)
        segments = [package_segment(part) for part in relative_dir.parts]
        package = ".".join(part for part in [config.pages_package, *segments] if part)
        target = Path(output_dir).joinpath(*segments, f"{page_file_stem(source)}{KOTLIN_EXTENSION}")

        if target in planned:
            raise ValidationError(
                f"{planned[target][0]} and {source} both generate {target}; rename one of them",
                parameter_name="source_dir",
                parameter_value=str(markdown_root),
            )
        planned[target] = (source, package)

    written: list[Path] = []
    for target, (source, package) in planned.items():
        try:
            doc = parser.parse(source)
            renderer = ComposeRenderer(
                config.renderer,
                bindings=bindings,
                package=package,
                page_name=page_function_name(source, config.renderer.page_suffix),
            )
            renderer.render(doc, target)
        except MdComposeError as e:
            logger.error("Failed to convert %s: %s", source, e.message)
            raise

        logger.debug("Wrote %s", target)
        written.append(target)

    return written
