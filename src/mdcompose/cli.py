#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/cli.py
"""Command-line interface for mdcompose.

Converts every Markdown file under ``SOURCE_DIR/<markdown_path>`` into a
Kotlin page file under the output directory.

Examples
--------
Basic conversion::

    $ mdcompose src/jsMain/resources --out build/generated/pages

Use an explicit configuration file::

    $ mdcompose src/jsMain/resources --out build/pages --config .mdcompose.toml

Force the plain components and turn off task lists::

    $ mdcompose src/jsMain/resources --out build/pages --no-enhanced --no-task-list

The ``MDCOMPOSE_CONFIG`` environment variable names a configuration file when
``--config`` is not given.

"""

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any

from mdcompose.api import convert_markdown_tree
from mdcompose.config import load_markdown_config
from mdcompose.constants import (
    CONFIG_ENV_VAR,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from mdcompose.exceptions import (
    DependencyError,
    FileError,
    MdComposeError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdcompose.logging_utils import configure_logging
from mdcompose.options import ComposeRendererOptions, MarkdownConfig, MarkdownFeatures

logger = logging.getLogger(__name__)

_FEATURE_DEST_PREFIX = "feature_"
_RENDERER_DEST_PREFIX = "renderer_"


def _add_toggle_arguments(group: argparse._ArgumentGroup, options_class: type, dest_prefix: str) -> None:
    """Add one negating flag per boolean option field, named from field metadata."""
    for field in fields(options_class):
        cli_name = field.metadata.get("cli_name")
        if not cli_name or field.type not in (bool, "bool"):
            continue
        group.add_argument(
            f"--{cli_name}",
            dest=f"{dest_prefix}{field.name}",
            action="store_const",
            const=False,
            default=None,
            help=f"Disable: {field.metadata.get('help', field.name)}",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdcompose command."""
    from mdcompose import __version__

    parser = argparse.ArgumentParser(
        prog="mdcompose",
        description="Generate Kotlin Compose page sources from a tree of Markdown files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source_dir", metavar="SOURCE_DIR", help="Resource root holding the markdown directory")
    parser.add_argument("--out", required=True, help="Directory receiving the generated Kotlin files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (defaults to ${CONFIG_ENV_VAR} or discovery)")
    config_group.add_argument(
        "--project-dir", help="Project root scanned for the enhanced component library (default: cwd)"
    )
    config_group.add_argument("--project-group", help="Project package prefix, e.g. org.example.site")
    config_group.add_argument("--package", dest="base_package", help="Package for generated pages, relative to the group")
    config_group.add_argument("--markdown-path", help="Markdown directory relative to SOURCE_DIR")

    enhanced = config_group.add_mutually_exclusive_group()
    enhanced.add_argument(
        "--enhanced",
        dest="use_enhanced_components",
        action="store_const",
        const=True,
        default=None,
        help="Always bind to the enhanced component library",
    )
    enhanced.add_argument(
        "--no-enhanced",
        dest="use_enhanced_components",
        action="store_const",
        const=False,
        help="Always bind to the plain DOM components",
    )

    _add_toggle_arguments(parser.add_argument_group("markdown features"), MarkdownFeatures, _FEATURE_DEST_PREFIX)
    _add_toggle_arguments(parser.add_argument_group("page output"), ComposeRendererOptions, _RENDERER_DEST_PREFIX)

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log records to this file")
    log_group.add_argument("--trace", action="store_true", help="Very verbose debug output with timings")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _prefixed_values(parsed_args: argparse.Namespace, prefix: str) -> dict[str, Any]:
    return {
        key[len(prefix) :]: value
        for key, value in vars(parsed_args).items()
        if key.startswith(prefix) and value is not None
    }


def apply_cli_overrides(config: MarkdownConfig, parsed_args: argparse.Namespace) -> MarkdownConfig:
    """Layer command-line values over a loaded configuration.

    Only arguments that were actually given replace configuration values.

    Parameters
    ----------
    config : MarkdownConfig
        Configuration loaded from file or defaults
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    MarkdownConfig
        Updated configuration

    """
    top_level: dict[str, Any] = {}
    for name in ("project_group", "base_package", "markdown_path"):
        value = getattr(parsed_args, name, None)
        if value is not None:
            top_level[name] = value

    feature_updates = _prefixed_values(parsed_args, _FEATURE_DEST_PREFIX)
    if feature_updates:
        top_level["features"] = config.features.create_updated(**feature_updates)

    renderer_updates = _prefixed_values(parsed_args, _RENDERER_DEST_PREFIX)
    if renderer_updates:
        top_level["renderer"] = config.renderer.create_updated(**renderer_updates)

    if parsed_args.use_enhanced_components is not None:
        top_level["components"] = config.components.create_updated(
            use_enhanced_components=parsed_args.use_enhanced_components
        )

    return config.create_updated(**top_level) if top_level else config


def _exit_code_for(error: MdComposeError) -> int:
    if isinstance(error, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(error, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(error, FileError):
        return EXIT_FILE_ERROR
    if isinstance(error, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(error, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Execute the mdcompose command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.config:
        env_config = os.environ.get(CONFIG_ENV_VAR)
        if env_config:
            parsed_args.config = env_config

    _setup_logging_level(parsed_args)

    project_dir = Path(parsed_args.project_dir) if parsed_args.project_dir else None
    try:
        config = load_markdown_config(parsed_args.config, start_dir=project_dir)
        config = apply_cli_overrides(config, parsed_args)
        written = convert_markdown_tree(parsed_args.source_dir, parsed_args.out, config, project_dir=project_dir)
    except MdComposeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return _exit_code_for(e)

    logger.info("Generated %d page(s) in %s", len(written), parsed_args.out)
    print(f"Generated {len(written)} page(s) in {parsed_args.out}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
