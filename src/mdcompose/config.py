#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading.

This module finds and loads mdcompose configuration files in TOML, YAML or
JSON format, or from the ``[tool.mdcompose]`` table of ``pyproject.toml``, and
turns them into a :class:`~mdcompose.options.MarkdownConfig`.

Example ``.mdcompose.toml``::

    project_group = "org.example.site"
    markdown_path = "markdown"

    [features]
    task_list = false
    inline_call_delimiters = ["<", ">"]

    [components]
    use_enhanced_components = true

    [components.overrides]
    h1 = "org.example.site.components.Title"
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional, Union

import yaml

from mdcompose.constants import CONFIG_FILENAMES
from mdcompose.exceptions import FileNotFoundError, ValidationError
from mdcompose.options import MarkdownConfig

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdcompose]`` table from pyproject.toml.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    ValidationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(f"Invalid TOML in {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get("mdcompose", {})
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.mdcompose] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked for,
    in order: ``.mdcompose.toml``, ``.mdcompose.yaml``, ``.mdcompose.yml``,
    ``.mdcompose.json`` and a ``pyproject.toml`` holding a ``[tool.mdcompose]``
    table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ValidationError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e.message)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Union[Path, str]) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValidationError
        If the file cannot be parsed, has an unsupported extension, or its
        root is not a mapping

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(str(config_path), message=f"Configuration file does not exist: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValidationError(f"Invalid config file {config_path}: {e}", original_error=e) from e

    if not isinstance(config, dict):
        raise ValidationError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_markdown_config(
    config_path: Optional[Union[Path, str]] = None, start_dir: Optional[Path] = None
) -> MarkdownConfig:
    """Load a MarkdownConfig from an explicit or discovered config file.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit configuration file; discovery is used when omitted
    start_dir : Path, optional
        Directory discovery starts from

    Returns
    -------
    MarkdownConfig
        Loaded configuration, or defaults when no file is found

    """
    path = Path(config_path) if config_path is not None else find_config_in_parents(start_dir)
    if path is None:
        logger.debug("No configuration file found; using defaults")
        return MarkdownConfig()

    logger.info("Loading configuration from %s", path)
    return MarkdownConfig.from_dict(load_config_file(path))
