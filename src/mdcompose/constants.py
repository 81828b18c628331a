#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdcompose.

This module centralizes the component package prefixes, default templates and
configuration defaults used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Component Packages - Fully qualified prefixes used in generated calls
3. Markdown Features - Parser feature defaults
4. Generated Source - Defaults for the emitted Kotlin page files
5. Dependencies - Packages required at runtime
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TaskStatus = Literal["checked", "unchecked"]
Alignment = Literal["left", "center", "right"]

# =============================================================================
# Component Packages
# =============================================================================

JB_DOM = "org.jetbrains.compose.web.dom"
SILK = "com.varabyte.kobweb.silk.components"

# Dependency name that marks a project as using the enhanced (Silk) component library
ENHANCED_COMPONENTS_DEPENDENCY = "kobweb-silk"

# Build files scanned when detecting the enhanced component library
PROJECT_BUILD_FILES = (
    "build.gradle.kts",
    "build.gradle",
    "site/build.gradle.kts",
    "gradle/libs.versions.toml",
)

# Kotlin string escape appended to each code block line
CODE_LINE_BREAK = "\\n"

CODE_BLOCK_STYLE = 'attrs = { style { property("display", "block"); property("white-space", "pre-wrap") } }'

# =============================================================================
# Markdown Features
# =============================================================================

DEFAULT_AUTOLINK = True
DEFAULT_FRONT_MATTER = True
DEFAULT_INLINE_CALL = True
DEFAULT_INLINE_CALL_DELIMITERS: tuple[str, str] = ("{", "}")
DEFAULT_TABLES = True
DEFAULT_TASK_LIST = True

# Number of repeated delimiter characters that open/close an inline call, e.g. {{{ ... }}}
INLINE_CALL_DELIMITER_COUNT = 3

FRONT_MATTER_FENCE = "---"

# =============================================================================
# Generated Source
# =============================================================================

DEFAULT_MARKDOWN_PATH = "markdown"
DEFAULT_PROJECT_GROUP = ""
DEFAULT_BASE_PACKAGE = "pages"
DEFAULT_INDENT = "    "
DEFAULT_PAGE_ANNOTATION = "com.varabyte.kobweb.core.Page"
DEFAULT_PAGE_SUFFIX = "Page"
COMPOSABLE_ANNOTATION = "androidx.compose.runtime.Composable"
FRONT_MATTER_CONSTANT = "FrontMatter"

MARKDOWN_EXTENSIONS = (".md", ".markdown")
KOTLIN_EXTENSION = ".kt"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

CONFIG_ENV_VAR = "MDCOMPOSE_CONFIG"

CONFIG_FILENAMES = [".mdcompose.toml", ".mdcompose.yaml", ".mdcompose.yml", ".mdcompose.json"]
