#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/bindings/context.py
"""Render context shared by the default bindings.

The context is resolved once per configuration session. In particular,
whether the enhanced (Silk) component library is available is probed from
the project's build files at configuration time and never again while
rendering.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from mdcompose.constants import DEFAULT_PROJECT_GROUP, ENHANCED_COMPONENTS_DEPENDENCY, PROJECT_BUILD_FILES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Immutable inputs consulted by the default bindings.

    Parameters
    ----------
    use_enhanced_components : bool
        Pick Silk components over plain Compose HTML ones where a binding offers both
    project_group : str
        Package prefix prepended to inline calls written as ``.relative.Path``

    """

    use_enhanced_components: bool = False
    project_group: str = DEFAULT_PROJECT_GROUP


def _mentions_dependency(text: str, dependency: str) -> bool:
    # Matches "group:kobweb-silk:1.0", libs.kobweb.silk style accessors and catalog entries
    pattern = re.escape(dependency).replace(r"\-", r"[-.]")
    return re.search(rf"(?<![\w-]){pattern}(?![\w-])", text) is not None


def detect_enhanced_components(
    project_dir: Union[str, Path], dependency: str = ENHANCED_COMPONENTS_DEPENDENCY
) -> bool:
    """Detect whether a project depends on the enhanced component library.

    Scans the project's Gradle build files (and version catalog) for a
    dependency named ``dependency``.

    Parameters
    ----------
    project_dir : str or Path
        Root directory of the project
    dependency : str, default "kobweb-silk"
        Dependency name to look for

    Returns
    -------
    bool
        True if any build file mentions the dependency

    """
    root = Path(project_dir)
    for relative in PROJECT_BUILD_FILES:
        build_file = root / relative
        if not build_file.is_file():
            continue
        try:
            text = build_file.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Could not read build file %s: %s", build_file, e)
            continue
        if _mentions_dependency(text, dependency):
            logger.debug("Found %s in %s; enhanced components enabled", dependency, build_file)
            return True

    logger.debug("No %s dependency found under %s; using plain components", dependency, root)
    return False
