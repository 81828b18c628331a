#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Top-level configuration for a Markdown-to-component conversion session.

A :class:`MarkdownConfig` is built once per session (one CLI invocation or one
API call), resolved into a :class:`~mdcompose.bindings.RenderContext` and a
:class:`~mdcompose.bindings.BindingTable`, and then left untouched while
documents are rendered.
"""
# src/mdcompose/options/config.py


from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from mdcompose.bindings import BindingTable, RenderContext, detect_enhanced_components, fixed_template
from mdcompose.constants import DEFAULT_BASE_PACKAGE, DEFAULT_MARKDOWN_PATH, DEFAULT_PROJECT_GROUP
from mdcompose.exceptions import ValidationError
from mdcompose.options.base import CloneFrozenMixin
from mdcompose.options.compose import ComponentOptions, ComposeRendererOptions
from mdcompose.options.markdown import MarkdownFeatures

logger = logging.getLogger(__name__)


def _build_section(cls: type, data: Any, section: str) -> Any:
    if isinstance(data, cls):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Configuration section '{section}' must be a table, got {type(data).__name__}",
            parameter_name=section,
            parameter_value=data,
        )

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValidationError(
            f"Unknown option(s) in '{section}': {', '.join(unknown)}",
            parameter_name=section,
            parameter_value=unknown,
        )

    kwargs = dict(data)
    if "inline_call_delimiters" in kwargs and isinstance(kwargs["inline_call_delimiters"], list):
        kwargs["inline_call_delimiters"] = tuple(kwargs["inline_call_delimiters"])
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise ValidationError(f"Invalid options in '{section}': {e}", parameter_name=section, original_error=e) from e


@dataclass(frozen=True)
class MarkdownConfig(CloneFrozenMixin):
    """Configuration for converting a tree of Markdown files into Kotlin pages.

    Parameters
    ----------
    markdown_path : str, default "markdown"
        Directory, relative to the source root, holding the Markdown files.
    project_group : str, default ""
        Project package prefix (e.g. ``org.example.site``). Inline calls that
        start with ``.`` are resolved against it.
    base_package : str, default "pages"
        Package, relative to the project group, receiving the generated pages.
    features : MarkdownFeatures
        Parser feature toggles.
    components : ComponentOptions
        Enhanced component selection and binding overrides.
    renderer : ComposeRendererOptions
        Generated source options.

    """

    markdown_path: str = field(
        default=DEFAULT_MARKDOWN_PATH,
        metadata={"help": "Directory holding the Markdown files, relative to the source root"},
    )
    project_group: str = field(
        default=DEFAULT_PROJECT_GROUP,
        metadata={"help": "Project package prefix used to resolve '.relative' inline calls"},
    )
    base_package: str = field(
        default=DEFAULT_BASE_PACKAGE,
        metadata={"help": "Package (relative to the project group) for generated pages"},
    )
    features: MarkdownFeatures = field(default_factory=MarkdownFeatures)
    components: ComponentOptions = field(default_factory=ComponentOptions)
    renderer: ComposeRendererOptions = field(default_factory=ComposeRendererOptions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MarkdownConfig:
        """Build a configuration from a parsed config file mapping.

        Parameters
        ----------
        data : Mapping
            Top-level keys ``markdown_path``, ``project_group``, ``base_package``
            and nested tables ``features``, ``components``, ``renderer``.

        Raises
        ------
        ValidationError
            If the mapping contains unknown keys or invalid values

        """
        top_level = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - top_level)
        if unknown:
            raise ValidationError(
                f"Unknown configuration key(s): {', '.join(unknown)}",
                parameter_name="config",
                parameter_value=unknown,
            )

        kwargs: dict[str, Any] = {}
        for name in ("markdown_path", "project_group", "base_package"):
            if name in data:
                value = data[name]
                if not isinstance(value, str):
                    raise ValidationError(
                        f"'{name}' must be a string, got {type(value).__name__}",
                        parameter_name=name,
                        parameter_value=value,
                    )
                kwargs[name] = value

        if "features" in data:
            kwargs["features"] = _build_section(MarkdownFeatures, data["features"], "features")
        if "components" in data:
            kwargs["components"] = _build_section(ComponentOptions, data["components"], "components")
        if "renderer" in data:
            kwargs["renderer"] = _build_section(ComposeRendererOptions, data["renderer"], "renderer")

        return cls(**kwargs)

    @property
    def pages_package(self) -> str:
        """Return the fully qualified package for generated pages."""
        return ".".join(part for part in (self.project_group, self.base_package) if part)

    def create_render_context(self, project_dir: Optional[Union[str, Path]] = None) -> RenderContext:
        """Resolve the render context for this configuration.

        ``use_enhanced_components`` is taken from the component options when set;
        otherwise it is detected once from the build files in ``project_dir``.

        Parameters
        ----------
        project_dir : str or Path, optional
            Project root used for detection; defaults to the working directory

        """
        use_enhanced = self.components.use_enhanced_components
        if use_enhanced is None:
            use_enhanced = detect_enhanced_components(project_dir if project_dir is not None else Path.cwd())
        return RenderContext(use_enhanced_components=use_enhanced, project_group=self.project_group)

    def create_binding_table(
        self,
        project_dir: Optional[Union[str, Path]] = None,
        context: Optional[RenderContext] = None,
    ) -> BindingTable:
        """Create a binding table with the defaults plus any configured overrides.

        Parameters
        ----------
        project_dir : str or Path, optional
            Project root used when the render context must be detected
        context : RenderContext, optional
            Pre-resolved render context; skips detection when given

        """
        context = context or self.create_render_context(project_dir)
        table = BindingTable(context)
        for name, template in self.components.overrides.items():
            logger.debug("Overriding binding '%s' with fixed template %s", name, template)
            table.register(name, fixed_template(template))
        return table
