#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config_loading.py
"""Unit tests for configuration file discovery and loading."""

import json

import pytest

from mdcompose.config import find_config_in_parents, load_config_file, load_markdown_config
from mdcompose.exceptions import FileNotFoundError, ValidationError
from mdcompose.options import MarkdownConfig

TOML_CONFIG = """
project_group = "org.example.site"

[features]
task_list = false
inline_call_delimiters = ["<", ">"]

[components]
use_enhanced_components = true

[components.overrides]
h1 = "org.example.site.components.Title"
"""


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for loading individual configuration files."""

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / ".mdcompose.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")
        data = load_config_file(path)
        assert data["project_group"] == "org.example.site"
        assert data["components"]["overrides"] == {"h1": "org.example.site.components.Title"}

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / ".mdcompose.yaml"
        path.write_text("project_group: org.example\nfeatures:\n  tables: false\n", encoding="utf-8")
        assert load_config_file(path) == {"project_group": "org.example", "features": {"tables": False}}

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file is an empty mapping."""
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"markdown_path": "docs"}), encoding="utf-8")
        assert load_config_file(path) == {"markdown_path": "docs"}

    def test_pyproject_section(self, tmp_path):
        """Test loading the [tool.mdcompose] table of pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.mdcompose]\nbase_package = "site"\n', encoding="utf-8")
        assert load_config_file(path) == {"base_package": "site"}

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "nope.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test that unknown file extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]", encoding="utf-8")
        with pytest.raises(ValidationError, match="Unsupported config file format"):
            load_config_file(path)

    def test_invalid_json(self, tmp_path):
        """Test that malformed content raises ValidationError."""
        path = tmp_path / "config.json"
        path.write_text("{ invalid json }", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config_file(path)

    def test_root_not_mapping(self, tmp_path):
        """Test that a config file must hold a mapping."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValidationError, match="mapping"):
            load_config_file(path)


@pytest.mark.unit
class TestDiscovery:
    """Tests for finding configuration files in parent directories."""

    def test_found_in_parent(self, tmp_path):
        """Test that a config file in a parent directory is found."""
        (tmp_path / ".mdcompose.toml").write_text(TOML_CONFIG, encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == (tmp_path / ".mdcompose.toml").resolve()

    def test_dedicated_file_preferred(self, tmp_path):
        """Test that a dedicated file wins over pyproject.toml in the same directory."""
        (tmp_path / "pyproject.toml").write_text('[tool.mdcompose]\nbase_package = "x"\n', encoding="utf-8")
        (tmp_path / ".mdcompose.json").write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path).name == ".mdcompose.json"

    def test_pyproject_without_section_skipped(self, tmp_path):
        """Test that a pyproject.toml without the table is not a config file."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        found = find_config_in_parents(tmp_path)
        assert found is None or found.parent != tmp_path.resolve()


@pytest.mark.unit
class TestLoadMarkdownConfig:
    """Tests for building a MarkdownConfig from files."""

    def test_explicit_path(self, tmp_path):
        """Test loading from an explicit path."""
        path = tmp_path / "site.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")
        config = load_markdown_config(path)
        assert config.project_group == "org.example.site"
        assert config.features.task_list is False
        assert config.features.inline_call_delimiters == ("<", ">")
        assert config.components.use_enhanced_components is True
        assert config.components.overrides == {"h1": "org.example.site.components.Title"}

    def test_discovered(self, tmp_path):
        """Test loading a discovered config file."""
        (tmp_path / ".mdcompose.yaml").write_text("base_package: site\n", encoding="utf-8")
        assert load_markdown_config(start_dir=tmp_path).base_package == "site"

    def test_invalid_values(self, tmp_path):
        """Test that invalid values in the file raise ValidationError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"components": {"overrides": {"quote": "X"}}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_markdown_config(path)

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        """Test that defaults are used when no config file exists."""
        import mdcompose.config

        monkeypatch.setattr(mdcompose.config, "find_config_in_parents", lambda start_dir=None: None)
        assert load_markdown_config(start_dir=tmp_path) == MarkdownConfig()
