"""Pytest configuration and shared fixtures for the mdcompose test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from mdcompose.bindings import BindingTable, RenderContext

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def plain_table() -> BindingTable:
    """Provide a default binding table using the plain DOM components."""
    return BindingTable(RenderContext(use_enhanced_components=False))


@pytest.fixture
def enhanced_table() -> BindingTable:
    """Provide a default binding table using the enhanced components."""
    return BindingTable(RenderContext(use_enhanced_components=True, project_group="org.example.site"))


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown content exercising most node kinds.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """---
title: Sample Page
tags:
  - docs
  - sample
---

# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Section 2

Here is a list:
- Item 1
- Item 2

And a numbered list:
1. First item
2. Second item

- [x] Done
- [ ] Todo

```kotlin
fun main() {
    println("Hello")
}
```

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |

See [the docs](/docs) or https://example.com.

{{{ .components.widgets.VisitorCounter }}}

---
"""


@pytest.fixture
def kobweb_project(tmp_path: Path) -> Path:
    """Provide a project directory whose build file depends on the enhanced components."""
    (tmp_path / "build.gradle.kts").write_text(
        'dependencies {\n    implementation("com.varabyte.kobweb:kobweb-silk:0.9.0")\n}\n', encoding="utf-8"
    )
    return tmp_path
