"""
Shared pytest fixtures for designguard tests.

Provides specifications, documents and a CLI runner. No test touches the
network: remote fetches go through injected fetchers or a patched urlopen.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
  @pytest.mark.temporary - Tests with explicit discard flag
"""

from __future__ import annotations

import io
import json
from contextlib import redirect_stdout
from pathlib import Path
from typing import Any

import pytest

from designguard.models import DesignSystemDNA, Rule


# =============================================================================
# Test Data Constants
# =============================================================================

SAMPLE_SPEC_DATA: dict[str, Any] = {
    "name": "Test Design System",
    "version": "1.0.0",
    "rules": [
        {
            "id": "primary-color",
            "type": "color",
            "property": "background-color",
            "expectedValue": "#0066FF",
            "description": "Primary buttons should use brand blue",
        },
        {
            "id": "heading-font-weight",
            "type": "typography",
            "property": "font-weight",
            "expectedValue": 600,
            "tolerance": 50,
            "description": "Headings should be semi-bold",
        },
        {
            "id": "button-border-radius",
            "type": "layout",
            "property": "border-radius",
            "expectedValue": "8px",
            "description": "Buttons should have 8px border radius",
        },
    ],
    "metadata": {"author": "Design Team"},
}

PAGE_CSS = """
.btn { background-color: #0066FF; border-radius: 4px; }
h1 { font-weight: 620; }
"""

PAGE_HTML = f"""<!DOCTYPE html>
<html>
<head><style>{PAGE_CSS}</style></head>
<body>
  <h1>Welcome</h1>
  <h2>Features</h2>
  <img src="logo.png" alt="Company logo">
  <img src="hero.png">
  <button class="btn">Go</button>
</body>
</html>
"""


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )
    config.addinivalue_line(
        "markers",
        "temporary: tests with explicit discard flag"
    )


# =============================================================================
# Specification Fixtures
# =============================================================================


@pytest.fixture
def spec_data() -> dict[str, Any]:
    """Raw JSON data for a three-rule specification."""
    return json.loads(json.dumps(SAMPLE_SPEC_DATA))


@pytest.fixture
def spec(spec_data: dict[str, Any]) -> DesignSystemDNA:
    """Validated three-rule specification (color, typography, layout)."""
    return DesignSystemDNA.model_validate(spec_data)


@pytest.fixture
def spec_file(tmp_path: Path, spec_data: dict[str, Any]) -> Path:
    """The three-rule specification written to a temp file."""
    path = tmp_path / "design-system.json"
    path.write_text(json.dumps(spec_data), encoding="utf-8")
    return path


@pytest.fixture
def color_rule() -> Rule:
    return Rule(id="c1", kind="color", property="background-color", expected_value="#0066FF")


@pytest.fixture
def typography_rule() -> Rule:
    return Rule(
        id="t1",
        kind="typography",
        property="font-weight",
        expected_value=600,
        tolerance=50,
    )


@pytest.fixture
def layout_rule() -> Rule:
    return Rule(id="l1", kind="layout", property="border-radius", expected_value="8px")


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def page_html() -> str:
    """Full page with inline styles, two headings and two images (one without alt)."""
    return PAGE_HTML


@pytest.fixture
def page_css() -> str:
    return PAGE_CSS


# =============================================================================
# CLI Runner
# =============================================================================


class CLIResult:
    """Result of running a CLI command."""

    def __init__(self, returncode: int, stdout: str):
        self.returncode = returncode
        self.stdout = stdout

    def __repr__(self) -> str:
        return f"CLIResult(returncode={self.returncode}, stdout={self.stdout[:100]!r}...)"


class CLIRunner:
    """Helper class to run CLI commands in-process with captured output."""

    def run(self, args: list[str]) -> CLIResult:
        """Run CLI with given args (without the 'designguard' prefix)."""
        from designguard.cli import main

        stdout_capture = io.StringIO()

        with redirect_stdout(stdout_capture):
            try:
                returncode = main(["--no-color", *args])
            except SystemExit as e:
                returncode = e.code if isinstance(e.code, int) else 1

        return CLIResult(
            returncode=returncode or 0,
            stdout=stdout_capture.getvalue(),
        )


@pytest.fixture
def cli_runner() -> CLIRunner:
    return CLIRunner()
