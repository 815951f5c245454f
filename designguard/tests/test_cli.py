"""
Tests for the designguard CLI.

Tests cover:
- Help and argument errors
- sample and check-spec commands
- analyze with local HTML/CSS files (no network)
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from designguard.spec_loader import load_specification

from .conftest import CLIRunner

PAGE_FRAGMENT = """<h1>Welcome</h1>
<img src="logo.png" alt="Company logo">
<img src="hero.png">
<button class="btn">Go</button>"""


@pytest.fixture
def page_files(tmp_path: Path, page_css: str, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """HTML and CSS files in an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    html = tmp_path / "index.html"
    css = tmp_path / "site.css"
    html.write_text(PAGE_FRAGMENT, encoding="utf-8")
    css.write_text(page_css, encoding="utf-8")
    return html, css


@pytest.mark.evergreen
class TestBasics:

    def test_no_command_prints_help(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run([])
        assert result.returncode == 0
        assert "analyze" in result.stdout

    def test_version(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run(["--version"])
        assert result.returncode == 0
        assert "0.1.0" in result.stdout

    def test_analyze_requires_spec(self, cli_runner: CLIRunner) -> None:
        assert cli_runner.run(["analyze", "https://example.com"]).returncode == 2


@pytest.mark.evergreen
class TestSampleCommand:

    def test_prints_json(self, cli_runner: CLIRunner) -> None:
        result = cli_runner.run(["sample"])
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["name"] == "Sample Design System"
        assert [r["type"] for r in data["rules"]] == ["color", "typography", "layout"]

    def test_writes_file(self, cli_runner: CLIRunner, tmp_path: Path) -> None:
        out = tmp_path / "ds.json"
        result = cli_runner.run(["sample", "-o", str(out)])
        assert result.returncode == 0
        assert "written" in result.stdout
        assert len(load_specification(out).rules) == 3


@pytest.mark.evergreen
class TestCheckSpecCommand:

    def test_valid_spec(self, cli_runner: CLIRunner, spec_file: Path) -> None:
        result = cli_runner.run(["check-spec", str(spec_file)])
        assert result.returncode == 0
        assert "Test Design System 1.0.0: 3 rules" in result.stdout
        assert "heading-font-weight" in result.stdout
        assert "±50" in result.stdout

    def test_invalid_spec(self, cli_runner: CLIRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = cli_runner.run(["check-spec", str(path)])
        assert result.returncode == 1
        assert "Invalid JSON file" in result.stdout


@pytest.mark.evergreen
class TestAnalyzeCommand:

    def test_local_files(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path], tmp_path: Path
    ) -> None:
        html, css = page_files
        out = tmp_path / "report.json"

        result = cli_runner.run([
            "analyze", "--spec", str(spec_file),
            "--html", str(html), "--css", str(css),
            "--output", str(out),
        ])

        assert result.returncode == 0
        assert "Design System Report" in result.stdout
        assert "Compliance" in result.stdout
        assert "[ERROR] accessibility-alt-text" in result.stdout
        assert "[ERROR] [" not in result.stdout
        assert "[WARN] [" not in result.stdout
        assert "Loading website..." in result.stdout

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["url"].startswith("data:text/html;base64,")
        assert data["summary"] == {"correct": 4, "warnings": 1, "errors": 1, "total": 6}

    def test_status_filter_and_quiet(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path]
    ) -> None:
        html, css = page_files
        result = cli_runner.run([
            "analyze", "--spec", str(spec_file),
            "--html", str(html), "--css", str(css),
            "--status", "warning", "--quiet",
        ])
        assert result.returncode == 0
        assert "Findings (1)" in result.stdout
        assert "button-border-radius" in result.stdout
        assert "Loading website..." not in result.stdout

    def test_fail_on_error(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path]
    ) -> None:
        html, css = page_files
        result = cli_runner.run([
            "analyze", "--spec", str(spec_file),
            "--html", str(html), "--css", str(css),
            "--fail-on-error", "--quiet",
        ])
        assert result.returncode == 1

    def test_css_without_html(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path]
    ) -> None:
        _, css = page_files
        result = cli_runner.run(["analyze", "--spec", str(spec_file), "--css", str(css)])
        assert result.returncode == 1
        assert "--css requires --html" in result.stdout

    def test_target_with_html(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path]
    ) -> None:
        html, _ = page_files
        result = cli_runner.run([
            "analyze", "https://example.com", "--spec", str(spec_file), "--html", str(html),
        ])
        assert result.returncode == 1
        assert "not both" in result.stdout

    def test_missing_target(self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path]) -> None:
        result = cli_runner.run(["analyze", "--spec", str(spec_file)])
        assert result.returncode == 1
        assert "Provide a target" in result.stdout

    def test_missing_spec_file(self, cli_runner: CLIRunner, tmp_path: Path) -> None:
        result = cli_runner.run(["analyze", "inline", "--spec", str(tmp_path / "none.json")])
        assert result.returncode == 1
        assert "Cannot read specification" in result.stdout

    def test_invalid_config(
        self, cli_runner: CLIRunner, spec_file: Path, page_files: tuple[Path, Path], tmp_path: Path
    ) -> None:
        html, _ = page_files
        config = tmp_path / "bad.yaml"
        config.write_text("retries: 3\n", encoding="utf-8")
        result = cli_runner.run([
            "analyze", "--spec", str(spec_file), "--html", str(html), "--config", str(config),
        ])
        assert result.returncode == 1
        assert "Unknown config keys" in result.stdout
