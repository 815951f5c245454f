"""
designguard - validate a website against a Design System DNA.

Loads a JSON specification of design rules (colors, typography, layout),
evaluates them against a page's inline stylesheet, runs basic accessibility
checks, and produces a pass/warning/error report.

Usage:
    python -m designguard <command> [options]

Commands:
    analyze     Validate a URL or HTML/CSS files against a specification
    sample      Write the sample design system specification
    check-spec  Validate a specification file

Library:
    from designguard import analyze, evaluate, load_specification

    spec = load_specification(Path("design-system.json"))
    report = asyncio.run(analyze("https://example.com", spec))
"""

from .checks.accessibility import check as check_accessibility
from .cli import __version__, main
from .errors import (
    AnalysisError,
    ConfigError,
    DesignGuardError,
    DocumentFetchError,
    SpecificationError,
)
from .evaluator import evaluate
from .models import DesignSystemDNA, Finding, Position, Report, Rule, Summary
from .report import analyze, compliance_score, filter_results, write_json_report
from .spec_loader import load_specification, parse_specification, sample_specification
from .state import AppState

__all__ = [
    "__version__",
    "main",
    # Models
    "Rule",
    "DesignSystemDNA",
    "Finding",
    "Position",
    "Summary",
    "Report",
    # Core operations
    "evaluate",
    "check_accessibility",
    "analyze",
    "compliance_score",
    "filter_results",
    "write_json_report",
    # Specifications
    "load_specification",
    "parse_specification",
    "sample_specification",
    # State
    "AppState",
    # Errors
    "DesignGuardError",
    "SpecificationError",
    "ConfigError",
    "DocumentFetchError",
    "AnalysisError",
]
