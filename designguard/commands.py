"""
Command handlers for the designguard CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
from pathlib import Path
from typing import Optional

from .config import load_config
from .document import to_data_url
from .errors import DesignGuardError
from .models import Report
from .report import analyze, compliance_score, filter_results, write_json_report
from .spec_loader import dump_specification, load_specification, sample_specification
from .state import progress_text
from .utils import log, truncate


# =============================================================================
# Helpers
# =============================================================================


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DesignGuardError(f"Cannot read {path}: {e}") from e


def _resolve_target(args: argparse.Namespace) -> str:
    """Target from the positional argument or local --html/--css files."""
    if args.html:
        if args.target:
            raise DesignGuardError("Provide either a target or --html FILE, not both")
        css = _read_text(args.css) if args.css else ""
        return to_data_url(_read_text(args.html), css)
    if args.css:
        raise DesignGuardError("--css requires --html")
    if not args.target:
        raise DesignGuardError("Provide a target URL or --html FILE")
    return args.target


def print_report(report: Report, status: Optional[str] = None) -> None:
    """Print a report summary and its findings."""
    summary = report.summary

    log.header("Design System Report")
    log.table_row("Target", truncate(report.url))
    log.table_row("Timestamp", report.timestamp)
    log.table_row("Correct", str(summary.correct))
    log.table_row("Warnings", str(summary.warnings))
    log.table_row("Errors", str(summary.errors))
    log.table_row("Total", str(summary.total))
    log.table_row("Compliance", f"{compliance_score(summary)}%")

    findings = filter_results(report, status) if status else report.results

    log.header(f"Findings ({len(findings)})")
    if not findings:
        log.dim("No findings")
        return

    for finding in findings:
        line = f"{finding.rule_id} ({finding.element}): {finding.message}"
        if finding.status == "correct":
            log.success(line)
        elif finding.status == "warning":
            log.warning(line)
        else:
            log.error(line)
        log.dim(f"    actual: {finding.actual_value}  expected: {finding.expected_value}")


# =============================================================================
# Commands
# =============================================================================


def cmd_analyze(args: argparse.Namespace) -> int:
    """Run an analysis and print (and optionally save) the report."""
    spec = load_specification(Path(args.spec))
    config = load_config(Path(args.config) if args.config else None)

    overrides = {}
    if args.timeout is not None:
        overrides["fetch_timeout"] = args.timeout
    if args.no_proxy:
        overrides["use_proxy"] = False
    if args.no_fallback:
        overrides["fallback_to_sample"] = False
    if overrides:
        config = dataclasses.replace(config, **overrides)

    target = _resolve_target(args)

    log.header(f"Analyzing against {spec.name} {spec.version}")
    log.info(f"{len(spec.rules)} rules")

    def on_progress(value: float) -> None:
        if not args.quiet:
            log.progress(value, progress_text(value))

    report = asyncio.run(analyze(target, spec, on_progress=on_progress, config=config))

    print_report(report, args.status)

    if args.output:
        path = write_json_report(report, args.output)
        log.success(f"Report written to {path}")

    if args.fail_on_error and report.summary.errors > 0:
        return 1
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Print or save the sample specification."""
    spec = sample_specification()
    if args.output:
        path = dump_specification(spec, Path(args.output))
        log.success(f"Sample specification written to {path}")
    else:
        print(spec.to_json())
    return 0


def cmd_check_spec(args: argparse.Namespace) -> int:
    """Validate a specification file and list its rules."""
    spec = load_specification(Path(args.spec))

    log.success(f"{spec.name} {spec.version}: {len(spec.rules)} rules")
    for rule in spec.rules:
        tolerance = f" ±{rule.tolerance:g}" if rule.tolerance is not None else ""
        log.table_row(
            rule.id,
            f"{rule.kind:<13} {rule.property} = {rule.expected_display()}{tolerance}",
        )
    return 0
