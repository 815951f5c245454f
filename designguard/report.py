"""
Report aggregation: run every rule and accessibility check against a target.

``analyze`` is the main entry point. A run is a single coroutine with
suspension points at the document fetch, after each rule, and between
phases. Progress is reported synchronously at fixed checkpoints:

    10  loading the target
    30  document retrieved
    40  DOM parsed
    60  rules evaluated
    80  accessibility checks done
    95  summary computed
    100 report ready

Cancelling the task running ``analyze`` stops the run at its next suspension
point; ``asyncio.CancelledError`` is never converted into a report.
"""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import math
from pathlib import Path
from typing import Callable, Optional

from bs4 import BeautifulSoup

from .checks import CheckRegistry, accessibility
from .config import AnalysisConfig
from .document import Fetcher, load_document_with_fallback
from .errors import AnalysisError, DesignGuardError
from .evaluator import evaluate
from .models import STATUSES, DesignSystemDNA, Finding, Report, Summary
from .utils import now_iso

log = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


# =============================================================================
# Screenshot Placeholder
# =============================================================================


def screenshot_placeholder(label: str = "Screenshot unavailable") -> str:
    """A static SVG stand-in for a page capture, as a data URL."""
    svg = (
        '<svg width="800" height="600" xmlns="http://www.w3.org/2000/svg">'
        '<rect width="100%" height="100%" fill="#f0f0f0"/>'
        '<text x="50%" y="50%" font-family="Arial" font-size="18" fill="#333" '
        f'text-anchor="middle" dy=".3em">{label}</text>'
        "</svg>"
    )
    return "data:image/svg+xml;base64," + base64.b64encode(svg.encode("utf-8")).decode("ascii")


# =============================================================================
# Progress
# =============================================================================


class _Progress:
    """Forwards checkpoints to an observer, never going backwards."""

    def __init__(self, callback: Optional[ProgressCallback]) -> None:
        self._callback = callback
        self._last = 0.0

    def __call__(self, value: float) -> None:
        value = min(max(value, self._last), 100.0)
        self._last = value
        if self._callback is not None:
            self._callback(value)


async def _pause(seconds: float) -> None:
    # Always yield to the event loop, even without a configured delay
    await asyncio.sleep(seconds if seconds > 0 else 0)


# =============================================================================
# Analysis
# =============================================================================


async def analyze(
    target: str,
    specification: DesignSystemDNA,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[AnalysisConfig] = None,
    fetcher: Optional[Fetcher] = None,
    checks: Optional[CheckRegistry] = None,
) -> Report:
    """Validate a target against a design system specification.

    Args:
        target: http(s) URL, data URL, or raw markup.
        specification: A validated specification.
        on_progress: Called with checkpoint values in [0, 100].
        config: Analysis settings (default: AnalysisConfig()).
        fetcher: Blocking fetch function override, mainly for tests.
        checks: Check registry override (default: the global registry).

    Returns:
        Report with rule findings in specification order, followed by
        accessibility findings.

    Raises:
        AnalysisError: If the document cannot be obtained even from the
            fallback, or any unexpected error escapes the per-rule checks.
    """
    config = config or AnalysisConfig()
    progress = _Progress(on_progress)

    try:
        progress(10)
        log.info("Loading %s", target[:80])
        document = await load_document_with_fallback(target, config, fetcher)
        progress(30)
        await _pause(config.phase_delay)

        soup = BeautifulSoup(document.html, "html.parser")
        progress(40)

        results: list[Finding] = []
        for rule in specification.rules:
            finding = evaluate(rule, document.html, document.css, checks)
            if finding is not None:
                results.append(finding)
            await _pause(config.rule_delay)
        log.info("Evaluated %d rules, %d findings", len(specification.rules), len(results))
        progress(60)
        await _pause(config.phase_delay)

        results.extend(accessibility.check(soup))
        progress(80)
        await _pause(config.phase_delay)

        summary = Summary.from_results(results)
        progress(95)

        report = Report(
            url=document.url,
            timestamp=now_iso(),
            summary=summary,
            results=results,
            screenshot=screenshot_placeholder(),
        )
        progress(100)
        return report

    except AnalysisError:
        raise
    except DesignGuardError as e:
        raise AnalysisError(target[:80], str(e)) from e
    except Exception as e:
        raise AnalysisError(target[:80], f"{type(e).__name__}: {e}") from e


# =============================================================================
# Report Helpers
# =============================================================================


def compliance_score(summary: Summary) -> int:
    """Percentage of correct findings, rounded half up. 0 for empty reports."""
    if summary.total == 0:
        return 0
    return int(math.floor(summary.correct / summary.total * 100 + 0.5))


def filter_results(report: Report, status: str) -> list[Finding]:
    """Findings with the given status, in report order.

    Raises:
        ValueError: If status is not 'correct', 'warning' or 'error'.
    """
    if status not in STATUSES:
        raise ValueError(f"Unknown status '{status}'. Must be one of: {', '.join(STATUSES)}")
    return [r for r in report.results if r.status == status]


def write_json_report(report: Report, out_path: str | Path) -> Path:
    """Write a report as JSON with camelCase keys."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with out_path.open("w", encoding="utf-8") as f:
        json.dump(report.model_dump(by_alias=True, exclude_none=True), f, indent=2, ensure_ascii=False)

    return out_path
