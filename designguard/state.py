"""
Application state for a designguard front end.

Holds what the presentation layer needs between user actions: the target,
the loaded specification, progress of the current run and its outcome. The
analysis itself is done by ``report.analyze``; this object only records
inputs and results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

from .config import AnalysisConfig
from .document import Fetcher
from .errors import AnalysisError
from .models import DesignSystemDNA, Finding, Report
from .report import analyze

log = logging.getLogger(__name__)

Tab = Literal["analyze", "results"]


def progress_text(progress: float) -> str:
    """Phase label shown for a progress value."""
    if progress < 20:
        return "Loading website..."
    if progress < 40:
        return "Capturing DOM structure..."
    if progress < 60:
        return "Analyzing CSS properties..."
    if progress < 80:
        return "Running accessibility checks..."
    if progress < 95:
        return "Validating against design system..."
    return "Generating report..."


@dataclass
class AppState:
    """Mutable state owned by the presentation layer."""

    website_url: str = ""
    specification: Optional[DesignSystemDNA] = None
    is_analyzing: bool = False
    analysis_progress: float = 0.0
    current_report: Optional[Report] = None
    active_tab: Tab = "analyze"
    selected_result: Optional[Finding] = None
    last_error: Optional[str] = None
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    @property
    def can_analyze(self) -> bool:
        return bool(self.website_url) and self.specification is not None and not self.is_analyzing

    def set_progress(self, progress: float) -> None:
        self.analysis_progress = progress

    async def start_analysis(self, fetcher: Optional[Fetcher] = None) -> Optional[Report]:
        """Run an analysis for the current url and specification.

        Returns:
            The new report, or None if inputs are missing, a run is already
            in progress, or the run failed (see ``last_error``).
        """
        if not self.website_url or self.specification is None:
            log.error("URL and Design System DNA are required for analysis")
            return None
        if self.is_analyzing:
            return None

        self.is_analyzing = True
        self.analysis_progress = 0.0
        self.current_report = None
        self.selected_result = None
        self.last_error = None
        self.active_tab = "results"

        try:
            report = await analyze(
                self.website_url,
                self.specification,
                on_progress=self.set_progress,
                config=self.config,
                fetcher=fetcher,
            )
        except AnalysisError as e:
            log.error("Analysis failed: %s", e)
            self.last_error = str(e)
            self.analysis_progress = 0.0
            return None
        finally:
            self.is_analyzing = False

        self.current_report = report
        self.analysis_progress = 100.0
        return report

    def select_result(self, finding_id: Optional[str]) -> Optional[Finding]:
        """Select a finding of the current report by id (None clears)."""
        if finding_id is None or self.current_report is None:
            self.selected_result = None
            return None
        self.selected_result = next(
            (r for r in self.current_report.results if r.id == finding_id), None
        )
        return self.selected_result

    def reset(self) -> None:
        """Return to the initial state, keeping the configuration."""
        self.website_url = ""
        self.specification = None
        self.is_analyzing = False
        self.analysis_progress = 0.0
        self.current_report = None
        self.active_tab = "analyze"
        self.selected_result = None
        self.last_error = None
