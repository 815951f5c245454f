"""Exception types raised by designguard."""

from __future__ import annotations


class DesignGuardError(Exception):
    """Base class for all designguard errors."""


class SpecificationError(DesignGuardError):
    """The design system JSON is malformed or does not match the schema."""


class ConfigError(DesignGuardError):
    """The configuration file is unreadable or contains invalid values."""


class DocumentFetchError(DesignGuardError):
    """The target document could not be retrieved."""

    def __init__(self, target: str, cause: str) -> None:
        super().__init__(f"Failed to fetch {target}: {cause}")
        self.target = target
        self.cause = cause


class AnalysisError(DesignGuardError):
    """An analysis run failed and produced no report."""

    def __init__(self, target: str, cause: str) -> None:
        super().__init__(f"Analysis of {target} failed: {cause}")
        self.target = target
        self.cause = cause
