"""Pydantic models for design system rules and validation reports.

This module contains the data model shared by every component:
- Specification input: Rule, SpecMetadata, DesignSystemDNA
- Evaluation output: Position, Finding
- Aggregated output: Summary, Report

All models serialize with the camelCase names used by the JSON format
(``expectedValue``, ``ruleId``, ...). Rule kinds are read from the ``type``
key of user-authored files; ``kind`` is accepted as well.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


RuleKind = Literal["color", "typography", "spacing", "accessibility", "layout"]
Status = Literal["correct", "warning", "error"]

RULE_KINDS: tuple[str, ...] = ("color", "typography", "spacing", "accessibility", "layout")
STATUSES: tuple[str, ...] = ("correct", "warning", "error")

ExpectedValue = Union[str, int, float, List[str]]
DisplayValue = Union[str, int, float]


# =============================================================================
# Specification
# =============================================================================


class Rule(BaseModel):
    """One checkable expectation about a style property."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(min_length=1, description="Rule identifier, unique within a specification")
    kind: RuleKind = Field(
        alias="type",
        validation_alias=AliasChoices("type", "kind"),
        description="Rule category",
    )
    property: str = Field(min_length=1, description="Style property to inspect (e.g. 'background-color')")
    expected_value: ExpectedValue = Field(
        alias="expectedValue",
        description="Expected value; a string, a number, or a list of strings",
    )
    tolerance: Optional[float] = Field(
        None, ge=0, description="Permitted absolute numeric deviation"
    )
    description: str = Field("", description="Human-readable explanation")

    @field_validator("id", "property")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def expected_display(self) -> DisplayValue:
        """Expected value as shown in findings (lists joined with commas)."""
        if isinstance(self.expected_value, list):
            return ",".join(self.expected_value)
        return self.expected_value


class SpecMetadata(BaseModel):
    """Free-form annotation attached to a specification."""

    model_config = ConfigDict(extra="allow")

    author: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None


class DesignSystemDNA(BaseModel):
    """A named, versioned, ordered collection of rules."""

    name: str = Field(min_length=1, description="Design system name")
    version: str = Field(min_length=1, description="Design system version")
    rules: List[Rule] = Field(default_factory=list, description="Rules in evaluation order")
    metadata: Optional[SpecMetadata] = Field(None, description="Optional annotation, never evaluated")

    @model_validator(mode="after")
    def _unique_rule_ids(self) -> "DesignSystemDNA":
        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise ValueError(f"duplicate rule id '{rule.id}'")
            seen.add(rule.id)
        return self

    def to_json(self) -> str:
        """Serialize to the user-facing JSON format."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


# =============================================================================
# Findings
# =============================================================================


class Position(BaseModel):
    """Bounding box of an inspected element. All zeros when unknown."""

    model_config = ConfigDict(frozen=True)

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


class Finding(BaseModel):
    """Verdict for one rule/document pair or one accessibility check."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(description="Identifier, unique within a report")
    rule_id: str = Field(alias="ruleId", description="Originating rule or accessibility check id")
    element: str = Field(description="Human-readable locator of what was inspected")
    status: Status
    message: str
    actual_value: DisplayValue = Field(alias="actualValue")
    expected_value: DisplayValue = Field(alias="expectedValue")
    screenshot: Optional[str] = None
    position: Position = Field(default_factory=Position)


# =============================================================================
# Reports
# =============================================================================


class Summary(BaseModel):
    """Finding counts by status."""

    model_config = ConfigDict(frozen=True)

    correct: int = Field(0, ge=0)
    warnings: int = Field(0, ge=0)
    errors: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    @classmethod
    def from_results(cls, results: List[Finding]) -> "Summary":
        correct = sum(1 for r in results if r.status == "correct")
        warnings = sum(1 for r in results if r.status == "warning")
        errors = sum(1 for r in results if r.status == "error")
        return cls(correct=correct, warnings=warnings, errors=errors, total=len(results))


class Report(BaseModel):
    """Aggregated outcome of one analysis run."""

    model_config = ConfigDict(frozen=True)

    url: str
    timestamp: str
    summary: Summary
    results: List[Finding] = Field(default_factory=list)
    screenshot: Optional[str] = None

    @model_validator(mode="after")
    def _summary_matches_results(self) -> "Report":
        if self.summary != Summary.from_results(self.results):
            raise ValueError("summary counts do not match results")
        return self

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
