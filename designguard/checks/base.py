"""
Base types and protocols for the pluggable rule check system.

Defines the contract that every rule-kind check must follow, plus a base
class implementing the shared find-then-compare procedure.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional, Protocol, runtime_checkable

from ..css_parser import find_declaration
from ..models import Finding, Position, Rule


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class RuleCheck(Protocol):
    """Protocol for rule checks.

    A rule check handles exactly one rule kind. Given a rule and a document's
    markup and stylesheet text, it returns a Finding, or None when the rule
    does not apply to the document.
    """

    @property
    def kind(self) -> str:
        """Rule kind handled by this check (e.g. 'color')."""
        ...

    @property
    def element(self) -> str:
        """Fixed locator label reported on findings."""
        ...

    def check(self, rule: Rule, html: str, css: str) -> Optional[Finding]:
        """Evaluate one rule against one document.

        Args:
            rule: The rule to evaluate.
            html: Document markup.
            css: Stylesheet text extracted from the document.

        Returns:
            A Finding, or None if the property is not declared.
        """
        ...


# =============================================================================
# Base Classes
# =============================================================================


class BaseRuleCheck:
    """Base class for stylesheet-matching checks.

    Subclasses provide the comparison and the wording of messages. The
    matching itself (first declaration, trimmed value, skip when absent)
    is shared.
    """

    def __init__(self, kind: str, element: str) -> None:
        self._kind = kind
        self._element = element

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def element(self) -> str:
        return self._element

    def check(self, rule: Rule, html: str, css: str) -> Optional[Finding]:
        declaration = find_declaration(css, rule.property)
        if declaration is None:
            return None

        actual = declaration.value
        matched = self.compare(rule, actual)
        return self._make_finding(
            rule,
            actual_value=actual,
            status="correct" if matched else "warning",
            message=self.describe(rule, actual, matched),
        )

    def compare(self, rule: Rule, actual: str) -> bool:
        """Override this method in subclasses."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement compare()"
        )

    def describe(self, rule: Rule, actual: str, matched: bool) -> str:
        expected = rule.expected_display()
        if matched:
            return f"{rule.property} matches design system: {actual}"
        return f"{rule.property} mismatch: expected {expected}, found {actual}"

    def _make_finding(self, rule: Rule, **kwargs: Any) -> Finding:
        """Helper to create a Finding for a rule with this check's label."""
        return Finding(
            id=f"{rule.id}-{uuid.uuid4().hex[:8]}",
            rule_id=rule.id,
            element=self.element,
            expected_value=rule.expected_display(),
            position=Position(),
            **kwargs,
        )
