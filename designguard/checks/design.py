"""
Stylesheet checks for color, typography and layout rules.

Color and layout rules compare the declared value to the expected value as
exact strings. Typography rules compare leading integers within the rule's
tolerance. A present-but-wrong value is a warning, never an error.
"""

from __future__ import annotations

from ..css_parser import parse_leading_int
from ..models import Rule
from .base import BaseRuleCheck
from .registry import register_check


def _tolerance(rule: Rule) -> float:
    return rule.tolerance if rule.tolerance is not None else 0.0


@register_check
class ColorCheck(BaseRuleCheck):
    """Exact match of a color declaration."""

    def __init__(self) -> None:
        super().__init__("color", "CSS Rule")

    def compare(self, rule: Rule, actual: str) -> bool:
        return actual == str(rule.expected_display())

    def describe(self, rule: Rule, actual: str, matched: bool) -> str:
        if matched:
            return f"Color matches design system: {actual}"
        return f"Color mismatch: expected {rule.expected_display()}, found {actual}"


@register_check
class TypographyCheck(BaseRuleCheck):
    """Numeric match of a typography declaration within tolerance.

    Values without a numeric prefix ('bold', 'inherit') count as 0.
    """

    def __init__(self) -> None:
        super().__init__("typography", "CSS Typography")

    def compare(self, rule: Rule, actual: str) -> bool:
        actual_numeric = parse_leading_int(actual) or 0
        expected_numeric = parse_leading_int(rule.expected_value) or 0
        return abs(actual_numeric - expected_numeric) <= _tolerance(rule)

    def describe(self, rule: Rule, actual: str, matched: bool) -> str:
        bound = f"{rule.expected_display()} ±{_tolerance(rule):g}"
        if matched:
            return f"Typography within tolerance: {actual} (expected {bound})"
        return f"Typography outside tolerance: expected {bound}, found {actual}"


@register_check
class LayoutCheck(BaseRuleCheck):
    """Exact match of a layout declaration."""

    def __init__(self) -> None:
        super().__init__("layout", "Layout CSS")

    def compare(self, rule: Rule, actual: str) -> bool:
        return actual == str(rule.expected_display())

    def describe(self, rule: Rule, actual: str, matched: bool) -> str:
        if matched:
            return f"Layout property {rule.property} matches: {actual}"
        return (
            f"Layout property {rule.property} mismatch: "
            f"expected {rule.expected_display()}, found {actual}"
        )
