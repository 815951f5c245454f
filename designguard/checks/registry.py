"""
Rule check registry.

Provides a centralized registry where checks register themselves by the rule
kind they handle. The evaluator looks checks up here; a kind with no
registered check produces no finding.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

from ..models import RULE_KINDS
from .base import RuleCheck

C = TypeVar("C", bound=Type[RuleCheck])


class CheckRegistry:
    """Registry for rule checks, keyed by rule kind."""

    def __init__(self) -> None:
        self._checks: dict[str, RuleCheck] = {}

    def register(self, check: RuleCheck) -> None:
        """Register a check instance.

        Raises:
            TypeError: If check doesn't implement the RuleCheck protocol.
            ValueError: If the kind is unknown or already has a check.
        """
        if not isinstance(check, RuleCheck):
            raise TypeError(
                f"Check must implement the RuleCheck protocol. "
                f"Got {type(check).__name__} which is missing required "
                f"attributes/methods (kind, element, check)."
            )

        kind = check.kind
        if kind not in RULE_KINDS:
            raise ValueError(
                f"Invalid rule kind '{kind}' for {type(check).__name__}. "
                f"Must be one of: {', '.join(sorted(RULE_KINDS))}"
            )

        if kind in self._checks:
            existing = self._checks[kind]
            raise ValueError(
                f"A check for '{kind}' is already registered "
                f"(existing: {type(existing).__name__}, "
                f"new: {type(check).__name__})"
            )

        self._checks[kind] = check

    def get(self, kind: str) -> Optional[RuleCheck]:
        """Get the check for a rule kind, or None."""
        return self._checks.get(kind)

    def list_kinds(self) -> list[str]:
        """Rule kinds with a registered check, sorted."""
        return sorted(self._checks.keys())

    def clear(self) -> None:
        """Clear all registered checks. Primarily for testing."""
        self._checks.clear()

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, kind: str) -> bool:
        return kind in self._checks


# Module-level singleton instance
registry = CheckRegistry()


def register_check(cls: C) -> C:
    """Decorator to register a check class.

    The decorated class is instantiated with no arguments and registered
    with the global registry.

    Usage:
        @register_check
        class ColorCheck(BaseRuleCheck):
            def __init__(self):
                super().__init__("color", "CSS Rule")
    """
    registry.register(cls())
    return cls
