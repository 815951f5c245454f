"""
Pluggable rule checks.

Each stylesheet check handles one rule kind and registers itself with the
module-level registry on import. Accessibility checks are not rule-driven
and live in ``accessibility``.

Usage:
    from designguard.checks import registry

    check = registry.get(rule.kind)
    finding = check.check(rule, html, css) if check else None
"""

from .base import BaseRuleCheck, RuleCheck
from .registry import CheckRegistry, register_check, registry
from .design import ColorCheck, LayoutCheck, TypographyCheck
from . import accessibility

__all__ = [
    # Base types
    "RuleCheck",
    "BaseRuleCheck",
    # Registry
    "CheckRegistry",
    "registry",
    "register_check",
    # Stylesheet checks
    "ColorCheck",
    "TypographyCheck",
    "LayoutCheck",
    # Accessibility
    "accessibility",
]
