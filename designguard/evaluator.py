"""Rule evaluation: one rule against one document."""

from __future__ import annotations

import logging
import re
from typing import Optional

from pydantic import ValidationError

from .checks import CheckRegistry, registry
from .models import Finding, Rule

log = logging.getLogger(__name__)


def evaluate(
    rule: Rule,
    html: str,
    css: str,
    checks: Optional[CheckRegistry] = None,
) -> Optional[Finding]:
    """Evaluate a rule against a document's markup and stylesheet.

    Only kinds with a registered check (color, typography, layout) produce
    findings. A rule whose property is not declared, or whose value cannot
    be parsed, is skipped and yields None. A malformed Finding is not a
    parse failure and propagates.

    Args:
        rule: The rule to evaluate.
        html: Document markup.
        css: Stylesheet text.
        checks: Registry to dispatch through (default: the global registry).

    Returns:
        A Finding with status 'correct' or 'warning', or None.
    """
    lookup = checks if checks is not None else registry
    check = lookup.get(rule.kind)
    if check is None:
        log.debug("Rule %s: no stylesheet check for kind '%s'", rule.id, rule.kind)
        return None

    try:
        finding = check.check(rule, html, css)
    except ValidationError:
        raise
    except (ValueError, re.error) as e:
        log.debug("Rule %s skipped after %s: %s", rule.id, type(e).__name__, e)
        return None

    if finding is None:
        log.debug("Rule %s: property '%s' not declared", rule.id, rule.property)
    return finding
