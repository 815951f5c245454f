"""
CSS matching utilities for design system validation.

Provides the lookup used by the rule checks: find the first declaration of a
property in stylesheet text and extract its value. This is a best-effort
matcher, not a CSS parser. It does NOT resolve shorthand properties,
specificity, cascading, or ``!important``.

Matching contract:
    - The first occurrence in the stylesheet wins.
    - The property name is matched case-insensitively as a literal substring
      (``color`` also matches inside ``background-color``).
    - A declaration must be terminated by ``;`` to be found.
    - The returned value is trimmed. An empty declaration (``color: ;``)
      still counts as the first occurrence and yields ``""``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class Declaration:
    """A property declaration located in stylesheet text.

    Attributes:
        property: The property name as written in the rule that was searched for.
        value: The trimmed declaration value.
        line_number: Line where the declaration starts (after comment removal).
    """

    property: str
    value: str
    line_number: int


# =============================================================================
# Matching Functions
# =============================================================================


def remove_comments(content: str) -> str:
    """Remove ``/* ... */`` comments from CSS content."""
    return re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)


def _declaration_pattern(property_name: str) -> re.Pattern[str]:
    # Value may be empty and may not cross a block or declaration boundary
    return re.compile(
        re.escape(property_name) + r"\s*:\s*([^;{}]*?)\s*;",
        re.IGNORECASE,
    )


def find_declaration(css: str, property_name: str) -> Optional[Declaration]:
    """Find the first declaration of a property in stylesheet text.

    Args:
        css: Raw stylesheet text.
        property_name: Property to look for (e.g. 'background-color').

    Returns:
        The first matching Declaration, or None if the property never
        appears as ``property: value;``.
    """
    if not property_name:
        return None

    content = remove_comments(css)
    match = _declaration_pattern(property_name).search(content)
    if match is None:
        return None

    return Declaration(
        property=property_name,
        value=match.group(1).strip(),
        line_number=content[: match.start()].count("\n") + 1,
    )


def find_property_value(css: str, property_name: str) -> Optional[str]:
    """Return the trimmed value of the first declaration, or None."""
    declaration = find_declaration(css, property_name)
    return declaration.value if declaration else None


# =============================================================================
# Value Parsing
# =============================================================================

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Union[str, int, float, list]) -> Optional[int]:
    """Parse the leading integer of a value.

    '620' -> 620, '1.5rem' -> 1, ' -4px' -> -4, 'bold' -> None.
    Numbers are truncated toward zero. Lists are read as their
    comma-joined text.

    Returns:
        The integer, or None when the value has no numeric prefix.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    if isinstance(value, list):
        value = ",".join(str(v) for v in value)

    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))
