"""
Accessibility checks over a parsed document.

These run on every analysis regardless of the rules in the specification:
- Image alternative text: one finding per ``<img>``, error when ``alt`` is
  missing or empty. Whitespace counts as text.
- Heading structure: one finding when the document has at least one
  ``<h1>``..``<h6>``. Nothing is reported for a document without headings.

Finding ids are derived from document order, so the same document always
yields the same findings.
"""

from __future__ import annotations

from typing import Union

from bs4 import BeautifulSoup, Tag

from ..models import Finding, Position

ALT_TEXT_CHECK_ID = "accessibility-alt-text"
HEADING_CHECK_ID = "accessibility-heading-structure"

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def _as_soup(document: Union[str, BeautifulSoup]) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document or "", "html.parser")


def _image_locator(img: Tag, index: int) -> str:
    src = img.get("src")
    if src:
        return f'img[src="{src}"]'
    return f"img #{index + 1}"


def check_images(soup: BeautifulSoup) -> list[Finding]:
    """One finding per image, in document order."""
    findings: list[Finding] = []

    for index, img in enumerate(soup.find_all("img")):
        alt = img.get("alt")
        has_alt = isinstance(alt, str) and alt != ""
        locator = _image_locator(img, index)

        if has_alt:
            findings.append(
                Finding(
                    id=f"a11y-img-{index}",
                    rule_id=ALT_TEXT_CHECK_ID,
                    element=locator,
                    status="correct",
                    message="Image has alternative text",
                    actual_value="present",
                    expected_value="present",
                    position=Position(),
                )
            )
        else:
            findings.append(
                Finding(
                    id=f"a11y-img-{index}",
                    rule_id=ALT_TEXT_CHECK_ID,
                    element=locator,
                    status="error",
                    message="Image is missing alternative text (alt attribute)",
                    actual_value="missing",
                    expected_value="present",
                    position=Position(),
                )
            )

    return findings


def check_headings(soup: BeautifulSoup) -> list[Finding]:
    """A single finding when heading structure is present, else none."""
    headings = soup.find_all(HEADING_TAGS)
    if not headings:
        return []

    return [
        Finding(
            id="a11y-headings",
            rule_id=HEADING_CHECK_ID,
            element="h1-h6",
            status="correct",
            message=f"Document uses heading structure ({len(headings)} headings)",
            actual_value=len(headings),
            expected_value="present",
            position=Position(),
        )
    ]


def check(document: Union[str, BeautifulSoup]) -> list[Finding]:
    """Run all accessibility checks.

    Args:
        document: Markup, or an already parsed BeautifulSoup tree.

    Returns:
        Image findings in document order, followed by the heading finding.
    """
    soup = _as_soup(document)
    return check_images(soup) + check_headings(soup)
