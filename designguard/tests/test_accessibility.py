"""
Tests for the accessibility checks.

Tests cover:
- Image alternative text findings (one per image, document order)
- Heading structure finding (present or absent)
- Determinism and parsed-document input
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from designguard.checks.accessibility import (
    ALT_TEXT_CHECK_ID,
    HEADING_CHECK_ID,
    check,
    check_headings,
    check_images,
)


@pytest.mark.evergreen
class TestImageAltText:
    """One finding per <img>."""

    def test_missing_alt_is_error(self) -> None:
        findings = check('<img src="hero.png">')
        assert len(findings) == 1
        finding = findings[0]
        assert finding.status == "error"
        assert finding.actual_value == "missing"
        assert finding.expected_value == "present"
        assert finding.rule_id == ALT_TEXT_CHECK_ID
        assert finding.element == 'img[src="hero.png"]'

    def test_empty_alt_is_error(self) -> None:
        findings = check('<img src="a.png" alt="">')
        assert [f.status for f in findings] == ["error"]

    def test_whitespace_alt_is_present(self) -> None:
        findings = check('<img src="a.png" alt=" ">')
        assert [f.status for f in findings] == ["correct"]
        assert findings[0].actual_value == "present"

    def test_alt_present_is_correct(self) -> None:
        findings = check('<img src="logo.png" alt="Company logo">')
        assert len(findings) == 1
        assert findings[0].status == "correct"
        assert findings[0].actual_value == "present"

    def test_no_images_no_findings(self) -> None:
        assert check("<p>No pictures here</p>") == []

    def test_ids_follow_document_order(self) -> None:
        html = '<img src="a.png" alt="A"><div><img src="b.png"></div><img alt="C">'
        findings = check_images(BeautifulSoup(html, "html.parser"))
        assert [f.id for f in findings] == ["a11y-img-0", "a11y-img-1", "a11y-img-2"]
        assert [f.status for f in findings] == ["correct", "error", "correct"]
        assert findings[2].element == "img #3"


@pytest.mark.evergreen
class TestHeadingStructure:
    """A single finding when headings exist."""

    def test_headings_present(self) -> None:
        findings = check("<h1>Title</h1><h2>Sub</h2><h6>Fine print</h6>")
        assert len(findings) == 1
        finding = findings[0]
        assert finding.rule_id == HEADING_CHECK_ID
        assert finding.status == "correct"
        assert finding.actual_value == 3
        assert finding.expected_value == "present"

    def test_no_headings_no_finding(self) -> None:
        assert check_headings(BeautifulSoup("<p>Plain</p>", "html.parser")) == []


@pytest.mark.evergreen
class TestCheck:
    """Combined checks."""

    def test_images_then_heading(self, page_html: str) -> None:
        findings = check(page_html)
        assert [f.rule_id for f in findings] == [
            ALT_TEXT_CHECK_ID,
            ALT_TEXT_CHECK_ID,
            HEADING_CHECK_ID,
        ]
        assert [f.status for f in findings] == ["correct", "error", "correct"]

    def test_deterministic(self, page_html: str) -> None:
        assert check(page_html) == check(page_html)

    def test_accepts_parsed_document(self, page_html: str) -> None:
        soup = BeautifulSoup(page_html, "html.parser")
        assert check(soup) == check(page_html)

    def test_empty_document(self) -> None:
        assert check("") == []
