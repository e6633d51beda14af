"""Heading structure issue detection.

Flags the structural problems that matter for SEO and screen-reader
navigation: missing or repeated H1, skipped levels, a page that does not
open with an H1, and thin H2 sectioning.
"""

from collections.abc import Sequence

import structlog

from analyzer.extraction.headings import HeadingRecord

logger = structlog.get_logger(__name__)

NO_HEADINGS = "No heading tags found on the page"
MISSING_H1 = "No H1 tag found - every page should have exactly one H1"
NOT_STARTING_WITH_H1 = "Page should start with an H1 heading"


def multiple_h1_issue(count: int) -> str:
    return f"Multiple H1 tags found ({count}) - should have only one H1 per page"


def skipped_level_issue(previous: int, current: int) -> str:
    return (
        f"Skipped heading level: H{previous} followed by H{current}, "
        f"should use H{previous + 1}"
    )


def organization_issue(h2_count: int, h3_count: int) -> str:
    return (
        f"Only {h2_count} H2 section(s) for {h3_count} H3 subsection(s) - "
        "consider adding more H2 sections to organize the content"
    )


class HeadingIssueAnalyzer:
    """Checks a heading sequence for structural issues.

    Checks run in a fixed order and each reads the original sequence, so
    the issue list order is deterministic.
    """

    def __init__(self, check_organization: bool = True):
        self.check_organization = check_organization

    def analyze(self, headings: Sequence[HeadingRecord]) -> list[str]:
        """
        Analyze heading structure.

        Args:
            headings: Headings in document order

        Returns:
            Human-readable issue strings, in check order
        """
        if not headings:
            return [NO_HEADINGS]

        issues: list[str] = []

        h1_count = sum(1 for h in headings if h.level == 1)
        if h1_count == 0:
            issues.append(MISSING_H1)
        elif h1_count > 1:
            issues.append(multiple_h1_issue(h1_count))

        for previous, current in zip(headings, headings[1:]):
            if current.level > previous.level + 1:
                issues.append(skipped_level_issue(previous.level, current.level))

        if headings[0].level != 1:
            issues.append(NOT_STARTING_WITH_H1)

        if self.check_organization:
            h2_count = sum(1 for h in headings if h.level == 2)
            h3_count = sum(1 for h in headings if h.level == 3)
            if h3_count > 0 and h2_count < 2:
                issues.append(organization_issue(h2_count, h3_count))

        logger.debug(
            "heading_issues_analyzed",
            total_headings=len(headings),
            h1_count=h1_count,
            issues=len(issues),
        )

        return issues


def analyze_heading_issues(headings: Sequence[HeadingRecord]) -> list[str]:
    """
    Convenience function to analyze heading structure.

    Args:
        headings: Headings in document order

    Returns:
        Human-readable issue strings
    """
    analyzer = HeadingIssueAnalyzer()
    return analyzer.analyze(headings)
