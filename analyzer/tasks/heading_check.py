"""Heading outline check task runner.

Fetches a page, extracts its headings, then runs issue detection and
outline suggestion over the same heading sequence.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog

from analyzer.crawler.fetcher import Fetcher
from analyzer.extraction.headings import HeadingRecord, extract_headings
from analyzer.outline.issues import HeadingIssueAnalyzer
from analyzer.outline.suggestions import HeadingSuggester, SuggestedHeading
from api.config import get_settings
from api.exceptions import AnalysisFailedError, FetchFailedError

logger = structlog.get_logger(__name__)


@dataclass
class HeadingReport:
    """Headings, issues, and suggested outline for one page."""

    url: str
    headings: list[HeadingRecord] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    suggestions: list[SuggestedHeading] = field(default_factory=list)
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    fetch_time_ms: int | None = None

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "headings": [h.to_dict() for h in self.headings],
            "issues": list(self.issues),
            "suggestions": [s.to_dict() for s in self.suggestions],
            "timestamp": self.analyzed_at.isoformat(),
            "fetch_time_ms": self.fetch_time_ms,
        }


def get_fetcher() -> Fetcher:
    """Build a fetcher from application settings."""
    settings = get_settings()
    return Fetcher(
        user_agent=settings.fetch_user_agent,
        timeout=settings.fetch_timeout_seconds,
        max_redirects=settings.fetch_max_redirects,
    )


def analyze_html(html: str, url: str = "") -> HeadingReport:
    """
    Run extraction and outline analysis on already-fetched HTML.

    Args:
        html: Full HTML content
        url: Page URL, carried into the report

    Returns:
        HeadingReport for the page
    """
    settings = get_settings()

    headings = extract_headings(html, max_length=settings.heading_text_max_length)
    issues = HeadingIssueAnalyzer(check_organization=settings.check_organization).analyze(
        headings
    )
    suggestions = HeadingSuggester().suggest(headings)

    return HeadingReport(
        url=url,
        headings=headings,
        issues=issues,
        suggestions=suggestions,
    )


async def run_heading_analysis(url: str, fetcher: Fetcher | None = None) -> HeadingReport:
    """
    Fetch a page and analyze its heading outline.

    Args:
        url: Page URL
        fetcher: Optional fetcher; built from settings when omitted

    Returns:
        HeadingReport for the page

    Raises:
        FetchFailedError: The page answered with a non-2xx status
        AnalysisFailedError: No response could be obtained
    """
    logger.info("heading_check_starting", url=url)

    fetcher = fetcher or get_fetcher()
    result = await fetcher.fetch(url)

    if result.status_code == 0:
        raise AnalysisFailedError(result.error)
    if not result.success:
        raise FetchFailedError(url, result.status_code, result.reason)

    report = analyze_html(result.html or "", url=url)
    report.fetch_time_ms = result.fetch_time_ms

    logger.info(
        "heading_check_completed",
        url=url,
        headings=len(report.headings),
        issues=len(report.issues),
        suggestions=len(report.suggestions),
    )

    return report
