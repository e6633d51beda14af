"""Heading outline rules: issue detection and outline suggestions."""

from analyzer.outline.issues import HeadingIssueAnalyzer, analyze_heading_issues
from analyzer.outline.patterns import (
    DEFAULT_PATTERNS,
    HeadingPatterns,
    is_article_title,
    is_footer_title,
    is_section_title,
)
from analyzer.outline.suggestions import HeadingSuggester, SuggestedHeading, suggest_headings

__all__ = [
    "DEFAULT_PATTERNS",
    "HeadingIssueAnalyzer",
    "HeadingPatterns",
    "HeadingSuggester",
    "SuggestedHeading",
    "analyze_heading_issues",
    "is_article_title",
    "is_footer_title",
    "is_section_title",
    "suggest_headings",
]
