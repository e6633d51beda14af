"""Suggested heading outline generation.

Rewrites a page's heading sequence into a hierarchically sound outline.
The first heading becomes the H1; every later heading is placed by its
text (listing sections, article titles, footer calls-to-action) or, when
no pattern applies, capped at one level below the outline built so far.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from analyzer.extraction.headings import HeadingRecord
from analyzer.outline.patterns import (
    DEFAULT_PATTERNS,
    RECENT_ARTICLES_TITLE,
    HeadingPatterns,
    groups_articles,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SuggestedHeading:
    """A heading in the suggested outline."""

    level: int
    text: str
    synthetic: bool = False  # Inserted grouping heading, not from the page

    def to_dict(self) -> dict:
        return {"level": self.level, "text": self.text}


BOOTSTRAP_OUTLINE = (
    SuggestedHeading(level=1, text="Add a main page title", synthetic=True),
    SuggestedHeading(level=2, text="Add section headings", synthetic=True),
    SuggestedHeading(level=3, text="Add subsection headings as needed", synthetic=True),
)

SECTION_LEVEL = 2
ARTICLE_LEVEL = 3


class HeadingSuggester:
    """Builds a suggested outline from a page's headings."""

    def __init__(self, patterns: HeadingPatterns | None = None):
        self.patterns = patterns or DEFAULT_PATTERNS

    def suggest(self, headings: Sequence[HeadingRecord]) -> list[SuggestedHeading]:
        """
        Generate a suggested outline.

        Args:
            headings: Headings in document order

        Returns:
            Suggested headings; may be longer than the input when a
            grouping section is inserted
        """
        if not headings:
            return list(BOOTSTRAP_OUTLINE)

        outline = [SuggestedHeading(level=1, text=headings[0].text)]
        for heading in headings[1:]:
            outline = self._place(outline, heading)

        logger.debug(
            "heading_suggestions_generated",
            input_headings=len(headings),
            suggestions=len(outline),
            synthetic=sum(1 for s in outline if s.synthetic),
        )

        return outline

    def _place(
        self,
        outline: list[SuggestedHeading],
        heading: HeadingRecord,
    ) -> list[SuggestedHeading]:
        """Append one heading to the outline, returning the extended outline."""
        text = heading.text
        last_level = outline[-1].level

        if self.patterns.is_section_title(text):
            return [*outline, SuggestedHeading(level=SECTION_LEVEL, text=text)]

        if self.patterns.is_article_title(text) and last_level <= SECTION_LEVEL:
            if not self._has_article_section(outline):
                outline = [
                    *outline,
                    SuggestedHeading(
                        level=SECTION_LEVEL, text=RECENT_ARTICLES_TITLE, synthetic=True
                    ),
                ]
                last_level = SECTION_LEVEL
            # Capped so the outline never skips a level
            level = min(ARTICLE_LEVEL, last_level + 1)
            return [*outline, SuggestedHeading(level=level, text=text)]

        if self.patterns.is_footer_title(text):
            return [*outline, SuggestedHeading(level=SECTION_LEVEL, text=text)]

        level = min(heading.level, last_level + 1)
        return [*outline, SuggestedHeading(level=level, text=text)]

    @staticmethod
    def _has_article_section(outline: Sequence[SuggestedHeading]) -> bool:
        return any(s.level == SECTION_LEVEL and groups_articles(s.text) for s in outline)


def suggest_headings(
    headings: Sequence[HeadingRecord],
    patterns: HeadingPatterns | None = None,
) -> list[SuggestedHeading]:
    """
    Convenience function to generate a suggested outline.

    Args:
        headings: Headings in document order
        patterns: Optional keyword lists overriding the defaults

    Returns:
        Suggested headings
    """
    return HeadingSuggester(patterns).suggest(headings)
