"""Heading extraction from raw HTML.

Produces the ordered (level, text) sequence that the outline rules work on.
Document order is preserved; empty headings are dropped.
"""

from dataclasses import dataclass

import structlog
from bs4 import BeautifulSoup

logger = structlog.get_logger(__name__)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
MAX_HEADING_TEXT_LENGTH = 150


@dataclass(frozen=True)
class HeadingRecord:
    """A heading in the document."""

    level: int  # 1-6
    text: str

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")

    def to_dict(self) -> dict:
        return {"level": self.level, "text": self.text}


def _normalize_text(raw: str) -> str:
    """Collapse whitespace runs and trim."""
    return " ".join(raw.split())


def extract_headings(
    html: str,
    max_length: int = MAX_HEADING_TEXT_LENGTH,
) -> list[HeadingRecord]:
    """
    Extract H1-H6 headings from HTML in document order.

    Args:
        html: HTML content to parse
        max_length: Maximum characters kept per heading text

    Returns:
        List of HeadingRecord, one per non-empty heading
    """
    soup = BeautifulSoup(html, "html.parser")

    headings = []
    for tag in soup.find_all(HEADING_TAGS):
        text = _normalize_text(tag.get_text())
        if not text:
            continue
        # Truncation can end on a space
        text = text[:max_length].rstrip()
        headings.append(HeadingRecord(level=int(tag.name[1]), text=text))

    logger.debug("headings_extracted", count=len(headings))

    return headings
