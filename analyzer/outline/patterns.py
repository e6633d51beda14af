"""Content-pattern classifiers for heading text.

Each classifier is a plain predicate over heading text backed by a public
keyword list. Keywords are regex fragments matched against the lower-cased
text. Article and footer keywords match at a word start, so "Tutorials"
matches "tutorial" but "Insecure" does not match "secure". Section keywords
must match a whole word, so "news" does not match "Newsletter".
"""

import re
from dataclasses import dataclass, field

# Headings that introduce a listing section (blog index, news feed)
SECTION_PATTERNS = [
    "blog posts",
    "articles",
    "latest posts",
    "news",
    "updates",
    "more",
]

# Headings that look like an individual article or guide title
ARTICLE_PATTERNS = [
    "guide",
    "how to",
    "tutorial",
    "tips",
    r"(?:19|20)\d{2}\b",  # a 4-digit year
    "detection",
    "secure",
    "automate",
    "step by step",
    "best practices",
]

# Footer and call-to-action headings
FOOTER_PATTERNS = [
    "subscribe",
    "contact",
    "get started",
    "learn more",
    "sign up",
    "newsletter",
    "follow us",
    "about us",
    "join",
    "get in touch",
    "free trial",
]

# A level-2 heading containing one of these already groups articles
ARTICLE_SECTION_MARKERS = ["article", "blog", "post"]

RECENT_ARTICLES_TITLE = "Recent Articles"


def _compile(patterns: list[str], whole_word: bool = False) -> re.Pattern[str] | None:
    """Join keywords into one regex; None for an empty list (never matches)."""
    if not patterns:
        return None
    suffix = r"\b" if whole_word else ""
    return re.compile(r"\b(?:" + "|".join(patterns) + ")" + suffix)


def _matches(pattern: re.Pattern[str] | None, text: str) -> bool:
    return pattern is not None and bool(pattern.search(text.lower()))


@dataclass
class HeadingPatterns:
    """Keyword lists used to classify heading text.

    Section keywords must match whole words ("news" but not "newsletter");
    article and footer keywords match at a word start. An empty list turns
    its predicate off.
    """

    section: list[str] = field(default_factory=lambda: list(SECTION_PATTERNS))
    article: list[str] = field(default_factory=lambda: list(ARTICLE_PATTERNS))
    footer: list[str] = field(default_factory=lambda: list(FOOTER_PATTERNS))

    def __post_init__(self) -> None:
        self._section_re = _compile(self.section, whole_word=True)
        self._article_re = _compile(self.article)
        self._footer_re = _compile(self.footer)

    def is_section_title(self, text: str) -> bool:
        return _matches(self._section_re, text)

    def is_article_title(self, text: str) -> bool:
        return _matches(self._article_re, text)

    def is_footer_title(self, text: str) -> bool:
        return _matches(self._footer_re, text)


DEFAULT_PATTERNS = HeadingPatterns()


def is_section_title(text: str) -> bool:
    """Check if heading text names a listing section."""
    return DEFAULT_PATTERNS.is_section_title(text)


def is_article_title(text: str) -> bool:
    """Check if heading text looks like an article or guide title."""
    return DEFAULT_PATTERNS.is_article_title(text)


def is_footer_title(text: str) -> bool:
    """Check if heading text is a footer or call-to-action."""
    return DEFAULT_PATTERNS.is_footer_title(text)


def groups_articles(text: str) -> bool:
    """Check if a section heading already groups articles."""
    text_lower = text.lower()
    return any(marker in text_lower for marker in ARTICLE_SECTION_MARKERS)
