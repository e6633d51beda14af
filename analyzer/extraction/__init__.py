"""Content extraction package."""

from analyzer.extraction.headings import HeadingRecord, extract_headings

__all__ = ["HeadingRecord", "extract_headings"]
