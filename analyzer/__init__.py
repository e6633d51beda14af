"""Heading Outline Analyzer - core package."""

# Lazy imports - use explicit imports when needed:
# from analyzer.extraction.headings import extract_headings, HeadingRecord
# from analyzer.outline.issues import analyze_heading_issues
# from analyzer.outline.suggestions import suggest_headings
# from analyzer.tasks.heading_check import run_heading_analysis

__all__ = [
    "HeadingRecord",
    "extract_headings",
    "analyze_heading_issues",
    "suggest_headings",
    "run_heading_analysis",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for analyzer submodules."""
    if name in ("HeadingRecord", "extract_headings"):
        from analyzer.extraction.headings import HeadingRecord, extract_headings

        return locals()[name]
    elif name == "analyze_heading_issues":
        from analyzer.outline.issues import analyze_heading_issues

        return analyze_heading_issues
    elif name == "suggest_headings":
        from analyzer.outline.suggestions import suggest_headings

        return suggest_headings
    elif name == "run_heading_analysis":
        from analyzer.tasks.heading_check import run_heading_analysis

        return run_heading_analysis
    raise AttributeError(f"module 'analyzer' has no attribute '{name}'")
