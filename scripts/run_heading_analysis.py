#!/usr/bin/env python
"""Run a heading outline analysis from the command line.

Fetches a page (or reads a saved HTML file), lists its headings, flags
structural issues and prints a suggested outline.

Usage:
    python scripts/run_heading_analysis.py https://example.com
    python scripts/run_heading_analysis.py --html-file page.html
    python scripts/run_heading_analysis.py https://example.com --json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from analyzer.tasks.heading_check import (  # noqa: E402
    HeadingReport,
    analyze_html,
    run_heading_analysis,
)
from api.exceptions import HeadingAnalyzerError  # noqa: E402
from api.logging import setup_logging  # noqa: E402


def format_outline(items: list, indent: str = "  ") -> list[str]:
    """Render headings as an indented outline, one line per heading."""
    return [f"{indent * (item.level - 1)}H{item.level}: {item.text}" for item in items]


def format_report(report: HeadingReport) -> str:
    """Render a report as plain text."""
    lines = [
        "=" * 60,
        "Heading Outline Analysis",
        f"URL: {report.url or '(local file)'}",
        f"Analyzed: {report.analyzed_at.strftime('%Y-%m-%d %H:%M:%S')} UTC",
        "=" * 60,
        "",
        f"Headings found ({len(report.headings)}):",
        *format_outline(report.headings),
        "",
    ]

    if report.issues:
        lines.append(f"Issues ({len(report.issues)}):")
        lines.extend(f"  - {issue}" for issue in report.issues)
    else:
        lines.append("Issues: none")

    lines.extend(["", "Suggested outline:", *format_outline(report.suggestions)])
    return "\n".join(lines)


async def main(url: str | None, html_file: str | None, as_json: bool) -> int:
    if html_file:
        html = Path(html_file).read_text(encoding="utf-8", errors="replace")
        report = analyze_html(html, url=url or "")
    else:
        try:
            report = await run_heading_analysis(url)
        except HeadingAnalyzerError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

    if as_json:
        print(json.dumps({"success": True, **report.to_dict()}, indent=2))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Analyze a page's heading outline")
    parser.add_argument("url", nargs="?", help="Page URL to fetch")
    parser.add_argument("--html-file", type=str, help="Analyze a saved HTML file instead")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Log level")
    args = parser.parse_args()

    if not args.url and not args.html_file:
        parser.error("a URL or --html-file is required")

    setup_logging(log_level=args.log_level, stream=sys.stderr)
    sys.exit(asyncio.run(main(url=args.url, html_file=args.html_file, as_json=args.json)))
