"""Tests for the heading check task runner."""

from datetime import UTC, datetime

import httpx
import pytest

from analyzer.crawler.fetcher import Fetcher, FetchResult
from analyzer.extraction.headings import HeadingRecord
from analyzer.tasks.heading_check import HeadingReport, analyze_html, run_heading_analysis
from api.exceptions import AnalysisFailedError, FetchFailedError

PAGE = """
<html>
<body>
    <h1>Welcome</h1>
    <h2>Blog Posts</h2>
    <h3>How to Guide 2024</h3>
    <h5>Footnotes</h5>
</body>
</html>
"""


def _fetcher(status: int = 200, text: str = PAGE) -> Fetcher:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, headers={"content-type": "text/html"}, text=text)

    return Fetcher(transport=httpx.MockTransport(handler))


class StubFetcher(Fetcher):
    """Fetcher returning a canned result."""

    def __init__(self, result: FetchResult):
        super().__init__()
        self.result = result
        self.calls = 0

    async def fetch(self, url: str) -> FetchResult:
        self.calls += 1
        return self.result


class TestAnalyzeHtml:
    """Tests for analyze_html."""

    def test_full_pipeline(self) -> None:
        report = analyze_html(PAGE, url="https://example.com")

        assert report.url == "https://example.com"
        assert [h.level for h in report.headings] == [1, 2, 3, 5]
        assert report.issues == [
            "Skipped heading level: H3 followed by H5, should use H4",
            "Only 1 H2 section(s) for 1 H3 subsection(s) - "
            "consider adding more H2 sections to organize the content",
        ]
        assert [(s.level, s.text) for s in report.suggestions] == [
            (1, "Welcome"),
            (2, "Blog Posts"),
            (3, "How to Guide 2024"),
            (4, "Footnotes"),
        ]

    def test_empty_page(self) -> None:
        report = analyze_html("<html><body></body></html>")

        assert report.headings == []
        assert report.issues == ["No heading tags found on the page"]
        assert len(report.suggestions) == 3


class TestRunHeadingAnalysis:
    """Tests for run_heading_analysis."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        report = await run_heading_analysis("https://example.com/", fetcher=_fetcher())

        assert isinstance(report, HeadingReport)
        assert report.headings[0] == HeadingRecord(level=1, text="Welcome")
        assert report.fetch_time_ms is not None
        assert report.to_dict()["fetch_time_ms"] == report.fetch_time_ms

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self) -> None:
        with pytest.raises(FetchFailedError) as exc_info:
            await run_heading_analysis("https://example.com/", fetcher=_fetcher(status=503))

        assert exc_info.value.message == "Failed to fetch URL: 503 Service Unavailable"
        assert exc_info.value.status_code == 400
        assert exc_info.value.details["status_code"] == 503

    @pytest.mark.asyncio
    async def test_unreachable_raises_analysis_failure(self) -> None:
        result = FetchResult(
            url="https://nope.invalid",
            final_url="https://nope.invalid",
            status_code=0,
            reason="",
            content_type=None,
            html=None,
            error="Name or service not known",
            fetch_time_ms=3,
            fetched_at=datetime.now(UTC),
        )
        fetcher = StubFetcher(result)

        with pytest.raises(AnalysisFailedError) as exc_info:
            await run_heading_analysis("https://nope.invalid", fetcher=fetcher)

        assert exc_info.value.status_code == 500
        assert exc_info.value.details == {"reason": "Name or service not known"}
        assert fetcher.calls == 1


class TestHeadingReport:
    """Tests for HeadingReport serialization."""

    def test_to_dict(self) -> None:
        report = analyze_html("<h1>Home</h1><h3>Deep Dive</h3>", url="https://example.com")
        data = report.to_dict()

        assert data["url"] == "https://example.com"
        assert data["headings"] == [
            {"level": 1, "text": "Home"},
            {"level": 3, "text": "Deep Dive"},
        ]
        assert "Skipped heading level: H1 followed by H3, should use H2" in data["issues"]
        assert data["suggestions"] == [
            {"level": 1, "text": "Home"},
            {"level": 2, "text": "Deep Dive"},
        ]
        assert data["timestamp"].endswith("+00:00")
        assert data["fetch_time_ms"] is None
