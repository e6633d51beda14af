"""Tests for the page fetcher."""

import httpx
import pytest

from analyzer.crawler.fetcher import DEFAULT_USER_AGENT, Fetcher, FetchResult


def _transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


class TestFetcher:
    """Tests for Fetcher.fetch."""

    @pytest.mark.asyncio
    async def test_successful_fetch(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"content-type": "text/html; charset=utf-8"},
                text="<h1>Hello</h1>",
            )

        fetcher = Fetcher(transport=_transport(handler))
        result = await fetcher.fetch("https://example.com/")

        assert result.success is True
        assert result.status_code == 200
        assert result.html == "<h1>Hello</h1>"
        assert result.error is None
        assert result.final_url == "https://example.com/"

    @pytest.mark.asyncio
    async def test_sends_browser_headers(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, text="ok")

        fetcher = Fetcher(transport=_transport(handler))
        await fetcher.fetch("https://example.com/")

        assert seen["user-agent"] == DEFAULT_USER_AGENT
        assert "text/html" in seen["accept"]

    @pytest.mark.asyncio
    async def test_follows_redirects(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "https://example.com/new"})
            return httpx.Response(200, text="<h1>New</h1>")

        fetcher = Fetcher(transport=_transport(handler))
        result = await fetcher.fetch("https://example.com/old")

        assert result.success is True
        assert result.final_url == "https://example.com/new"

    @pytest.mark.asyncio
    async def test_non_success_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="missing")

        fetcher = Fetcher(transport=_transport(handler))
        result = await fetcher.fetch("https://example.com/missing")

        assert result.success is False
        assert result.status_code == 404
        assert result.reason == "Not Found"
        assert result.html is None
        assert result.error == "HTTP error: 404"

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        fetcher = Fetcher(transport=_transport(handler))
        result = await fetcher.fetch("https://nope.invalid/")

        assert result.success is False
        assert result.status_code == 0
        assert "Name or service not known" in (result.error or "")

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        fetcher = Fetcher(transport=_transport(handler))
        result = await fetcher.fetch("https://slow.example.com/")

        assert result.status_code == 0
        assert result.error == "Request timed out"

    @pytest.mark.asyncio
    async def test_single_attempt(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url)
            raise httpx.ConnectError("refused", request=request)

        fetcher = Fetcher(transport=_transport(handler))
        await fetcher.fetch("https://example.com/")

        assert len(calls) == 1


class TestFetchResult:
    """Tests for FetchResult properties."""

    def _result(self, **overrides) -> FetchResult:
        from datetime import UTC, datetime

        values = {
            "url": "https://example.com",
            "final_url": "https://example.com",
            "status_code": 200,
            "reason": "OK",
            "content_type": "text/html",
            "html": "<html></html>",
            "error": None,
            "fetch_time_ms": 12,
            "fetched_at": datetime.now(UTC),
        }
        values.update(overrides)
        return FetchResult(**values)

    def test_any_2xx_with_body_is_success(self) -> None:
        assert self._result(status_code=203).success is True

    def test_missing_body_is_not_success(self) -> None:
        assert self._result(html=None).success is False
