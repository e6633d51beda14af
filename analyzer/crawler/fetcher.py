"""HTTP fetcher for a single page."""

from dataclasses import dataclass
from datetime import UTC, datetime

import httpx
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


@dataclass
class FetchResult:
    """Result of fetching a URL."""

    url: str
    final_url: str  # After redirects
    status_code: int  # 0 when no response was received
    reason: str
    content_type: str | None
    html: str | None
    error: str | None
    fetch_time_ms: int
    fetched_at: datetime

    @property
    def success(self) -> bool:
        """Check if fetch was successful."""
        return 200 <= self.status_code < 300 and self.html is not None


class Fetcher:
    """HTTP fetcher with browser-like request headers.

    Makes exactly one attempt per URL.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        max_redirects: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Accept-Encoding": "gzip, deflate",
            "DNT": "1",
            "Upgrade-Insecure-Requests": "1",
        }

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a URL.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult with response data or error
        """
        start_time = datetime.now(UTC)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=self.max_redirects,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=self._headers())

        except httpx.TimeoutException:
            error = "Request timed out"
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error = str(e) or type(e).__name__
        else:
            fetch_time = int((datetime.now(UTC) - start_time).total_seconds() * 1000)
            is_ok = 200 <= response.status_code < 300

            logger.debug(
                "page_fetched",
                url=url,
                status_code=response.status_code,
                fetch_time_ms=fetch_time,
            )

            return FetchResult(
                url=url,
                final_url=str(response.url),
                status_code=response.status_code,
                reason=response.reason_phrase,
                content_type=response.headers.get("content-type"),
                html=response.text if is_ok else None,
                error=None if is_ok else f"HTTP error: {response.status_code}",
                fetch_time_ms=fetch_time,
                fetched_at=start_time,
            )

        logger.warning("fetch_failed", url=url, error=error)
        return FetchResult(
            url=url,
            final_url=url,
            status_code=0,
            reason="",
            content_type=None,
            html=None,
            error=error,
            fetch_time_ms=int((datetime.now(UTC) - start_time).total_seconds() * 1000),
            fetched_at=start_time,
        )
