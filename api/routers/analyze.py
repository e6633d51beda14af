"""Heading analysis endpoint."""

from urllib.parse import urlparse

import structlog
from fastapi import APIRouter, Response, status

from analyzer.tasks.heading_check import run_heading_analysis
from api.exceptions import AnalysisFailedError, BadRequestError, HeadingAnalyzerError
from api.schemas.analysis import AnalyzeRequest, AnalyzeResponse, HeadingItem
from api.schemas.responses import ErrorResponse

router = APIRouter(tags=["Analysis"])
logger = structlog.get_logger(__name__)


def _validate_url(url: str | None) -> str:
    """Return the trimmed URL or raise a 400."""
    if not url or not url.strip():
        raise BadRequestError("URL is required", field="url")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise BadRequestError("URL must start with http:// or https://", field="url")
    return url


@router.options("/analyze", include_in_schema=False)
async def analyze_options() -> Response:
    """Answer a bare OPTIONS request; CORS preflights are handled by the middleware."""
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Analyze the heading structure of a web page.

    Fetches the page, lists its H1-H6 headings, flags structural issues,
    and returns a suggested outline.
    """
    url = _validate_url(request.url)

    try:
        report = await run_heading_analysis(url)
    except HeadingAnalyzerError:
        raise
    except Exception as e:
        logger.exception("heading_analysis_failed", url=url)
        raise AnalysisFailedError(str(e)) from e

    return AnalyzeResponse(
        success=True,
        url=url,
        headings=[HeadingItem(**h.to_dict()) for h in report.headings],
        issues=report.issues,
        suggestions=[HeadingItem(**s.to_dict()) for s in report.suggestions],
        timestamp=report.analyzed_at,
        fetch_time_ms=report.fetch_time_ms,
    )
