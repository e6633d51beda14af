"""Custom exceptions and error handling."""

from typing import Any

from fastapi import status


class HeadingAnalyzerError(Exception):
    """Base exception for the Heading Outline Analyzer."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(HeadingAnalyzerError):
    """Missing or malformed request input."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="bad_request",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class FetchFailedError(HeadingAnalyzerError):
    """The target page answered with a non-success status."""

    def __init__(self, url: str, status_code: int, reason: str = ""):
        message = f"Failed to fetch URL: {status_code} {reason}".rstrip()
        super().__init__(
            message=message,
            code="fetch_failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"url": url, "status_code": status_code},
        )


class AnalysisFailedError(HeadingAnalyzerError):
    """Unexpected failure while fetching or analyzing a page."""

    def __init__(self, details: str | None = None):
        super().__init__(
            message="Failed to analyze webpage",
            code="analysis_failed",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"reason": details} if details else None,
        )
