"""Heading analysis request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Schema for requesting a heading analysis."""

    url: str | None = Field(None, description="Page URL to analyze")


class HeadingItem(BaseModel):
    """A heading as found on the page or as suggested."""

    level: int = Field(..., ge=1, le=6, description="Heading level, 1 for H1")
    text: str


class AnalyzeResponse(BaseModel):
    """Heading analysis result."""

    success: bool = True
    url: str
    headings: list[HeadingItem]
    issues: list[str]
    suggestions: list[HeadingItem]
    timestamp: datetime
    fetch_time_ms: int | None = Field(None, description="Time spent fetching the page")
