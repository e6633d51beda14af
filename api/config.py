"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from analyzer.crawler.fetcher import DEFAULT_USER_AGENT
from analyzer.extraction.headings import MAX_HEADING_TEXT_LENGTH

API_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Fetcher
    fetch_timeout_seconds: float = 15.0
    fetch_user_agent: str = DEFAULT_USER_AGENT
    fetch_max_redirects: int = 5

    # Outline analysis
    heading_text_max_length: int = MAX_HEADING_TEXT_LENGTH
    check_organization: bool = True  # Advisory H2/H3 balance check

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
