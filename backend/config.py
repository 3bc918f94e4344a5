"""
Configuration management for Job Recommendations.
"""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    deepseek_api_key: str = ""
    deepseek_model: str = "deepseek-chat"

    # Job search provider
    serpapi_api_key: str = ""
    search_timeout: float = 30.0

    # Client side: where the jobs proxy is served
    jobs_api_url: str = "http://localhost:8000"

    # API settings
    jobs_rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True
    cors_origins: str = "http://localhost:5173"

    # Observability
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the API process or the CLI."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, including the SerpApi key
    logging.getLogger("httpx").setLevel(logging.WARNING)
