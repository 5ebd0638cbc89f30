"""
Application configuration with environment-driven settings.
"""

from functools import lru_cache
import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "contactform"
    app_env: Literal["dev", "qa", "uat", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    # Backend API
    api_base_url: str = Field(
        default="http://localhost:1337",
        description="Origin of the content-management backend",
    )
    api_prefix: str = Field(
        default="/api",
        description="Path prefix appended to the backend origin",
    )
    api_token: str = Field(
        default="",
        description="Optional bearer token sent with every request",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        ge=1,
        le=300,
        description="Transport timeout handed to the HTTP client",
    )

    # Listing
    default_page_size: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Page size used when fetching contacts without one.",
    )

    @property
    def api_url(self) -> str:
        """Backend origin joined with the API prefix."""
        return f"{self.api_base_url.rstrip('/')}{self.api_prefix}"

    @property
    def is_development(self) -> bool:
        return self.app_env == "dev" or self.debug


@lru_cache
def _get_settings_cached() -> Settings:
    return Settings()


def get_settings() -> Settings:
    # Tests monkeypatch the environment, so never hand them a frozen instance.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return Settings()
    return _get_settings_cached()
