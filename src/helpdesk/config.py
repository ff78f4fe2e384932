"""
Application configuration with environment-driven settings.
"""

from functools import lru_cache
import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SUBMIT_ERROR = "An error occurred while submitting the form. Please try again."


class Settings(BaseSettings):
    """Application settings loaded from HELPDESK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELPDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "helpdesk"
    app_env: Literal["dev", "qa", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # Call list
    page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Number of calls shown per table page",
    )
    page_window: int = Field(
        default=5,
        ge=1,
        le=20,
        description="How many page numbers the pager shows at once",
    )
    description_preview_length: int = Field(
        default=100,
        ge=10,
        description="Issue descriptions longer than this are truncated in the table",
    )

    # Call form
    submit_error_message: str = Field(
        default=DEFAULT_SUBMIT_ERROR,
        description="Form-level message shown when the submit handler fails",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        return str(v).strip().upper() or "INFO"


@lru_cache
def _get_settings_cached() -> Settings:
    return Settings()


def get_settings() -> Settings:
    # Tests monkeypatch HELPDESK_* between cases; never hand them a frozen instance.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return Settings()
    return _get_settings_cached()
