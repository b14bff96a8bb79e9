"""
Brokerage Matching Core - Configuration

Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def project_root(self) -> Path:
        """Return project root directory."""
        return PROJECT_ROOT

    # Application
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    LOG_TO_FILE: bool = Field(default=True)

    # Global search
    SEARCH_RESULT_LIMIT: int = Field(default=10, ge=0)
    SEARCH_MIN_QUERY_LENGTH: int = Field(default=2, ge=0)

    # Agent name resolution (suggestions use rapidfuzz 0-100 scores)
    SUGGESTION_THRESHOLD: int = Field(default=70, ge=0, le=100)
    SUGGESTION_LIMIT: int = Field(default=3, ge=0)


settings = Settings()
