"""Configuration management for the Crossword Retrieval Service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    environment: str = Field("development", description="Deployment environment name")
    log_level: str = Field("INFO", description="Root logging level")
    api_host: str = Field("0.0.0.0", description="Host the API binds to")
    api_port: int = Field(8000, description="Port the API binds to")

    # Publisher Configuration
    guardian_base_url: str = Field(
        "https://www.theguardian.com/crosswords",
        description="Base URL; pages live at {base}/{type}/{number}"
    )
    guardian_referer: str = Field(
        "https://www.theguardian.com/crosswords",
        description="Referer header sent with every page request"
    )
    user_agent: str = Field(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        description="Browser user agent sent with every page request"
    )
    request_timeout_seconds: float = Field(15.0, gt=0, description="Per-request timeout")

    # Retrieval Settings
    default_puzzle_type: str = Field("quick", description="Puzzle type used when none is given")
    max_retrieval_attempts: int = Field(8, ge=1, description="Edition numbers tried per request")
    search_direction: str = Field("descending", description="'descending' or 'ascending'")

    # Response Settings
    cache_max_age_seconds: int = Field(1800, ge=0, description="Cache-Control max-age on success")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
