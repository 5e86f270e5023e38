"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_PER_PAGE, GITHUB_API


class Settings(BaseSettings):
    """Settings for the release scanner."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_RELEASE_SCANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = GITHUB_API
    per_page: int = DEFAULT_PER_PAGE
    timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def effective_per_page(per_page: int | None) -> int:
    """Page size to request.

    Anything below 1 falls back to the default. Anything above it is clamped,
    since GitHub never returns more than 100 records and a larger per_page
    would make the first page look short.
    """
    if per_page is None or per_page <= 0:
        return DEFAULT_PER_PAGE
    return min(per_page, DEFAULT_PER_PAGE)
