"""GitHub token and API base URL for the snapshot run, read from the environment or .env."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """`GITHUB_TOKEN` and `GITHUB_API_URL`; unknown variables are ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_url: str = "https://api.github.com"


@lru_cache
def get_settings() -> Settings:
    """Load the settings once per process."""
    return Settings()
