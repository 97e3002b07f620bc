from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content service (Strapi)
    CONTENT_API_URL: str = "http://localhost:1337"

    # Per-request timeout in seconds, None waits forever
    REQUEST_TIMEOUT: Optional[float] = None

    # Max concurrent rating lookups for popular posts, 0 = unbounded
    RATING_FANOUT_LIMIT: int = 0

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_api_url(self) -> str:
        return self.CONTENT_API_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
