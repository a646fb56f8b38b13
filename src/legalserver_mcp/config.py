"""Runtime configuration loaded from the environment."""

from functools import lru_cache
from typing import Literal
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """LegalServer connection settings.

    Read from ``LEGALSERVER_*`` environment variables or a local ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEGALSERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str
    bearer_token: str
    request_timeout: float = 30.0
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        """Require an absolute http(s) URL and end it with exactly one slash."""
        parts = urlsplit(value.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("LEGALSERVER_BASE_URL must be a valid URL")
        return value.strip().rstrip("/") + "/"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("bearer_token")
    @classmethod
    def require_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("LEGALSERVER_BEARER_TOKEN must not be empty")
        return value.strip()


@lru_cache
def get_settings() -> Settings:
    return Settings()
