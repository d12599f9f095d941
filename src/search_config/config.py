"""Settings for search-config using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    """Typed configuration loaded from ``SEARCH_CONFIG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    json_indent: bool = Field(default=False, description="Pretty-print documents written by the CLI")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}; got {value!r}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
