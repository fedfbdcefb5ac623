import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def _split_origins(value: str | None) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""
    if not value:
        return []
    return [o.strip() for o in value.split(",") if o.strip()]


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    Uses pydantic for validation and parsing.
    """

    APP_NAME: str = Field("Fitness Planner API", description="Application name")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    HOST: str = Field("0.0.0.0", description="Bind address")
    PORT: int = Field(8080, description="Bind port")
    CATALOG_PATH: str | None = Field(None, description="Optional JSON exercise catalog file")
    GENERATION_DELAY_SECONDS: float = Field(
        0.0, description="Delay before a generated workout is returned"
    )
    DEFAULT_SEED: int | None = Field(None, description="Seed used when a request has none")
    CORS_ORIGINS: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated list of allowed CORS origins",
    )
    ALERT_WEBHOOK_URL: str | None = Field(None, description="Webhook receiving error logs")

    # Feature flags
    FF_FILE_CATALOG: bool = Field(
        default_factory=lambda: _bool("FF_FILE_CATALOG", True),
        description="Use CATALOG_PATH when it is set",
    )
    FF_ADMIN_ALERTS: bool = Field(
        default_factory=lambda: _bool("FF_ADMIN_ALERTS", False),
        description="Admin alerts feature flag",
    )

    @field_validator("GENERATION_DELAY_SECONDS")
    @classmethod
    def delay_not_negative(cls, v):
        if v < 0:
            raise ValueError("GENERATION_DELAY_SECONDS must not be negative")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def log_level_upper(cls, v):
        return v.strip().upper() or "INFO"

    @property
    def cors_origins(self) -> list[str]:
        return _split_origins(self.CORS_ORIGINS)


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
