"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time; an empty
DATABASE_URL leaves the SQL stores unconfigured.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except secret_key, validated in
    validate_required_and_bounds.
    """

    # App
    app_name: str = "clinic-portal"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (read-only projections of externally owned tables); empty = not configured
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    # Only used by the dev token script; production tokens come from the login service.
    access_token_expire_minutes: int = 60

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Global search
    search_default_limit: int = 6
    search_max_limit: int = 20
    # One deadline for the whole fan-out; a slower source fails the request.
    search_timeout_seconds: float = 10.0
    search_rate_limit: str = "60/minute"

    # Person schedule preview
    preview_default_days: int = 14
    preview_max_days: int = 21
    preview_timezone: str = "Europe/Vienna"
    # Comma-separated workplace labels that carry no information (dropped from previews).
    preview_placeholder_workplace_labels: str = "Diensthabende,Dienst,-"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required_and_bounds(self) -> "Settings":
        """Validate required env and the search/preview parameter bounds."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if not 1 <= self.search_default_limit <= self.search_max_limit:
            raise ValueError(
                "search_default_limit must be between 1 and search_max_limit, "
                f"got {self.search_default_limit} (max {self.search_max_limit})"
            )
        if not 1 <= self.preview_default_days <= self.preview_max_days:
            raise ValueError(
                "preview_default_days must be between 1 and preview_max_days, "
                f"got {self.preview_default_days} (max {self.preview_max_days})"
            )
        if self.search_timeout_seconds <= 0:
            raise ValueError("search_timeout_seconds must be positive")
        return self

    @property
    def placeholder_workplace_labels(self) -> frozenset[str]:
        """Placeholder labels, case-folded for comparison."""
        return frozenset(
            label.strip().casefold()
            for label in self.preview_placeholder_workplace_labels.split(",")
            if label.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
