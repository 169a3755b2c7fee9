from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Blog"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database
    database_url: str = ""  # Loaded from environment, validated in model_validator
    database_echo: bool = False
    database_auto_create: bool = True  # create tables on startup (no migrations)
    seed_data: bool = True  # insert the development authors on startup

    # CORS - comma-separated list of allowed origins
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Rate limiting (slowapi limit strings)
    rate_limit_enabled: bool = True
    rate_limit_create_post: str = "10/minute"  # fixed window per client IP

    # OpenTelemetry Distributed Tracing
    telemetry_enabled: bool = True  # Enable/disable distributed tracing
    telemetry_exporter: str = "console"  # Options: "console", "otlp", "none"
    telemetry_otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    telemetry_sample_rate: float = 1.0  # Sampling rate (0.0-1.0, 1.0 = 100%)

    @model_validator(mode="after")
    def validate_config(self) -> "Settings":
        """Validate required and enumerated settings"""
        if not self.database_url:
            raise ValueError("DATABASE_URL is required. Set in environment or .env file.")

        if self.telemetry_exporter not in ("console", "otlp", "none"):
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: 'console', 'otlp', 'none'"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
