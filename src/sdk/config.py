from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BlogClientOptions(BaseSettings):
    """
    Connection options for BlogClient.

    Loaded from BLOG_CLIENT_* environment variables when not passed
    explicitly, e.g. BLOG_CLIENT_BASE_URL=http://localhost:8000
    """

    base_url: str
    api_version: str = "1.0"  # sent as X-API-Version
    timeout_seconds: float = 30.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_url is required")
        return value.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout_seconds must be positive")
        return value

    model_config = SettingsConfigDict(env_prefix="BLOG_CLIENT_", case_sensitive=False)
