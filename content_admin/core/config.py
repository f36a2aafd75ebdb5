"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. URLs and timeouts are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults suitable for a local content server
    (GraphQL on localhost:4001, no identity service).
    """

    # App
    app_name: str = "content-admin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Content endpoint (GraphQL)
    content_api_url: str = "http://localhost:4001/graphql"
    content_api_token: SecretStr | None = None
    # Identity endpoint for the authentication check; unset means local mode (always authenticated).
    identity_api_url: str | None = None
    request_timeout_seconds: float = 30.0

    # Schema metadata: JSON description of collections, read lazily.
    content_schema_path: str = "content-schema.json"

    # Host flag captured by the facade at construction.
    data_layer_enabled: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_endpoints(self) -> "Settings":
        """Validate endpoint URLs and timeout.

        - CONTENT_API_URL (and IDENTITY_API_URL when set) must be http(s).
        - REQUEST_TIMEOUT_SECONDS must be positive.
        """
        if not self.content_api_url.startswith(("http://", "https://")):
            raise ValueError(
                f"CONTENT_API_URL must be an http(s) URL, got: {self.content_api_url!r}"
            )
        if self.identity_api_url and not self.identity_api_url.startswith(
            ("http://", "https://")
        ):
            raise ValueError(
                f"IDENTITY_API_URL must be an http(s) URL, got: {self.identity_api_url!r}"
            )
        if self.request_timeout_seconds <= 0:
            raise ValueError("REQUEST_TIMEOUT_SECONDS must be greater than 0")
        return self


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
