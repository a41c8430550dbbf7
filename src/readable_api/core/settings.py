"""Application settings and configuration.

This module defines all configuration options for the Readable API.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CATEGORIES: list[dict[str, str]] = [
    {"name": "react", "path": "react"},
    {"name": "redux", "path": "redux"},
    {"name": "udacity", "path": "udacity"},
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    List-valued settings are read as JSON, e.g.
    ``DEFAULT_CATEGORIES='[{"name": "python", "path": "python"}]'``.
    """

    # Application metadata
    app_name: str = Field(default="Readable API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")
    api_prefix: str = Field(default="", alias="API_PREFIX")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")

    # Tenant store
    max_tenants: int = Field(default=0, ge=0, alias="MAX_TENANTS")
    strict_vote_options: bool = Field(default=False, alias="STRICT_VOTE_OPTIONS")
    default_categories: list[dict[str, str]] = Field(
        default_factory=lambda: [dict(c) for c in _DEFAULT_CATEGORIES],
        alias="DEFAULT_CATEGORIES",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def tenant_limit(self) -> int | None:
        """Return the tenant bound, or None when tenants are never evicted."""
        return self.max_tenants or None


settings = Settings()
