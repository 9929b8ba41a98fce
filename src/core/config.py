"""Application configuration management using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentityStrategy(str, Enum):
    """How a public profile identifier maps to a user row."""

    ID = "id"
    EMAIL_SLUG = "email_slug"
    USERNAME = "username"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Required settings will raise validation errors if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="pmfolio-backend", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    max_request_body_size: int = Field(default=1_048_576, description="Maximum request body size in bytes")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Supabase
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_key: str = Field(..., description="Supabase API key used for table access")
    store_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for a single store round trip",
    )
    profile_load_timeout_seconds: float = Field(
        default=12.0,
        gt=0,
        description="Overall budget for a profile load (user lookup plus the concurrent fetches)",
    )

    # Profiles
    identity_strategy: IdentityStrategy = Field(
        default=IdentityStrategy.EMAIL_SLUG,
        description="How profile route parameters resolve to users (id/email_slug/username)",
    )
    username_email_domain: str = Field(
        default="example.com",
        description="Domain appended to a username to derive the lookup email",
    )
    featured_projects_limit: int = Field(default=6, ge=1, description="Default number of featured projects")
    include_linked_projects: bool = Field(
        default=True,
        description="Embed the linked project's id and title in profile recommendations",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
