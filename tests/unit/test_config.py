"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import IdentityStrategy, Settings

BASE_ENV = {
    "SUPABASE_URL": "https://test.supabase.co",
    "SUPABASE_KEY": "test-key",
}


class TestSettings:
    """Tests for Settings class."""

    def test_settings_loads_from_environment(self) -> None:
        """Test that Settings loads values from environment variables."""
        env_vars = {
            **BASE_ENV,
            "APP_NAME": "test-app",
            "APP_ENV": "testing",
            "DEBUG": "true",
            "PORT": "9000",
            "IDENTITY_STRATEGY": "username",
            "USERNAME_EMAIL_DOMAIN": "pmfolio.dev",
            "STORE_TIMEOUT_SECONDS": "2.5",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.app_name == "test-app"
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.identity_strategy is IdentityStrategy.USERNAME
            assert settings.username_email_domain == "pmfolio.dev"
            assert settings.store_timeout_seconds == 2.5

    def test_settings_default_values(self) -> None:
        """Test that default values are applied correctly."""
        with patch.dict(os.environ, BASE_ENV, clear=True):
            settings = Settings(_env_file=None)

            assert settings.identity_strategy is IdentityStrategy.EMAIL_SLUG
            assert settings.username_email_domain == "example.com"
            assert settings.featured_projects_limit == 6
            assert settings.include_linked_projects is True
            assert settings.store_timeout_seconds == 5.0
            assert settings.profile_load_timeout_seconds == 12.0

    def test_settings_cors_origins_list(self) -> None:
        """Test that CORS origins are correctly parsed into a list."""
        env_vars = {**BASE_ENV, "CORS_ORIGINS": "http://localhost:3000, http://example.com , "}

        with patch.dict(os.environ, env_vars, clear=False):
            assert Settings().cors_origins_list == ["http://localhost:3000", "http://example.com"]

    def test_settings_is_production_property(self) -> None:
        """Test the is_production property."""
        with patch.dict(os.environ, {**BASE_ENV, "APP_ENV": "production"}, clear=False):
            assert Settings().is_production is True

        with patch.dict(os.environ, {**BASE_ENV, "APP_ENV": "development"}, clear=False):
            assert Settings().is_production is False

    def test_settings_requires_supabase_credentials(self) -> None:
        """Test that missing Supabase settings raise a validation error."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_settings_rejects_unknown_identity_strategy(self) -> None:
        """Test that only the three identity strategies are accepted."""
        with patch.dict(os.environ, {**BASE_ENV, "IDENTITY_STRATEGY": "nickname"}, clear=False):
            with pytest.raises(ValidationError):
                Settings()

    def test_profile_load_timeout_is_separate_from_store_timeout(self) -> None:
        """Test that the load budget is configured independently of a single round trip."""
        env_vars = {**BASE_ENV, "STORE_TIMEOUT_SECONDS": "2", "PROFILE_LOAD_TIMEOUT_SECONDS": "7.5"}

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.store_timeout_seconds == 2.0
            assert settings.profile_load_timeout_seconds == 7.5
