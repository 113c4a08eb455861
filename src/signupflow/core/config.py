"""Configuration management for SignupFlow.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SIGNUPFLOW_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "SignupFlow"
    environment: Literal["development", "production", "testing"] = "development"

    # Signup Endpoint Settings
    api_base_url: str = "https://api.challenge.hennge.com/password-validation-challenge-api/001"
    signup_path: str = "/challenge-signup"
    auth_token: SecretStr = Field(
        default=SecretStr(""),
        description="Credential sent verbatim in the Authorization header",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Seconds per request")

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so the signup path can be appended."""
        return v.rstrip("/")

    @field_validator("signup_path")
    @classmethod
    def validate_signup_path(cls, v: str) -> str:
        """Ensure the signup path is absolute."""
        if not v.startswith("/"):
            raise ValueError("signup_path must start with '/'")
        return v

    @property
    def signup_url(self) -> str:
        """Full URL of the signup endpoint."""
        return f"{self.api_base_url}{self.signup_path}"

    @property
    def has_auth_token(self) -> bool:
        """Check if an authorization credential is configured."""
        return bool(self.auth_token.get_secret_value())

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
