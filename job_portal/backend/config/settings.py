"""
Centralized configuration management for the Job Portal application.
All environment variables, credentials, and configuration settings are managed here.
"""
from typing import Optional, List
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


DEFAULT_SECRET_KEY = "your-super-secret-jwt-key-change-in-production"
DEFAULT_ADMIN_EMAIL = "admin@jobportal.com"
DEFAULT_ADMIN_PASSWORD = "Admin@123"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    # =============================================================================
    # APPLICATION SETTINGS
    # =============================================================================
    app_name: str = "Job Portal API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    testing: bool = False
    port: int = 5000

    # =============================================================================
    # SECURITY SETTINGS
    # =============================================================================
    # Hardcoded fallbacks are reported by validate_required_settings().
    secret_key: str = Field(
        default=DEFAULT_SECRET_KEY,
        validation_alias=AliasChoices("secret_key", "jwt_secret"),
    )
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60  # 24 hours

    admin_email: str = DEFAULT_ADMIN_EMAIL
    admin_password: str = DEFAULT_ADMIN_PASSWORD

    min_password_length: int = 6

    # =============================================================================
    # DATABASE SETTINGS
    # =============================================================================
    database_url: str = "sqlite:///./job_portal.db"
    database_echo: bool = False

    # =============================================================================
    # LOGGING SETTINGS
    # =============================================================================
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    # =============================================================================
    # DEVELOPMENT SETTINGS
    # =============================================================================
    api_docs_enabled: bool = True
    cors_enabled: bool = True
    cors_origins: List[str] = ["*"]

    # =============================================================================
    # CONFIGURATION LOADING
    # =============================================================================
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.testing or self.environment.lower() == "testing"

    def get_database_url(self) -> str:
        """Get database URL with appropriate settings for environment."""
        if self.is_testing():
            return "sqlite:///:memory:"
        return self.database_url

    def uses_default_credentials(self) -> List[str]:
        """Names of security settings still at their hardcoded fallback values."""
        defaults = []
        if self.secret_key == DEFAULT_SECRET_KEY:
            defaults.append("SECRET_KEY")
        if self.admin_email == DEFAULT_ADMIN_EMAIL:
            defaults.append("ADMIN_EMAIL")
        if self.admin_password == DEFAULT_ADMIN_PASSWORD:
            defaults.append("ADMIN_PASSWORD")
        return defaults

    def validate_required_settings(self) -> List[str]:
        """Validate that all required settings are properly configured."""
        missing = []

        if self.is_production():
            # Production-specific validations
            if not self.secret_key or len(self.secret_key) < 32:
                missing.append("SECRET_KEY must be at least 32 characters in production")

            for name in self.uses_default_credentials():
                missing.append(f"{name} must not use the built-in default in production")

            if self.debug:
                missing.append("DEBUG must be False in production")

        # General validations
        if self.log_level not in LOG_LEVELS:
            missing.append(f"Invalid LOG_LEVEL: {self.log_level}")

        if self.min_password_length < 1:
            missing.append("MIN_PASSWORD_LENGTH must be positive")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    This function is cached to avoid recreating the settings object multiple times.
    """
    return Settings()
