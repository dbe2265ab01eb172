"""
Configuration module for the parts catalog backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


MISSING_SUPABASE_CONFIG_MESSAGE = (
    "Missing Supabase environment variables. Please check your .env file."
)


class MissingSupabaseConfigError(ValueError):
    """Raised when the Supabase URL or anon key is not configured."""

    def __init__(self, message: str = MISSING_SUPABASE_CONFIG_MESSAGE):
        super().__init__(message)


def _env(name: str, fallback_name: str) -> str:
    """Read `name`, falling back to the frontend-style variable name."""
    return os.getenv(name) or os.getenv(fallback_name, "")


class Settings:
    """Application settings loaded from environment variables."""

    # Supabase Configuration
    # The VITE_* names let the backend share a .env file with the web frontend
    SUPABASE_URL: str = _env("SUPABASE_URL", "VITE_SUPABASE_URL")
    SUPABASE_ANON_KEY: str = _env("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY")

    # Email verification codes
    VERIFICATION_CODE_TTL_MINUTES: int = int(
        os.getenv("VERIFICATION_CODE_TTL_MINUTES", "10")
    )

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    def validate(self) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            MissingSupabaseConfigError: If the Supabase URL or anon key is missing.
        """
        if not self.SUPABASE_URL or not self.SUPABASE_ANON_KEY:
            raise MissingSupabaseConfigError()

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except MissingSupabaseConfigError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
