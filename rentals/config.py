"""
Rentals application settings.

Extends the base settings with rental-marketplace configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Rentals-specific settings."""

    # ==========================================================================
    # Session tokens
    # ==========================================================================
    # Lifetime of a session token; there is no refresh
    TOKEN_EXPIRE_SECONDS: int = 2400

    # Request header carrying the raw session token
    AUTH_TOKEN_HEADER: str = "Auth-Token"

    # ==========================================================================
    # Passwords
    # ==========================================================================
    BCRYPT_ROUNDS: int = 12

    # ==========================================================================
    # HTTP
    # ==========================================================================
    API_PREFIX: str = "/api"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
