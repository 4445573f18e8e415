"""
Settings shared by every service built on the common library.

Values come from the process environment, falling back to a ``.env`` file
in the working directory. Applications subclass ``BaseAppSettings`` to add
their own keys.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        TOKEN_EXPIRE_SECONDS: int = 2400

    settings = Settings()
    settings.validate_required()
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Mongo, JWT, server and CORS configuration.

    Only ``JWT_SECRET`` has no usable default; ``validate_required`` fails
    startup without it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=True,
    )

    # ==========================================================================
    # MongoDB
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "rentals"

    # ==========================================================================
    # Session signing
    # ==========================================================================
    # Read once at startup; rotating it invalidates every issued token
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"

    # ==========================================================================
    # HTTP server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # Comma-separated origins, or "*"
    CORS_ORIGINS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    def get_cors_origins(self) -> List[str]:
        """Split CORS_ORIGINS into the list CORSMiddleware expects."""
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Fail fast on settings the API can't run without.

        Raises:
            ValueError: Listing every missing setting
        """
        missing = []

        if not self.JWT_SECRET:
            missing.append("JWT_SECRET is required to sign session tokens")

        if not self.MONGODB_URI:
            missing.append("MONGODB_URI is required")

        if missing:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(missing))
