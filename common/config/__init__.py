"""
Configuration module - Base settings loaded from environment variables and .env.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
