"""
Authentication module - JWT session tokens and bcrypt password hashing.
"""

from common.auth.token_service import TokenService
from common.auth.password import PasswordGuard

__all__ = ["TokenService", "PasswordGuard"]
