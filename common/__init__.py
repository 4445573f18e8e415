"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection with Motor
- auth: JWT session tokens and bcrypt password hashing
- utils: Standard responses, exceptions, exception handlers
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import TokenService, PasswordGuard
from common.utils import (
    error_response,
    message_response,
    APIException,
    ValidationException,
    UnauthorizedException,
    InvalidTokenException,
    InvalidCredentialsException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
    register_exception_handlers,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "TokenService",
    "PasswordGuard",
    # Utils
    "error_response",
    "message_response",
    "APIException",
    "ValidationException",
    "UnauthorizedException",
    "InvalidTokenException",
    "InvalidCredentialsException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "register_exception_handlers",
    # Config
    "BaseAppSettings",
]
