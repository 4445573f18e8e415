"""
Utilities module - Common helpers for API responses, exceptions, and error handlers.
"""

from common.utils.responses import error_response, message_response, serialize_document
from common.utils.exceptions import (
    APIException,
    ValidationException,
    UnauthorizedException,
    InvalidTokenException,
    InvalidCredentialsException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
)
from common.utils.handlers import register_exception_handlers

__all__ = [
    "error_response",
    "message_response",
    "serialize_document",
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
]
