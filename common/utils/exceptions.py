"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException with standardized error codes. The exception
handlers in ``common.utils.handlers`` render them as ``{"message": ...}`` or,
for field validation, ``{"errors": [...]}``.

Example:
    from common.utils import NotFoundException

    @app.get("/places/{id}")
    async def get_place(id: str):
        place = await places.find_one({"_id": ObjectId(id)})
        if not place:
            raise NotFoundException("Place not found.", code="PLACE_NOT_FOUND")
        return place
"""

from typing import Optional, Any, Dict, List
from fastapi import HTTPException


GENERIC_ERROR_MESSAGE = "Something went wrong. Try again later."


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Provides consistent error response format across the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            errors: Per-field errors as ``{"field", "message"}`` dicts
            headers: Optional response headers
        """
        self.message = message
        self.code = code
        self.errors = errors

        detail: Dict[str, Any] = {"message": message}
        if code:
            detail["code"] = code
        if errors:
            detail["errors"] = errors

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )


class ValidationException(APIException):
    """400 Bad Request - Input failed validation."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(400, message, code, errors)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationException":
        """Shortcut for a single invalid field."""
        return cls(message=message, errors=[{"field": field, "message": message}])


class UnauthorizedException(APIException):
    """401 Unauthorized - Missing authentication or re-authentication."""

    def __init__(
        self,
        message: str = "Authorization denied.",
        code: str = "UNAUTHORIZED",
    ):
        super().__init__(401, message, code)


class InvalidTokenException(UnauthorizedException):
    """401 Unauthorized - Token is malformed, tampered with, or expired."""

    def __init__(
        self,
        message: str = "Invalid token.",
        code: str = "INVALID_TOKEN",
    ):
        super().__init__(message, code)


class InvalidCredentialsException(UnauthorizedException):
    """401 Unauthorized - Password did not match."""

    def __init__(
        self,
        message: str = "Invalid password.",
        code: str = "INVALID_CREDENTIALS",
    ):
        super().__init__(message, code)


class ForbiddenException(APIException):
    """403 Forbidden - Authenticated, but a business rule forbids the action."""

    def __init__(
        self,
        message: str = "Forbidden",
        code: str = "FORBIDDEN",
    ):
        super().__init__(403, message, code)


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        code: str = "NOT_FOUND",
    ):
        super().__init__(404, message, code)


class ConflictException(APIException):
    """409 Conflict - Resource already exists."""

    def __init__(
        self,
        message: str = "Conflict",
        code: str = "CONFLICT",
    ):
        super().__init__(409, message, code)


class InternalServerException(APIException):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(500, message, code)
