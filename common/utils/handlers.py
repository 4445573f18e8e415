"""
FastAPI exception handlers.

Every error leaving the API is rendered here so the response body is always
``{"message": ...}`` or ``{"errors": [...]}``. Unexpected exceptions are
logged with their traceback and answered with a generic 500 message.

Example:
    app = FastAPI()
    register_exception_handlers(app)

Per-field messages are declared on the request models (see
common.utils.validation); this module only reshapes them.
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils.exceptions import APIException, GENERIC_ERROR_MESSAGE
from common.utils.responses import error_response

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the field name.
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: List[dict]) -> List[Dict[str, str]]:
    """
    Flatten pydantic validation errors into ``{"field", "message"}`` pairs.

    Only the first error per field is kept.
    """
    formatted: List[Dict[str, str]] = []
    seen = set()

    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        if field in seen:
            continue
        seen.add(field)
        message = error.get("msg", "Invalid value")
        formatted.append({"field": field, "message": message})

    return formatted


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the API's exception handlers on an application.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(APIException)
    async def handle_api_exception(request: Request, exc: APIException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, exc.errors),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        return JSONResponse(status_code=400, content=error_response("Validation error", errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content=error_response(GENERIC_ERROR_MESSAGE))
