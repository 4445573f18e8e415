"""
Standard API response helpers.

Responses carry the resource itself on success; errors are either a single
``{"message": ...}`` or a list of field errors ``{"errors": [...]}``.

Example:
    from common.utils import error_response, message_response

    return JSONResponse(status_code=404, content=error_response("User not found."))
    return message_response("Successfully deactivated account. Bye!")
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId


def message_response(message: str) -> Dict[str, str]:
    """Create a response that only carries a human-readable message."""
    return {"message": message}


def error_response(
    message: str,
    errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        errors: List of field errors (for validation errors)

    Returns:
        ``{"errors": [...]}`` when field errors are present, otherwise
        ``{"message": message}``
    """
    if errors:
        return {"errors": errors}
    return {"message": message}


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Make a MongoDB document JSON-friendly.

    ObjectIds become strings and datetimes become ISO strings, recursively
    through nested dicts and lists.
    """
    if doc is None:
        return None
    return _serialize_value(doc)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize_value(v) for v in value]
    return value
