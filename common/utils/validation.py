"""
Per-field validation messages for pydantic request models.

Attach a message to a field's type and any failure of that field is
reported with it instead of pydantic's default text. Missing required
fields still report pydantic's "Field required".

Example:
    from typing import Annotated
    from pydantic import BaseModel, Field
    from common.utils.validation import message

    class ReviewCreateRequest(BaseModel):
        rating: Annotated[int, Field(ge=1, le=5), message("Please provide a valid rating.")]
"""

from typing import Any

from pydantic import BeforeValidator, ValidationError, WrapValidator
from pydantic_core import PydanticCustomError


def message(text: str) -> WrapValidator:
    """Report every validation failure of the annotated field as ``text``."""

    def validate(value: Any, handler):
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError("invalid_field", text)

    return WrapValidator(validate)


def forbidden(text: str) -> BeforeValidator:
    """Reject the annotated field whenever it is sent."""

    def reject(value: Any):
        raise PydanticCustomError("forbidden_field", text)

    return BeforeValidator(reject)
