"""
Pydantic models for User system request/response validation.
"""

from typing import Annotated, Any, Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, EmailStr, Field, StringConstraints

from common.utils.validation import forbidden, message

PASSWORD_MESSAGE = "Please enter a password with 8 or more characters."
EMAIL_MESSAGE = "Please provide a valid email."


class RegisterRequest(BaseModel):
    """Request body for user registration."""
    name: Annotated[str, StringConstraints(min_length=1, max_length=32), message("Please provide a name.")]
    email: Annotated[EmailStr, message(EMAIL_MESSAGE)]
    password: Annotated[str, StringConstraints(min_length=8), message(PASSWORD_MESSAGE)]


class ProfileUpdateRequest(BaseModel):
    """
    Request body for a partial profile update.

    ``name`` and ``email`` may be left out but not cleared: an explicit null
    fails validation. ``bio`` and ``avatar`` accept null to clear them.
    Reference lists and the ID can't be edited; sending them is a
    validation error.
    """
    model_config = ConfigDict(extra="forbid")

    name: Annotated[
        str,
        StringConstraints(min_length=1, max_length=32),
        message("Please provide a name that is 32 characters or less."),
    ] = None
    email: Annotated[EmailStr, message(EMAIL_MESSAGE)] = None
    bio: Optional[Annotated[
        str,
        StringConstraints(max_length=200),
        message("Please provide a bio that is 200 characters or less."),
    ]] = None
    avatar: Optional[Annotated[AnyHttpUrl, message("Please provide a valid image URL.")]] = None
    newPassword: Annotated[str, StringConstraints(min_length=8), message(PASSWORD_MESSAGE)] = None
    oldPassword: Optional[str] = None
    password: Optional[str] = None

    id_: Annotated[Any, forbidden("Cannot change the ID of a user.")] = Field(None, alias="_id")
    places: Annotated[Any, forbidden("Cannot modify user listings.")] = None
    reservations: Annotated[Any, forbidden("Cannot modify user reservations.")] = None
    reviews: Annotated[Any, forbidden("Cannot modify user reviews.")] = None


class DeactivateRequest(BaseModel):
    """Request body for account deactivation."""
    password: Optional[str] = None


class MessageResponse(BaseModel):
    """Response with a human-readable message."""
    message: str
