"""
Pydantic models for Auth system request/response validation.
"""

from typing import Annotated

from pydantic import BaseModel, StringConstraints

from common.utils.validation import message


class LoginRequest(BaseModel):
    """Request body for login."""
    email: Annotated[str, StringConstraints(min_length=1), message("Please provide a valid email.")]
    password: Annotated[str, StringConstraints(min_length=1), message("Please enter your password.")]


class TokenResponse(BaseModel):
    """Response carrying a fresh session token."""
    token: str
