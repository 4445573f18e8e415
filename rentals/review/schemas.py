"""
Pydantic models for Review system request validation.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from common.utils.validation import message


class ReviewCreateRequest(BaseModel):
    """Request body for posting a review."""
    rating: Annotated[
        int,
        Field(ge=1, le=5, description="Star rating 1-5"),
        message("Please provide a valid rating."),
    ]
    title: Annotated[
        str,
        StringConstraints(min_length=1, max_length=32),
        message("Please provide a title that is 32 characters or less."),
    ]
    body: Annotated[
        str,
        StringConstraints(min_length=1, max_length=1000),
        message("Please provide a body that is 1000 characters or less."),
    ]
