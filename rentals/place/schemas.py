"""
Pydantic models for Place system request validation.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from common.utils.validation import message


class PlaceCreateRequest(BaseModel):
    """Request body for creating a listing."""
    name: Annotated[
        str,
        StringConstraints(min_length=1, max_length=64),
        message("Please provide a name that is 64 characters or less."),
    ]
    cityId: Annotated[str, StringConstraints(min_length=1), message("Please provide a valid city ID.")]
    description: Optional[Annotated[str, StringConstraints(max_length=2000)]] = None
    address: Optional[Annotated[str, StringConstraints(max_length=200)]] = None
    pricePerNight: Annotated[float, Field(ge=0), message("Please provide a valid nightly price.")]
    maxGuests: Annotated[int, Field(ge=1), message("Please provide a valid number of guests.")] = 1
