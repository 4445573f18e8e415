"""
Pydantic models for Reservation system request validation.
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, StringConstraints

from common.utils.validation import message


class ReservationCreateRequest(BaseModel):
    """Request body for reserving a place."""
    placeId: Annotated[str, StringConstraints(min_length=1), message("Please provide a valid place ID.")]
    startDate: Annotated[date, message("Please provide a valid start date.")]
    endDate: Annotated[date, message("Please provide a valid end date.")]
