"""
FastAPI router for Reservation system endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from common.utils import serialize_document
from rentals.auth.dependencies import CurrentUserId
from rentals.dependencies import get_reservation_service
from rentals.reservation.services.reservation_service import ReservationService
from rentals.reservation.schemas import ReservationCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_reservation(
    body: ReservationCreateRequest,
    user_id: CurrentUserId,
    reservation_service: Annotated[ReservationService, Depends(get_reservation_service)],
):
    """Reserve a place for the authenticated user."""
    reservation = await reservation_service.create_reservation(
        guest_id=user_id,
        place_id=body.placeId,
        start_date=body.startDate,
        end_date=body.endDate,
    )
    return serialize_document(reservation)
