"""
Reservation service.

Records stays. There is no availability or double-booking check.
"""

import logging
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import NotFoundException, ValidationException
from rentals.database import PLACES, RESERVATIONS, to_object_id

if TYPE_CHECKING:
    from rentals.user.services.user_service import UserService

logger = logging.getLogger(__name__)


def _as_datetime(day: date) -> datetime:
    # BSON stores datetimes, not dates
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


class ReservationService:
    """
    Creates reservations for guests.
    """

    def __init__(self, db: AsyncIOMotorDatabase, user_service: "UserService"):
        """
        Initialize ReservationService.

        Args:
            db: MongoDB database connection
            user_service: For linking reservations to the guest
        """
        self._user_service = user_service
        self._places_collection = db[PLACES]
        self._reservations_collection = db[RESERVATIONS]

    async def create_reservation(self, guest_id: str, place_id: str, start_date: date, end_date: date) -> dict:
        """
        Reserve a place for a date range.

        Args:
            guest_id: MongoDB user ID of the guest
            place_id: MongoDB place ID
            start_date: Check-in day
            end_date: Check-out day, after start_date

        Returns:
            Created reservation document

        Raises:
            ValidationException: End date not after start date
            NotFoundException: Place does not exist
        """
        if end_date <= start_date:
            raise ValidationException.for_field("endDate", "End date must be after start date.")

        guest_oid = to_object_id(guest_id)
        place_oid = to_object_id(place_id, field="placeId", message="Please provide a valid place ID.")

        place = await self._places_collection.find_one({"_id": place_oid}, {"ownerId": 1})
        if not place:
            raise NotFoundException(message="Place not found.", code="PLACE_NOT_FOUND")

        reservation_doc = {
            "userId": guest_oid,
            "ownerId": place.get("ownerId"),
            "placeId": place_oid,
            "startDate": _as_datetime(start_date),
            "endDate": _as_datetime(end_date),
            "createdAt": datetime.now(timezone.utc),
        }
        result = await self._reservations_collection.insert_one(reservation_doc)
        reservation_doc["_id"] = result.inserted_id

        await self._user_service.add_reference(guest_oid, "reservations", result.inserted_id)

        logger.info(f"Reservation created: {result.inserted_id} (guest={guest_oid}, place={place_oid})")
        return reservation_doc
