"""
Place service.

Listing reads, listing creation by a host, and listing removal by its owner.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, TYPE_CHECKING

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import ForbiddenException, NotFoundException
from rentals.database import USERS, PLACES, CITIES, RESERVATIONS, REVIEWS, to_object_id

if TYPE_CHECKING:
    from rentals.user.services.user_service import UserService

logger = logging.getLogger(__name__)

PLACE_NOT_FOUND_MESSAGE = "Place not found."
INVALID_PLACE_ID_MESSAGE = "Please provide a valid place ID."


class PlaceService:
    """
    Manages listings.
    """

    def __init__(self, db: AsyncIOMotorDatabase, user_service: "UserService"):
        """
        Initialize PlaceService.

        Args:
            db: MongoDB database connection
            user_service: For linking new places to their owner
        """
        self._user_service = user_service
        self._users_collection = db[USERS]
        self._places_collection = db[PLACES]
        self._cities_collection = db[CITIES]
        self._reservations_collection = db[RESERVATIONS]
        self._reviews_collection = db[REVIEWS]

    async def get_place(self, place_id: str) -> dict:
        """
        Load a place by ID.

        Raises:
            ValidationException: Malformed place ID
            NotFoundException: Place does not exist
        """
        oid = to_object_id(place_id, field="id", message=INVALID_PLACE_ID_MESSAGE)
        place = await self._places_collection.find_one({"_id": oid})
        if not place:
            raise NotFoundException(message=PLACE_NOT_FOUND_MESSAGE, code="PLACE_NOT_FOUND")
        return place

    async def list_places(self, city_id: Optional[str] = None) -> List[dict]:
        """List places, optionally only those in one city."""
        query = {}
        if city_id:
            query["cityId"] = to_object_id(city_id, field="cityId", message="Please provide a valid city ID.")
        return await self._places_collection.find(query).to_list(length=None)

    async def create_place(self, owner_id: str, data: dict) -> dict:
        """
        Create a listing owned by the current user.

        Args:
            owner_id: MongoDB user ID of the host
            data: Validated listing fields, including cityId

        Raises:
            NotFoundException: City does not exist
        """
        owner_oid = to_object_id(owner_id)
        city_oid = to_object_id(data.get("cityId"), field="cityId", message="Please provide a valid city ID.")

        city = await self._cities_collection.find_one({"_id": city_oid}, {"_id": 1})
        if not city:
            raise NotFoundException(message="City not found.", code="CITY_NOT_FOUND")

        place_doc = {
            **data,
            "ownerId": owner_oid,
            "cityId": city_oid,
            "createdAt": datetime.now(timezone.utc),
        }
        result = await self._places_collection.insert_one(place_doc)
        place_doc["_id"] = result.inserted_id

        await self._user_service.add_reference(owner_oid, "places", result.inserted_id)

        logger.info(f"Place created: {result.inserted_id} (owner={owner_oid}, city={city_oid})")
        return place_doc

    async def delete_place(self, owner_id: str, place_id: str) -> None:
        """
        Delete a listing with its reservations and reviews.

        Raises:
            NotFoundException: Place does not exist
            ForbiddenException: Caller does not own the place
        """
        owner_oid = to_object_id(owner_id)
        place = await self.get_place(place_id)
        place_oid = place["_id"]

        if place.get("ownerId") != owner_oid:
            raise ForbiddenException(message="Only the owner can delete this place.", code="NOT_OWNER")

        reservation_docs = await self._reservations_collection.find(
            {"placeId": place_oid}, {"_id": 1}
        ).to_list(length=None)
        review_docs = await self._reviews_collection.find(
            {"placeId": place_oid}, {"_id": 1}
        ).to_list(length=None)
        reservation_ids = [doc["_id"] for doc in reservation_docs]
        review_ids = [doc["_id"] for doc in review_docs]

        await self._reservations_collection.delete_many({"placeId": place_oid})
        await self._reviews_collection.delete_many({"placeId": place_oid})
        await self._places_collection.delete_one({"_id": place_oid})

        await self._users_collection.update_one({"_id": owner_oid}, {"$pull": {"places": place_oid}})
        if reservation_ids:
            await self._users_collection.update_many(
                {"reservations": {"$in": reservation_ids}},
                {"$pull": {"reservations": {"$in": reservation_ids}}},
            )
        if review_ids:
            await self._users_collection.update_many(
                {"reviews": {"$in": review_ids}},
                {"$pull": {"reviews": {"$in": review_ids}}},
            )

        logger.info(
            f"Place {place_oid} deleted with {len(reservation_ids)} reservations "
            f"and {len(review_ids)} reviews"
        )
