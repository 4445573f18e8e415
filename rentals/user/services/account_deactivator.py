"""
Account deactivation.

Deletes a user and everything that references them after the user
re-enters their password.
"""

import logging
from typing import Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import PasswordGuard
from common.utils.exceptions import (
    InvalidCredentialsException,
    NotFoundException,
    UnauthorizedException,
)
from rentals.database import USERS, PLACES, RESERVATIONS, REVIEWS, to_object_id

logger = logging.getLogger(__name__)


class AccountDeactivator:
    """
    Removes a user account and cascades to dependent records.

    Dependents are deleted before the user document, each with its own
    delete. After a partial failure the user still exists, and deactivating
    again completes the cascade.

    Actions performed:
    1. Reservations on the user's places (as host)
    2. Reservations made by the user (as guest)
    3. Reviews of the user's places and reviews written by the user
    4. The user's places
    5. Dangling ids in other users' cached reference lists
    6. The user document
    """

    def __init__(self, db: AsyncIOMotorDatabase, password_guard: PasswordGuard):
        """
        Initialize AccountDeactivator.

        Args:
            db: MongoDB database connection
            password_guard: For re-checking the user's password
        """
        self._password_guard = password_guard
        self._users = db[USERS]
        self._places = db[PLACES]
        self._reservations = db[RESERVATIONS]
        self._reviews = db[REVIEWS]

    async def deactivate(self, user_id: str, password: Optional[str]) -> Dict[str, int]:
        """
        Permanently delete a user account.

        Args:
            user_id: MongoDB user ID (from the session token)
            password: The user's current password

        Returns:
            Dict with counts of deleted records

        Raises:
            UnauthorizedException: No password supplied
            NotFoundException: User does not exist
            InvalidCredentialsException: Password does not match
        """
        if not password:
            raise UnauthorizedException(message="Password required for deactivation.")

        oid = to_object_id(user_id)
        user = await self._users.find_one({"_id": oid}, {"password": 1})
        if not user:
            raise NotFoundException(message="User not found.", code="USER_NOT_FOUND")

        if not await self._password_guard.verify_async(password, user.get("password")):
            raise InvalidCredentialsException()

        logger.info(f"Processing deactivation for user {oid}")
        results = await self._delete_dependents(oid)

        user_result = await self._users.delete_one({"_id": oid})
        results["usersDeleted"] = user_result.deleted_count

        logger.info(
            f"User {oid} deactivated. "
            f"Places: {results['placesDeleted']}, "
            f"reservations: {results['hostReservationsDeleted'] + results['guestReservationsDeleted']}, "
            f"reviews: {results['reviewsDeleted']}"
        )
        return results

    async def _delete_dependents(self, user_id: ObjectId) -> Dict[str, int]:
        place_ids = await self._ids(self._places, {"ownerId": user_id})

        reservation_ids = await self._ids(
            self._reservations,
            {"$or": [{"ownerId": user_id}, {"userId": user_id}]},
        )
        review_query = {"$or": [{"userId": user_id}, {"placeId": {"$in": place_ids}}]}
        review_ids = await self._ids(self._reviews, review_query)

        host_result = await self._reservations.delete_many({"ownerId": user_id})
        logger.debug(f"Deleted {host_result.deleted_count} reservations hosted by {user_id}")

        guest_result = await self._reservations.delete_many({"userId": user_id})
        logger.debug(f"Deleted {guest_result.deleted_count} reservations made by {user_id}")

        reviews_result = await self._reviews.delete_many(review_query)
        logger.debug(f"Deleted {reviews_result.deleted_count} reviews")

        places_result = await self._places.delete_many({"ownerId": user_id})
        logger.debug(f"Deleted {places_result.deleted_count} places")

        await self._unlink("reservations", reservation_ids)
        await self._unlink("reviews", review_ids)

        return {
            "hostReservationsDeleted": host_result.deleted_count,
            "guestReservationsDeleted": guest_result.deleted_count,
            "reviewsDeleted": reviews_result.deleted_count,
            "placesDeleted": places_result.deleted_count,
        }

    @staticmethod
    async def _ids(collection, query: dict) -> List[ObjectId]:
        docs = await collection.find(query, {"_id": 1}).to_list(length=None)
        return [doc["_id"] for doc in docs]

    async def _unlink(self, field: str, ids: List[ObjectId]) -> None:
        """Pull deleted ids out of other users' cached reference lists."""
        if not ids:
            return
        await self._users.update_many(
            {field: {"$in": ids}},
            {"$pull": {field: {"$in": ids}}},
        )
