"""
Review service.

Creates reviews under the marketplace rules and serves the review read paths.

Rules checked on creation, first failure wins:
1. The place exists
2. The author does not own the place
3. The author has not reviewed the place before (unique index on
   userId + placeId, checked by the insert itself)

The ``reviews`` list on a user document is a cache of review ids. The
reviews collection queried by ``userId`` is the source of truth.
"""

import logging
from datetime import datetime, timezone
from typing import List, TYPE_CHECKING

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from common.utils.exceptions import ForbiddenException, NotFoundException
from rentals.database import USERS, PLACES, REVIEWS, to_object_id

if TYPE_CHECKING:
    from rentals.user.services.user_service import UserService

logger = logging.getLogger(__name__)

OWN_PLACE_MESSAGE = "cannot review own place"
DUPLICATE_REVIEW_MESSAGE = "duplicate review"
PLACE_NOT_FOUND_MESSAGE = "Place not found."
INVALID_PLACE_ID_MESSAGE = "Please provide a valid place ID."


class ReviewService:
    """
    Enforces review invariants and reads reviews.
    """

    def __init__(self, db: AsyncIOMotorDatabase, user_service: "UserService"):
        """
        Initialize ReviewService.

        Args:
            db: MongoDB database connection
            user_service: For linking new reviews to their author
        """
        self._user_service = user_service
        self._users_collection = db[USERS]
        self._places_collection = db[PLACES]
        self._reviews_collection = db[REVIEWS]

    async def create_review(self, author_id: str, place_id: str, rating: int, title: str, body: str) -> dict:
        """
        Create a review of a place.

        Input is expected to be validated already (rating 1-5, title 1-32
        chars, body 1-1000 chars).

        Args:
            author_id: MongoDB user ID of the author
            place_id: MongoDB place ID
            rating: Star rating
            title: Review title
            body: Review text

        Returns:
            Created review document

        Raises:
            NotFoundException: Place does not exist
            ForbiddenException: Author owns the place, or already reviewed it
        """
        author_oid = to_object_id(author_id)
        place_oid = to_object_id(place_id, field="placeId", message=INVALID_PLACE_ID_MESSAGE)

        place = await self._places_collection.find_one({"_id": place_oid}, {"ownerId": 1})
        if not place:
            raise NotFoundException(message=PLACE_NOT_FOUND_MESSAGE, code="PLACE_NOT_FOUND")

        if place.get("ownerId") == author_oid:
            raise ForbiddenException(message=OWN_PLACE_MESSAGE, code="OWN_PLACE")

        review_doc = {
            "userId": author_oid,
            "placeId": place_oid,
            "rating": rating,
            "title": title,
            "body": body,
            "createdAt": datetime.now(timezone.utc),
        }

        try:
            result = await self._reviews_collection.insert_one(review_doc)
        except DuplicateKeyError:
            raise ForbiddenException(message=DUPLICATE_REVIEW_MESSAGE, code="DUPLICATE_REVIEW")

        review_doc["_id"] = result.inserted_id
        logger.info(f"Review created: user={author_oid}, place={place_oid}, rating={rating}")

        # The review stands even if the author's cached list can't be updated.
        try:
            await self._user_service.add_reference(author_oid, "reviews", result.inserted_id)
        except PyMongoError as e:
            logger.warning(f"Review {result.inserted_id} not linked to user {author_oid}: {e}")

        return review_doc

    async def list_for_place(self, place_id: str) -> List[dict]:
        """
        Get a place's reviews, newest first.

        Raises:
            NotFoundException: Place does not exist
        """
        place_oid = to_object_id(place_id, field="placeId", message=INVALID_PLACE_ID_MESSAGE)

        place = await self._places_collection.find_one({"_id": place_oid}, {"_id": 1})
        if not place:
            raise NotFoundException(message=PLACE_NOT_FOUND_MESSAGE, code="PLACE_NOT_FOUND")

        cursor = self._reviews_collection.find({"placeId": place_oid}).sort("createdAt", DESCENDING)
        return await cursor.to_list(length=None)

    async def list_by_author(self, user_id: str) -> List[dict]:
        """Get every review written by a user, newest first."""
        user_oid = to_object_id(user_id, field="userId", message="Please provide a valid user ID.")
        cursor = self._reviews_collection.find({"userId": user_oid}).sort("createdAt", DESCENDING)
        return await cursor.to_list(length=None)

    async def reconcile_user_reviews(self, user_id: str) -> int:
        """
        Rebuild a user's cached review list from the reviews collection.

        Returns:
            Number of reviews now linked to the user
        """
        user_oid = to_object_id(user_id)
        docs = await self._reviews_collection.find({"userId": user_oid}, {"_id": 1}).to_list(length=None)
        review_ids = [doc["_id"] for doc in docs]

        await self._users_collection.update_one(
            {"_id": user_oid},
            {"$set": {"reviews": review_ids}},
        )
        logger.info(f"Reconciled {len(review_ids)} reviews for user {user_oid}")
        return len(review_ids)
