"""
Rentals collection names and indexes.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Collection names
# ─────────────────────────────────────────────────────────────────

USERS = "users"
PLACES = "places"
CITIES = "cities"
RESERVATIONS = "reservations"
REVIEWS = "reviews"


# ─────────────────────────────────────────────────────────────────
# Indexes
# ─────────────────────────────────────────────────────────────────

async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the business rules depend on.

    The unique indexes are what actually enforce "one account per email"
    and "one review per user per place"; create_index is idempotent.
    """
    await db[USERS].create_index([("email", ASCENDING)], unique=True, name="uniq_email")
    await db[REVIEWS].create_index(
        [("userId", ASCENDING), ("placeId", ASCENDING)],
        unique=True,
        name="uniq_review_author_place",
    )
    await db[REVIEWS].create_index([("placeId", ASCENDING)])
    await db[PLACES].create_index([("ownerId", ASCENDING)])
    await db[PLACES].create_index([("cityId", ASCENDING)])
    await db[RESERVATIONS].create_index([("userId", ASCENDING)])
    await db[RESERVATIONS].create_index([("ownerId", ASCENDING)])
    await db[RESERVATIONS].create_index([("placeId", ASCENDING)])
    logger.info("Database indexes ensured")
