"""
City service - read-only city lookups.
"""

from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from common.utils.exceptions import NotFoundException
from rentals.database import CITIES, PLACES, to_object_id


class CityService:
    """Reads cities and the places in them."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self._cities_collection = db[CITIES]
        self._places_collection = db[PLACES]

    async def list_cities(self) -> List[dict]:
        cursor = self._cities_collection.find({}).sort("name", ASCENDING)
        return await cursor.to_list(length=None)

    async def get_city(self, city_id: str) -> dict:
        """
        Load a city together with its places.

        Raises:
            ValidationException: Malformed city ID
            NotFoundException: City does not exist
        """
        oid = to_object_id(city_id, field="id", message="Please provide a valid city ID.")
        city = await self._cities_collection.find_one({"_id": oid})
        if not city:
            raise NotFoundException(message="City not found.", code="CITY_NOT_FOUND")

        city["places"] = await self._places_collection.find({"cityId": oid}).to_list(length=None)
        return city
