"""Unit tests for place, city and reservation services."""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from common.utils.exceptions import ForbiddenException, NotFoundException, ValidationException
from rentals.database import USERS, PLACES, CITIES, RESERVATIONS, REVIEWS
from rentals.place.services.place_service import PlaceService
from rentals.city.services.city_service import CityService
from rentals.reservation.services.reservation_service import ReservationService

from conftest import make_cursor


# ─────────────────────────────────────────────────────────────────
# PlaceService
# ─────────────────────────────────────────────────────────────────


class TestPlaceService:
    @pytest.fixture
    def service(self, mock_db, mock_user_service):
        return PlaceService(mock_db, mock_user_service)

    @pytest.mark.asyncio
    async def test_get_missing_place(self, service, collections):
        collections[PLACES].find_one = AsyncMock(return_value=None)
        with pytest.raises(NotFoundException):
            await service.get_place(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_list_places_by_city(self, service, collections):
        city_id = ObjectId()
        collections[PLACES].find = MagicMock(return_value=make_cursor([]))

        await service.list_places(str(city_id))

        collections[PLACES].find.assert_called_once_with({"cityId": city_id})

    @pytest.mark.asyncio
    async def test_create_place_links_owner(self, service, collections, mock_user_service, sample_user_id):
        city_id = ObjectId()
        collections[CITIES].find_one = AsyncMock(return_value={"_id": city_id})
        collections[PLACES].insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))

        place = await service.create_place(
            sample_user_id, {"name": "Loft", "cityId": str(city_id), "pricePerNight": 90.0, "maxGuests": 2}
        )

        assert place["ownerId"] == ObjectId(sample_user_id)
        assert place["cityId"] == city_id
        mock_user_service.add_reference.assert_awaited_once_with(
            ObjectId(sample_user_id), "places", place["_id"]
        )

    @pytest.mark.asyncio
    async def test_create_place_unknown_city(self, service, collections, sample_user_id):
        collections[CITIES].find_one = AsyncMock(return_value=None)

        with pytest.raises(NotFoundException):
            await service.create_place(sample_user_id, {"name": "Loft", "cityId": str(ObjectId())})
        collections[PLACES].insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_by_non_owner(self, service, collections, sample_place_doc, sample_user_id):
        collections[PLACES].find_one = AsyncMock(return_value=sample_place_doc)

        with pytest.raises(ForbiddenException):
            await service.delete_place(sample_user_id, str(sample_place_doc["_id"]))
        collections[PLACES].delete_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_cascades(self, service, collections, sample_place_doc):
        owner_id = sample_place_doc["ownerId"]
        place_id = sample_place_doc["_id"]
        review_id = ObjectId()
        collections[PLACES].find_one = AsyncMock(return_value=sample_place_doc)
        collections[REVIEWS].find = MagicMock(return_value=make_cursor([{"_id": review_id}]))

        await service.delete_place(str(owner_id), str(place_id))

        collections[RESERVATIONS].delete_many.assert_awaited_once_with({"placeId": place_id})
        collections[REVIEWS].delete_many.assert_awaited_once_with({"placeId": place_id})
        collections[PLACES].delete_one.assert_awaited_once_with({"_id": place_id})
        collections[USERS].update_many.assert_awaited_once_with(
            {"reviews": {"$in": [review_id]}},
            {"$pull": {"reviews": {"$in": [review_id]}}},
        )


# ─────────────────────────────────────────────────────────────────
# CityService
# ─────────────────────────────────────────────────────────────────


class TestCityService:
    @pytest.fixture
    def service(self, mock_db):
        return CityService(mock_db)

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, service, collections):
        cursor = make_cursor([{"name": "Lisbon"}, {"name": "Porto"}])
        collections[CITIES].find = MagicMock(return_value=cursor)

        cities = await service.list_cities()

        assert [c["name"] for c in cities] == ["Lisbon", "Porto"]
        cursor.sort.assert_called_once_with("name", 1)

    @pytest.mark.asyncio
    async def test_get_city_with_places(self, service, collections):
        city_id = ObjectId()
        collections[CITIES].find_one = AsyncMock(return_value={"_id": city_id, "name": "Lisbon"})
        collections[PLACES].find = MagicMock(return_value=make_cursor([{"_id": ObjectId()}]))

        city = await service.get_city(str(city_id))

        assert len(city["places"]) == 1
        collections[PLACES].find.assert_called_once_with({"cityId": city_id})

    @pytest.mark.asyncio
    async def test_get_missing_city(self, service, collections):
        collections[CITIES].find_one = AsyncMock(return_value=None)
        with pytest.raises(NotFoundException):
            await service.get_city(str(ObjectId()))


# ─────────────────────────────────────────────────────────────────
# ReservationService
# ─────────────────────────────────────────────────────────────────


class TestReservationService:
    @pytest.fixture
    def service(self, mock_db, mock_user_service):
        return ReservationService(mock_db, mock_user_service)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("start, end", [
        (date(2026, 5, 3), date(2026, 5, 1)),
        (date(2026, 5, 3), date(2026, 5, 3)),
    ])
    async def test_end_must_follow_start(self, service, collections, sample_user_id, start, end):
        with pytest.raises(ValidationException) as exc_info:
            await service.create_reservation(sample_user_id, str(ObjectId()), start, end)
        assert exc_info.value.errors[0]["field"] == "endDate"
        collections[PLACES].find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_place(self, service, collections, sample_user_id):
        collections[PLACES].find_one = AsyncMock(return_value=None)
        with pytest.raises(NotFoundException):
            await service.create_reservation(sample_user_id, str(ObjectId()), date(2026, 5, 1), date(2026, 5, 3))

    @pytest.mark.asyncio
    async def test_creates_and_links(self, service, collections, mock_user_service, sample_place_doc, sample_user_id):
        collections[PLACES].find_one = AsyncMock(return_value=sample_place_doc)
        collections[RESERVATIONS].insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))

        reservation = await service.create_reservation(
            sample_user_id, str(sample_place_doc["_id"]), date(2026, 5, 1), date(2026, 5, 3)
        )

        assert reservation["ownerId"] == sample_place_doc["ownerId"]
        assert reservation["userId"] == ObjectId(sample_user_id)
        assert reservation["startDate"] == datetime(2026, 5, 1, tzinfo=timezone.utc)
        mock_user_service.add_reference.assert_awaited_once_with(
            ObjectId(sample_user_id), "reservations", reservation["_id"]
        )
