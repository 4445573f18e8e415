"""Unit tests for AccountDeactivator (password-confirmed cascade delete)."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from common.utils.exceptions import (
    InvalidCredentialsException,
    NotFoundException,
    UnauthorizedException,
)
from rentals.database import USERS, PLACES, RESERVATIONS, REVIEWS
from rentals.user.services.account_deactivator import AccountDeactivator

from conftest import make_cursor


@pytest.fixture
def deactivator(mock_db, mock_password_guard):
    return AccountDeactivator(mock_db, mock_password_guard)


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def wired(collections, sample_user_doc, call_log):
    """Collections that record the order of destructive calls."""

    def recorder(name, op, count):
        async def record(*args, **kwargs):
            call_log.append((name, op, args[0] if args else None))
            return MagicMock(deleted_count=count, modified_count=count)
        return record

    place_id = ObjectId()
    collections[USERS].find_one = AsyncMock(return_value={"_id": sample_user_doc["_id"], "password": sample_user_doc["password"]})
    collections[PLACES].find = MagicMock(return_value=make_cursor([{"_id": place_id}]))
    collections[RESERVATIONS].find = MagicMock(return_value=make_cursor([{"_id": ObjectId()}]))
    collections[REVIEWS].find = MagicMock(return_value=make_cursor([{"_id": ObjectId()}, {"_id": ObjectId()}]))

    collections[RESERVATIONS].delete_many = AsyncMock(side_effect=recorder(RESERVATIONS, "delete_many", 1))
    collections[REVIEWS].delete_many = AsyncMock(side_effect=recorder(REVIEWS, "delete_many", 2))
    collections[PLACES].delete_many = AsyncMock(side_effect=recorder(PLACES, "delete_many", 1))
    collections[USERS].update_many = AsyncMock(side_effect=recorder(USERS, "update_many", 0))
    collections[USERS].delete_one = AsyncMock(side_effect=recorder(USERS, "delete_one", 1))
    return collections


class TestPreconditions:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", [None, ""])
    async def test_password_required(self, deactivator, collections, sample_user_id, password):
        with pytest.raises(UnauthorizedException) as exc_info:
            await deactivator.deactivate(sample_user_id, password)

        assert exc_info.value.message == "Password required for deactivation."
        collections[USERS].find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_missing(self, deactivator, collections, sample_user_id):
        collections[USERS].find_one = AsyncMock(return_value=None)

        with pytest.raises(NotFoundException):
            await deactivator.deactivate(sample_user_id, "correct-horse")

    @pytest.mark.asyncio
    async def test_wrong_password_deletes_nothing(self, deactivator, wired, sample_user_id, call_log):
        with pytest.raises(InvalidCredentialsException):
            await deactivator.deactivate(sample_user_id, "wrong-password")

        assert call_log == []


class TestCascade:
    @pytest.mark.asyncio
    async def test_deletes_dependents_then_user(self, deactivator, wired, sample_user_id, call_log):
        oid = ObjectId(sample_user_id)

        results = await deactivator.deactivate(sample_user_id, "correct-horse")

        ops = [(name, op) for name, op, _ in call_log]
        assert ops[-1] == (USERS, "delete_one")
        assert ops.index((PLACES, "delete_many")) < ops.index((USERS, "delete_one"))
        assert call_log[0] == (RESERVATIONS, "delete_many", {"ownerId": oid})
        assert call_log[1] == (RESERVATIONS, "delete_many", {"userId": oid})
        assert call_log[-1][2] == {"_id": oid}

        assert results == {
            "hostReservationsDeleted": 1,
            "guestReservationsDeleted": 1,
            "reviewsDeleted": 2,
            "placesDeleted": 1,
            "usersDeleted": 1,
        }

    @pytest.mark.asyncio
    async def test_reviews_on_owned_places_included(self, deactivator, wired, sample_user_id):
        oid = ObjectId(sample_user_id)

        await deactivator.deactivate(sample_user_id, "correct-horse")

        review_query = wired[REVIEWS].find.call_args[0][0]
        assert {"userId": oid} in review_query["$or"]
        assert "placeId" in review_query["$or"][1]

    @pytest.mark.asyncio
    async def test_reviews_deleted_by_author_or_place_query(self, deactivator, wired, sample_user_id, call_log):
        oid = ObjectId(sample_user_id)
        place_id = wired[PLACES].find.return_value.to_list.return_value[0]["_id"]

        await deactivator.deactivate(sample_user_id, "correct-horse")

        review_deletes = [args for name, op, args in call_log if name == REVIEWS]
        # Reviews written between the lookup and the delete still match
        assert review_deletes == [{"$or": [{"userId": oid}, {"placeId": {"$in": [place_id]}}]}]

    @pytest.mark.asyncio
    async def test_unlinks_deleted_ids_from_other_users(self, deactivator, wired, sample_user_id, call_log):
        await deactivator.deactivate(sample_user_id, "correct-horse")

        pulled = [args for name, op, args in call_log if op == "update_many"]
        assert {tuple(query.keys())[0] for query in pulled} == {"reservations", "reviews"}

    @pytest.mark.asyncio
    async def test_failed_step_leaves_user_in_place(self, deactivator, wired, sample_user_id):
        wired[REVIEWS].delete_many = AsyncMock(side_effect=RuntimeError("write failed"))

        with pytest.raises(RuntimeError):
            await deactivator.deactivate(sample_user_id, "correct-horse")

        wired[USERS].delete_one.assert_not_awaited()
