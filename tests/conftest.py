"""Shared test fixtures for Rentals backend tests."""

import pytest
from collections import defaultdict
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId


def make_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # delete_many etc. stay as AsyncMock.
    collection.find = MagicMock(return_value=make_cursor([]))
    return collection


def make_cursor(docs):
    cursor = MagicMock()
    cursor.sort = MagicMock(return_value=cursor)
    cursor.to_list = AsyncMock(return_value=list(docs))
    return cursor


@pytest.fixture
def collections():
    """One mock collection per name, created on first access."""
    return defaultdict(make_collection)


@pytest.fixture
def mock_db(collections):
    db = MagicMock()
    db.__getitem__ = MagicMock(side_effect=lambda name: collections[name])
    return db


@pytest.fixture
def mock_password_guard():
    guard = MagicMock()
    guard.hash_async = AsyncMock(side_effect=lambda password: f"hashed:{password}")
    guard.verify_async = AsyncMock(
        side_effect=lambda password, hashed: hashed == f"hashed:{password}"
    )
    return guard


@pytest.fixture
def mock_user_service():
    service = MagicMock()
    service.add_reference = AsyncMock()
    return service


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def sample_user_doc(sample_user_id):
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(sample_user_id),
        "name": "Ada",
        "email": "ada@example.com",
        "password": "hashed:correct-horse",
        "bio": None,
        "avatar": None,
        "places": [],
        "reservations": [],
        "reviews": [],
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def sample_place_doc():
    return {
        "_id": ObjectId(),
        "ownerId": ObjectId(),
        "cityId": ObjectId(),
        "name": "Loft by the canal",
        "pricePerNight": 120.0,
        "maxGuests": 2,
        "createdAt": datetime.now(timezone.utc),
    }
