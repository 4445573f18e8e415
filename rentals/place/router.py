"""
FastAPI router for Place system endpoints.

Listings are public to read; creating and deleting them needs a session.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from common.utils import message_response, serialize_document
from rentals.auth.dependencies import CurrentUserId
from rentals.dependencies import get_place_service
from rentals.place.services.place_service import PlaceService
from rentals.place.schemas import PlaceCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/places", tags=["places"])


@router.get("")
async def list_places(
    place_service: Annotated[PlaceService, Depends(get_place_service)],
    city_id: Optional[str] = Query(None, alias="cityId"),
):
    """List places, optionally filtered by city."""
    places = await place_service.list_places(city_id=city_id)
    return {"places": [serialize_document(p) for p in places]}


@router.get("/{place_id}")
async def get_place(
    place_id: str,
    place_service: Annotated[PlaceService, Depends(get_place_service)],
):
    """Get a single place."""
    place = await place_service.get_place(place_id)
    return serialize_document(place)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_place(
    body: PlaceCreateRequest,
    user_id: CurrentUserId,
    place_service: Annotated[PlaceService, Depends(get_place_service)],
):
    """List a new place owned by the authenticated user."""
    place = await place_service.create_place(user_id, body.model_dump())
    return serialize_document(place)


@router.delete("/{place_id}")
async def delete_place(
    place_id: str,
    user_id: CurrentUserId,
    place_service: Annotated[PlaceService, Depends(get_place_service)],
):
    """
    Delete a place owned by the authenticated user.

    Its reservations and reviews go with it.
    """
    await place_service.delete_place(user_id, place_id)
    return message_response("Place deleted.")
