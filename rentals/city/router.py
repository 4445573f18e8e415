"""
FastAPI router for City system endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import serialize_document
from rentals.dependencies import get_city_service
from rentals.city.services.city_service import CityService

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("")
async def list_cities(
    city_service: Annotated[CityService, Depends(get_city_service)],
):
    """List all cities by name."""
    cities = await city_service.list_cities()
    return {"cities": [serialize_document(c) for c in cities]}


@router.get("/{city_id}")
async def get_city(
    city_id: str,
    city_service: Annotated[CityService, Depends(get_city_service)],
):
    """Get a city with its places."""
    city = await city_service.get_city(city_id)
    return serialize_document(city)
