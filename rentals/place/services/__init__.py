"""Place system services."""

from rentals.place.services.place_service import PlaceService

__all__ = ["PlaceService"]
