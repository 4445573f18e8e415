"""
Place System

Listings owned by hosts.
"""

from rentals.place.services.place_service import PlaceService

__all__ = [
    "PlaceService",
]
