"""
City System

Read-only catalogue of cities places are listed in.
"""

from rentals.city.services.city_service import CityService

__all__ = [
    "CityService",
]
