"""City system services."""

from rentals.city.services.city_service import CityService

__all__ = ["CityService"]
