"""
Rentals API Routers.

All routers are imported here for easy access.
"""

from rentals.auth.router import router as auth_router
from rentals.user.router import router as user_router
from rentals.city.router import router as city_router
from rentals.place.router import router as place_router
from rentals.reservation.router import router as reservation_router
from rentals.review.router import router as review_router

__all__ = [
    "auth_router",
    "user_router",
    "city_router",
    "place_router",
    "reservation_router",
    "review_router",
]
