"""
Rentals database helpers.
"""

from rentals.database.collections import (
    USERS,
    PLACES,
    CITIES,
    RESERVATIONS,
    REVIEWS,
    ensure_indexes,
)
from rentals.database.ids import to_object_id

__all__ = [
    "USERS",
    "PLACES",
    "CITIES",
    "RESERVATIONS",
    "REVIEWS",
    "ensure_indexes",
    "to_object_id",
]
