"""
Reservation System

Guests book places for a date range.
"""

from rentals.reservation.services.reservation_service import ReservationService

__all__ = [
    "ReservationService",
]
