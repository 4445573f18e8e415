"""Reservation system services."""

from rentals.reservation.services.reservation_service import ReservationService

__all__ = ["ReservationService"]
