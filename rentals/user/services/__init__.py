"""User system services."""

from rentals.user.services.user_service import UserService
from rentals.user.services.account_deactivator import AccountDeactivator

__all__ = ["UserService", "AccountDeactivator"]
