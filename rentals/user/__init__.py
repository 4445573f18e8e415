"""
User System

Manages user accounts including registration, profile updates and
account deactivation.
"""

from rentals.user.services.user_service import UserService
from rentals.user.services.account_deactivator import AccountDeactivator

__all__ = [
    "UserService",
    "AccountDeactivator",
]
