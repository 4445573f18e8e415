"""
FastAPI dependencies for the Rentals application.

Provides dependency injection for all services. Services are created once at
startup by ``init_all_services`` and handed out by the getters below.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import PasswordGuard, TokenService
from rentals.auth.gate import AuthGate
from rentals.config import Settings
from rentals.user.services.user_service import UserService
from rentals.user.services.account_deactivator import AccountDeactivator
from rentals.review.services.review_service import ReviewService
from rentals.place.services.place_service import PlaceService
from rentals.city.services.city_service import CityService
from rentals.reservation.services.reservation_service import ReservationService


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Auth
_token_service: Optional[TokenService] = None
_password_guard: Optional[PasswordGuard] = None
_auth_gate: Optional[AuthGate] = None

# User
_user_service: Optional[UserService] = None
_account_deactivator: Optional[AccountDeactivator] = None

# Listings
_place_service: Optional[PlaceService] = None
_city_service: Optional[CityService] = None
_reservation_service: Optional[ReservationService] = None

# Reviews
_review_service: Optional[ReviewService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def init_auth_services(settings: Settings) -> None:
    """Initialize token signing, password hashing and the auth gate."""
    global _token_service, _password_guard, _auth_gate

    _token_service = TokenService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in_seconds=settings.TOKEN_EXPIRE_SECONDS,
    )
    _password_guard = PasswordGuard(rounds=settings.BCRYPT_ROUNDS)
    _auth_gate = AuthGate(
        token_service=_token_service,
        header_name=settings.AUTH_TOKEN_HEADER,
    )


def init_user_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize user services. Requires auth services."""
    global _user_service, _account_deactivator

    _user_service = UserService(db=db, password_guard=get_password_guard())
    _account_deactivator = AccountDeactivator(db=db, password_guard=get_password_guard())


def init_listing_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize place, city and reservation services. Requires user services."""
    global _place_service, _city_service, _reservation_service

    _place_service = PlaceService(db=db, user_service=get_user_service())
    _city_service = CityService(db=db)
    _reservation_service = ReservationService(db=db, user_service=get_user_service())


def init_review_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize review services. Requires user services."""
    global _review_service

    _review_service = ReviewService(db=db, user_service=get_user_service())


def init_all_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize every service.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        settings: Application settings
    """
    init_auth_services(settings)
    init_user_services(db)
    init_listing_services(db)
    init_review_services(db)


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_token_service() -> TokenService:
    """Get token service instance."""
    if _token_service is None:
        raise RuntimeError("Auth services not initialized. Call init_auth_services first.")
    return _token_service


def get_password_guard() -> PasswordGuard:
    """Get password guard instance."""
    if _password_guard is None:
        raise RuntimeError("Auth services not initialized. Call init_auth_services first.")
    return _password_guard


def get_auth_gate() -> AuthGate:
    """Get auth gate instance."""
    if _auth_gate is None:
        raise RuntimeError("Auth services not initialized. Call init_auth_services first.")
    return _auth_gate


def get_user_service() -> UserService:
    """Get user service instance."""
    if _user_service is None:
        raise RuntimeError("User services not initialized. Call init_user_services first.")
    return _user_service


def get_account_deactivator() -> AccountDeactivator:
    """Get account deactivator instance."""
    if _account_deactivator is None:
        raise RuntimeError("User services not initialized. Call init_user_services first.")
    return _account_deactivator


def get_place_service() -> PlaceService:
    """Get place service instance."""
    if _place_service is None:
        raise RuntimeError("Listing services not initialized. Call init_listing_services first.")
    return _place_service


def get_city_service() -> CityService:
    """Get city service instance."""
    if _city_service is None:
        raise RuntimeError("Listing services not initialized. Call init_listing_services first.")
    return _city_service


def get_reservation_service() -> ReservationService:
    """Get reservation service instance."""
    if _reservation_service is None:
        raise RuntimeError("Listing services not initialized. Call init_listing_services first.")
    return _reservation_service


def get_review_service() -> ReviewService:
    """Get review service instance."""
    if _review_service is None:
        raise RuntimeError("Review services not initialized. Call init_review_services first.")
    return _review_service
