"""
Auth system pipeline functions.

Stateless orchestration logic for authentication flows.
"""

import logging
from typing import TYPE_CHECKING

from common.auth import TokenService

if TYPE_CHECKING:
    from rentals.user.services.user_service import UserService

logger = logging.getLogger(__name__)


async def registration_pipeline(
    user_service: "UserService",
    token_service: TokenService,
    name: str,
    email: str,
    password: str,
) -> dict:
    """
    Orchestrates the user registration flow.

    Args:
        user_service: Creates the user record
        token_service: Issues the session token
        name: Display name
        email: Login email
        password: Plaintext password (hashed by the user service)

    Returns:
        dict with token

    Raises:
        ConflictException: Email already registered
    """
    user = await user_service.create_user(name=name, email=email, password=password)
    token = token_service.issue(str(user["_id"]))

    logger.info(f"Registered user {user['_id']}")
    return {"token": token}


async def login_pipeline(
    user_service: "UserService",
    token_service: TokenService,
    email: str,
    password: str,
) -> dict:
    """
    Orchestrates the login flow.

    Args:
        user_service: Checks the credentials
        token_service: Issues the session token
        email: Login email
        password: Plaintext password

    Returns:
        dict with token

    Raises:
        InvalidCredentialsException: Unknown email or wrong password
    """
    user = await user_service.authenticate(email=email, password=password)
    token = token_service.issue(str(user["_id"]))

    logger.info(f"User {user['_id']} logged in")
    return {"token": token}


async def get_current_user_pipeline(
    user_service: "UserService",
    user_id: str,
) -> dict:
    """
    Load the authenticated user with their places, reservations and reviews.

    Raises:
        NotFoundException: Token refers to a user that no longer exists
    """
    return await user_service.get_me(user_id)
