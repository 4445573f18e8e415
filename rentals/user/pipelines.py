"""
User system pipeline functions.

Stateless orchestration logic for user operations.
"""

import logging
from typing import Optional

from rentals.user.services.user_service import UserService
from rentals.user.services.account_deactivator import AccountDeactivator

logger = logging.getLogger(__name__)

DEACTIVATED_MESSAGE = "Successfully deactivated account. Bye!"


async def get_public_profile_pipeline(
    user_service: UserService,
    user_id: str
) -> dict:
    """
    Get a user's public profile.

    Args:
        user_service: For profile retrieval
        user_id: MongoDB user ID (from the path)

    Returns:
        Profile dict with name, avatar and places
    """
    return await user_service.get_public_profile(user_id)


async def update_profile_pipeline(
    user_service: UserService,
    user_id: str,
    changes: dict
) -> dict:
    """
    Update the authenticated user's profile.

    Args:
        user_service: For profile updates
        user_id: MongoDB user ID
        changes: Fields to update, including any re-auth passwords

    Returns:
        Updated user dict
    """
    return await user_service.update_profile(user_id, changes)


async def deactivate_account_pipeline(
    account_deactivator: AccountDeactivator,
    user_id: str,
    password: Optional[str]
) -> dict:
    """
    Permanently delete the authenticated user's account.

    Args:
        account_deactivator: Runs the cascade
        user_id: MongoDB user ID
        password: Current password confirming the request

    Returns:
        dict with farewell message
    """
    counts = await account_deactivator.deactivate(user_id, password)
    logger.info(f"Account {user_id} deactivated: {counts}")
    return {"message": DEACTIVATED_MESSAGE}
