"""
FastAPI router for User system endpoints.

Provides registration, public profiles, profile updates and account
deactivation.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from common.auth import TokenService
from common.utils import serialize_document
from rentals.auth.dependencies import CurrentUserId
from rentals.auth.schemas import TokenResponse
from rentals.auth import pipelines as auth_pipelines
from rentals.dependencies import (
    get_token_service,
    get_user_service,
    get_account_deactivator,
)
from rentals.user.services.user_service import UserService
from rentals.user.services.account_deactivator import AccountDeactivator
from rentals.user.schemas import (
    RegisterRequest,
    ProfileUpdateRequest,
    DeactivateRequest,
    MessageResponse,
)
from rentals.user import pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """
    Register a new user.

    The new user is logged in straight away: the response carries a
    session token.
    """
    result = await auth_pipelines.registration_pipeline(
        user_service=user_service,
        token_service=token_service,
        name=body.name,
        email=body.email,
        password=body.password,
    )

    return TokenResponse(**result)


@router.put("")
async def update_profile(
    body: ProfileUpdateRequest,
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Update the authenticated user's profile.

    Only provided fields will be updated (partial update).
    """
    changes = body.model_dump(mode="json", exclude_unset=True)

    user = await pipelines.update_profile_pipeline(
        user_service=user_service,
        user_id=user_id,
        changes=changes,
    )

    return serialize_document(user)


@router.post("/deactivate", response_model=MessageResponse)
async def deactivate_account(
    user_id: CurrentUserId,
    account_deactivator: Annotated[AccountDeactivator, Depends(get_account_deactivator)],
    body: Optional[DeactivateRequest] = None,
):
    """
    Permanently delete the authenticated user's account.

    Requires the current password. Deletes the user's places,
    reservations and reviews along with the account.
    """
    result = await pipelines.deactivate_account_pipeline(
        account_deactivator=account_deactivator,
        user_id=user_id,
        password=body.password if body else None,
    )

    return MessageResponse(**result)


@router.get("/{user_id}")
async def get_public_profile(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Get a user's public profile.

    Only the name, avatar and listings are exposed.
    """
    profile = await pipelines.get_public_profile_pipeline(
        user_service=user_service,
        user_id=user_id,
    )

    return serialize_document(profile)
