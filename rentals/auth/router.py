"""
FastAPI router for Auth system endpoints.

Provides login and the current-session lookup. Registration lives on the
user router because it creates a user resource.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.auth import TokenService
from common.utils import serialize_document
from rentals.auth.dependencies import CurrentUserId
from rentals.auth.schemas import LoginRequest, TokenResponse
from rentals.auth import pipelines
from rentals.dependencies import get_token_service, get_user_service
from rentals.user.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """
    Log in with email and password.

    Returns a session token to send back in the auth header.
    """
    result = await pipelines.login_pipeline(
        user_service=user_service,
        token_service=token_service,
        email=body.email,
        password=body.password,
    )

    return TokenResponse(**result)


@router.get("/me")
async def get_me(
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Get the authenticated user.

    Includes the user's places, reservations and reviews; never the
    password hash.
    """
    user = await pipelines.get_current_user_pipeline(
        user_service=user_service,
        user_id=user_id,
    )

    return serialize_document(user)
