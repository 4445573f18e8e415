"""
Authentication gate for private routes.

Reads the session token from a fixed request header, verifies it and
attaches the authenticated user ID to the request.
"""

import logging
from typing import Optional

from fastapi import Request

from common.auth import TokenService
from common.utils.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


class AuthGate:
    """
    Gate that rejects requests without a valid session token.
    """

    def __init__(self, token_service: TokenService, header_name: str = "Auth-Token"):
        """
        Initialize AuthGate.

        Args:
            token_service: For token verification
            header_name: Request header carrying the raw token
        """
        self._token_service = token_service
        self._header_name = header_name

    @property
    def header_name(self) -> str:
        return self._header_name

    def authenticate(self, token: Optional[str]) -> str:
        """
        Resolve a raw header value to a user ID.

        Raises:
            UnauthorizedException: No token supplied
            InvalidTokenException: Token failed verification
        """
        token = (token or "").strip()
        if not token:
            raise UnauthorizedException()
        return self._token_service.verify(token)

    async def require_auth(self, request: Request) -> str:
        """
        Validate request is authenticated.

        Side Effects:
            - Attaches the user ID to request.state.user_id
        """
        user_id = self.authenticate(request.headers.get(self._header_name))
        request.state.user_id = user_id
        return user_id
