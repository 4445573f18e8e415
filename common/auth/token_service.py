"""
JWT session token service.

Issues and verifies the stateless session tokens handed out on login and
registration. Tokens embed ``{"user": {"id": <user id>}}`` and expire after a
fixed window; there is no refresh, an expired token means logging in again.

Example:
    tokens = TokenService(secret="your-secret-key", expires_in_seconds=2400)

    token = tokens.issue("65f0c2...")
    user_id = tokens.verify(token)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import jwt, JWTError
from jose.exceptions import JOSEError

from common.utils.exceptions import InternalServerException, InvalidTokenException

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class TokenService:
    """
    Signs and verifies session tokens.

    The signing secret is fixed at construction and never changes for the
    lifetime of the process. The clock is injectable so expiry can be tested
    without waiting.
    """

    DEFAULT_EXPIRES_IN_SECONDS = 2400

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the token service.

        Args:
            secret: Secret key for JWT signing
            algorithm: JWT algorithm (default: HS256)
            expires_in_seconds: Validity window of issued tokens
            clock: Callable returning the current aware datetime
        """
        if not secret:
            raise ValueError("A signing secret is required")

        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(seconds=expires_in_seconds)
        self._clock = clock or _utcnow

    @property
    def expires_in_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def issue(self, user_id: str) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: The user's ID

        Returns:
            The encoded JWT

        Raises:
            InternalServerException: If signing fails
        """
        now = self._clock()
        payload = {
            "user": {"id": str(user_id)},
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except JOSEError as e:
            logger.error(f"Failed to sign session token: {e}")
            raise InternalServerException()

    def verify(self, token: str) -> str:
        """
        Verify a token and return the user ID it carries.

        Expiry is checked against the service clock rather than the wall
        clock used by the JWT library.

        Raises:
            InvalidTokenException: If the token is malformed, tampered with,
                expired, or lacks a user ID
        """
        if not token:
            raise InvalidTokenException()

        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.debug(f"Rejected session token: {e}")
            raise InvalidTokenException()

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or self._clock().timestamp() >= exp:
            raise InvalidTokenException()

        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id:
            raise InvalidTokenException()

        return str(user_id)
