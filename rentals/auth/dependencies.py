"""
FastAPI dependencies for the Auth system.
"""

from typing import Annotated

from fastapi import Depends, Request

from rentals.auth.gate import AuthGate
from rentals.dependencies import get_auth_gate


async def require_auth(
    request: Request,
    auth_gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> str:
    """
    Dependency that requires a valid session token.

    Usage:
        @router.get("/protected")
        async def protected_route(user_id: Annotated[str, Depends(require_auth)]):
            return {"user_id": user_id}
    """
    return await auth_gate.require_auth(request)


CurrentUserId = Annotated[str, Depends(require_auth)]
