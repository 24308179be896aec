"""
Bearer token authentication.

Validates the ``Authorization`` header and resolves the token to a stored
user.
"""

import logging
from typing import Optional

from fastapi import Depends, Request

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.exceptions import AccountKitError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization`` header value.

    The header must be exactly ``Bearer <token>``: one space, the scheme
    spelled as shown and a non-empty token.

    Args:
        authorization: Raw header value, or None when absent

    Returns:
        The token string

    Raises:
        MissingTokenError: For any other shape
    """
    if not authorization:
        raise MissingTokenError()

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        raise MissingTokenError()
    return parts[1]


async def get_current_user(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. The user is also
    left on ``request.state.user`` (and its id on ``request.state.user_id``).

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        MissingTokenError: No usable bearer header
        InvalidTokenError: Bad signature, malformed or expired token
        TokenUserNotFoundError: The token's user no longer exists
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    user = await service.authenticate(token)

    request.state.user = user
    request.state.user_id = user.id
    return user


async def get_optional_user(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Never fails: a missing or bad token yields None.
    """
    if not request.headers.get("Authorization"):
        return None

    try:
        return await get_current_user(request, service)
    except AccountKitError as e:
        logger.debug("Ignoring bad optional credentials: %s", e.message)
        return None


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
