"""
Auth API endpoints.

Provides registration, login and logout.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import OptionalAuth
from api.models.errors import ERROR_RESPONSES
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResult, LoginRequest, LogoutResponse, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResult,
    status_code=201,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Create an account and sign it in.

    Returns a bearer token together with the new user's public profile.
    """
    return await service.register(request.email, request.password, request.name)


@router.post(
    "/login",
    response_model=AuthResult,
    responses={
        400: ERROR_RESPONSES[400],
        401: ERROR_RESPONSES[401],
        500: ERROR_RESPONSES[500],
    },
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Exchange email and password for a bearer token.

    Unknown emails and wrong passwords get the same 401.
    """
    return await service.login(request.email, request.password)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    user: Optional[AuthenticatedUser] = OptionalAuth,
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    Acknowledge a logout.

    Tokens are stateless, so the client discards its token; nothing is
    revoked server-side. Any request body is ignored.
    """
    if user is not None:
        logger.info("User %s logged out", user.id)
    return await service.logout()
