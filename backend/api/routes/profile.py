"""
Profile endpoints.

Provides read and update access to the signed-in user's profile.
"""

from fastapi import APIRouter, Depends

from modules.auth.interfaces import IAuthService
from modules.auth.models import UpdateProfileRequest
from shared.models import AuthenticatedUser, UserProfile

from ..dependencies import get_auth_service
from ..middleware.auth import RequireAuth
from ..models.errors import ERROR_RESPONSES

router = APIRouter()


@router.get(
    "",
    response_model=UserProfile,
    responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404]},
)
async def get_profile(
    user: AuthenticatedUser = RequireAuth,
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_profile(user.id)


@router.put(
    "",
    response_model=UserProfile,
    responses=ERROR_RESPONSES,
)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = RequireAuth,
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Change the current user's name and/or email.

    Omitted fields are left unchanged. Requires authentication.
    """
    return await service.update_profile(user.id, name=request.name, email=request.email)
