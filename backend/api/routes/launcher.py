"""
Launcher endpoints.

Public player lookups used by the launcher before sign-in.
"""

from fastapi import APIRouter, Depends

from modules.accounts.interfaces import IAccountService
from modules.accounts.models import LauncherUserProfile

from ..dependencies import get_account_service

router = APIRouter()


@router.get("/user/profile/{username}", response_model=LauncherUserProfile)
async def get_user_profile(
    username: str,
    service: IAccountService = Depends(get_account_service),
) -> LauncherUserProfile:
    """
    Get a player's account name and game profiles.

    The path value matches a username or an email. 404 when unknown.
    """
    return await service.get_launcher_profile(username)
