"""
Account endpoints used by the launcher and the web front end.

Registration is public; everything under /user requires a bearer
access token issued by the auth server.
"""

from fastapi import APIRouter, Depends

from modules.accounts.interfaces import IAccountService
from modules.accounts.models import (
    AccountInfo,
    ChangePasswordRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)
from modules.auth.interfaces import IAuthService
from modules.sessions.models import Session

from ..dependencies import get_account_service, get_auth_service
from ..middleware.auth import get_bearer_token, get_current_session

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> RegisterResponse:
    """
    Create an account and its first game profile.
    """
    account, _ = await service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        profile_name=request.profile_name,
    )
    return RegisterResponse(message="Account created.", user_id=account.id)


@router.get("/user/info", response_model=AccountInfo)
async def get_account_info(
    session: Session = Depends(get_current_session),
    service: IAccountService = Depends(get_account_service),
) -> AccountInfo:
    """
    Get the signed-in user's account and profiles.
    """
    return await service.get_account_info(session.owner_user_id)


@router.post("/user/logout", response_model=MessageResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    auth: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Revoke the bearer token.
    """
    await auth.invalidate(token)
    return MessageResponse(message="Signed out.")


@router.post("/user/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    session: Session = Depends(get_current_session),
    service: IAccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Change the signed-in user's password.

    All of the user's sessions, including this one, are revoked.
    """
    await service.change_password(
        session.owner_user_id,
        request.current_password,
        request.new_password,
    )
    return MessageResponse(message="Password updated.")
