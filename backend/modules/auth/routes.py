"""
Auth server endpoints.

POST /authserver/authenticate, /refresh, /validate and /invalidate.
Protocol failures propagate as ProtocolError and are rendered by the
application's exception handlers.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Response

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import (
    AuthenticateRequest,
    AuthenticateResponse,
    InvalidateRequest,
    RefreshRequest,
    RefreshResponse,
    ValidateRequest,
)

router = APIRouter()


@router.post(
    "/authenticate",
    response_model=AuthenticateResponse,
    response_model_exclude_none=True,
)
async def authenticate(
    request: AuthenticateRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthenticateResponse:
    """
    Authenticate with username (or email) and password.

    Returns fresh tokens and the user's profiles.
    """
    agent_name = request.agent.name if request.agent else None
    agent_version = request.agent.version if request.agent else None
    return await service.authenticate(
        identifier=request.username,
        password=request.password,
        agent_name=agent_name,
        agent_version=agent_version,
        client_token=request.client_token,
        request_user=bool(request.request_user),
    )


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    response_model_exclude_none=True,
)
async def refresh(
    request: RefreshRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RefreshResponse:
    """
    Exchange a valid access token for a new one.

    The old access token stops working.
    """
    selected_profile_id = request.selected_profile.id if request.selected_profile else None
    return await service.refresh(
        access_token=request.access_token,
        client_token=request.client_token,
        selected_profile_id=selected_profile_id,
        request_user=bool(request.request_user),
    )


@router.post("/validate", status_code=204, response_class=Response)
async def validate(
    request: Optional[ValidateRequest] = None,
    service: IAuthService = Depends(get_auth_service),
) -> Response:
    """
    Check an access token. 204 when usable, 403 otherwise.
    """
    request = request or ValidateRequest()
    await service.validate(request.access_token, request.client_token)
    return Response(status_code=204)


@router.post("/invalidate", status_code=204, response_class=Response)
async def invalidate(
    request: Optional[InvalidateRequest] = None,
    service: IAuthService = Depends(get_auth_service),
) -> Response:
    """
    Revoke an access token. Always 204.
    """
    request = request or InvalidateRequest()
    await service.invalidate(request.access_token)
    return Response(status_code=204)
