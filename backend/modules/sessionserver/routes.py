"""
Session server endpoints.

Profile lookup used by game clients to fetch textures, plus the
join/hasJoined handshake between clients and game servers.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_session_server_service

from .interfaces import ISessionServerService
from .models import JoinRequest, ProfilePayload

router = APIRouter()


@router.get("/session/minecraft/profile/{profile_id}", response_model=ProfilePayload)
async def get_profile(
    profile_id: str,
    service: ISessionServerService = Depends(get_session_server_service),
):
    """
    Get a profile with its textures property.

    204 when the profile does not exist.
    """
    payload = await service.get_profile(profile_id)
    if payload is None:
        return Response(status_code=204)
    return payload


@router.post("/session/minecraft/join", status_code=204, response_class=Response)
async def join(
    request: JoinRequest,
    service: ISessionServerService = Depends(get_session_server_service),
) -> Response:
    """
    Announce that the session's profile is joining a server.
    """
    await service.join(request.access_token, request.selected_profile, request.server_id)
    return Response(status_code=204)


@router.get("/session/minecraft/hasJoined", response_model=ProfilePayload)
async def has_joined(
    username: Optional[str] = Query(default=None),
    server_id: Optional[str] = Query(default=None, alias="serverId"),
    service: ISessionServerService = Depends(get_session_server_service),
):
    """
    Check that a player joined the given server.

    204 when no matching join is known.
    """
    payload = await service.has_joined(username, server_id)
    if payload is None:
        return Response(status_code=204)
    return payload
