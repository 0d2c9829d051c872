"""
Session server wire models.

Profile payloads carry hyphenated identifiers and a base64-encoded
``textures`` property.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import CamelModel


class ProfileProperty(CamelModel):
    name: str
    value: str


class ProfilePayload(CamelModel):
    """A profile as served to game servers and clients."""

    id: str = Field(..., description="Hyphenated profile identifier")
    name: str
    properties: list[ProfileProperty] = Field(default_factory=list)


class JoinRequest(CamelModel):
    """Body of POST /sessionserver/session/minecraft/join."""

    access_token: Optional[str] = None
    selected_profile: Optional[str] = None
    server_id: Optional[str] = None


class ServerJoin(BaseModel):
    """A profile's announced join to a game server."""

    server_id: str
    profile_id: str
    joined_at: datetime

    model_config = ConfigDict(frozen=True)
