"""
Authentication protocol wire models.

Field names on the wire are part of the contract with existing game
clients (accessToken, clientToken, selectedProfile, ...).
"""

from typing import Any, Optional
from pydantic import Field

from shared.models import CamelModel


class Agent(CamelModel):
    """The client declaring which game it authenticates for."""

    name: Optional[str] = None
    # Kept as sent; the handler accepts only the exact supported integer.
    version: Any = None


class ProfileRef(CamelModel):
    """A profile as shown to the client: compact id and name."""

    id: str
    name: str


class SelectedProfileRef(CamelModel):
    """A profile chosen by the client; only the id is used."""

    id: Optional[str] = None
    name: Optional[str] = None


class UserRef(CamelModel):
    id: str
    username: str
    properties: list[dict[str, Any]] = Field(default_factory=list)


class AuthenticateRequest(CamelModel):
    agent: Optional[Agent] = None
    username: Optional[str] = None
    password: Optional[str] = None
    client_token: Optional[str] = None
    request_user: Optional[bool] = None


class AuthenticateResponse(CamelModel):
    access_token: str
    client_token: str
    selected_profile: ProfileRef
    available_profiles: list[ProfileRef]
    user: Optional[UserRef] = None


class RefreshRequest(CamelModel):
    access_token: Optional[str] = None
    client_token: Optional[str] = None
    selected_profile: Optional[SelectedProfileRef] = None
    request_user: Optional[bool] = None


class RefreshResponse(CamelModel):
    access_token: str
    client_token: str
    selected_profile: ProfileRef
    user: Optional[UserRef] = None


class ValidateRequest(CamelModel):
    access_token: Optional[str] = None
    client_token: Optional[str] = None


class InvalidateRequest(CamelModel):
    access_token: Optional[str] = None
    client_token: Optional[str] = None


class ErrorResponse(CamelModel):
    """Protocol error body: {"error": ..., "errorMessage": ...}."""

    error: str
    error_message: str
