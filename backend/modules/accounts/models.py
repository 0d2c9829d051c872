"""
Accounts module data models.

UserAccount and PlayerProfile are the stored records. The request and
response models define the registration and account API payloads, which
use camelCase on the wire.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import CamelModel


class UserAccount(BaseModel):
    """
    A registered user.

    Records are immutable; the credential store replaces them through
    explicit update operations.
    """

    id: str = Field(..., description="Compact user identifier")
    username: str = Field(..., description="Unique, case-sensitive login name")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., repr=False, description="argon2id hash")
    created_at: datetime
    last_login: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class PlayerProfile(BaseModel):
    """A named in-game identity owned by a user."""

    id: str = Field(..., description="Compact profile identifier")
    owner_user_id: str
    name: str
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class RegisterRequest(CamelModel):
    """Body of POST /api/register."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    profile_name: Optional[str] = None


class RegisterResponse(CamelModel):
    success: bool = True
    message: str = "Account created."
    user_id: str


class ChangePasswordRequest(CamelModel):
    """Body of POST /api/user/change-password."""

    current_password: Optional[str] = None
    new_password: Optional[str] = None


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class AccountSummary(CamelModel):
    id: str
    username: str
    email: str
    created_at: datetime
    last_login: Optional[datetime] = None


class ProfileSummary(CamelModel):
    id: str
    name: str
    created_at: datetime


class AccountInfo(CamelModel):
    """Account details returned to the signed-in user."""

    success: bool = True
    user: AccountSummary
    profiles: list[ProfileSummary] = Field(default_factory=list)


class TextureLink(CamelModel):
    url: str


class LauncherProfileEntry(CamelModel):
    id: str
    name: str
    skins: list[TextureLink] = Field(default_factory=list)
    capes: list[TextureLink] = Field(default_factory=list)


class LauncherUserProfile(CamelModel):
    """
    Public view of a player for the launcher.

    ``name`` repeats the username for clients that expect the protocol's
    field. Skins and capes stay empty: textures are not stored.
    """

    id: str
    username: str
    name: str
    skins: list[TextureLink] = Field(default_factory=list)
    capes: list[TextureLink] = Field(default_factory=list)
    profiles: list[LauncherProfileEntry] = Field(default_factory=list)
