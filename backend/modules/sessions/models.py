"""
Sessions module data models.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """
    A bearer-token session.

    Sessions are never changed in place: a refresh replaces the record
    with a new one under a new access token.
    """

    access_token: str = Field(..., description="Bearer token, primary key")
    client_token: str = Field(..., description="Token lineage bound at login")
    owner_user_id: str
    owner_username: str = Field(..., description="Username snapshot at issue time")
    expires_at: datetime
    created_at: datetime

    model_config = ConfigDict(frozen=True)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now
