"""
Session server module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import ProfilePayload


@runtime_checkable
class ISessionServerService(Protocol):
    """Profile/texture lookup and server join verification."""

    async def get_profile(self, profile_id: str) -> Optional[ProfilePayload]:
        """
        Return the profile payload, or None if it does not exist.

        Raises:
            InvalidArgumentError: If profile_id is not a valid identifier
        """
        ...

    async def join(
        self,
        access_token: Optional[str],
        selected_profile_id: Optional[str],
        server_id: Optional[str],
    ) -> None:
        """
        Record that the session's profile is joining a server.

        Raises:
            InvalidArgumentError: If any field is missing
            InvalidTokenError: If the access token is unknown
            ExpiredTokenError: If the session expired
            ProfileOwnershipError: If the profile is not the user's
        """
        ...

    async def has_joined(
        self,
        username: Optional[str],
        server_id: Optional[str],
    ) -> Optional[ProfilePayload]:
        """
        Return the profile named username if it recently joined server_id.

        Raises:
            InvalidArgumentError: If any field is missing
        """
        ...
