"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and keeps HTTP concerns out of the core.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from modules.sessions.models import Session

from .models import AuthenticateResponse, RefreshResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for the authentication protocol.

    Successful calls return response models (or None); failures raise a
    ProtocolError subclass whose ``kind`` identifies the failure.
    """

    async def authenticate(
        self,
        identifier: Optional[str],
        password: Optional[str],
        agent_name: Optional[str],
        agent_version: Any,
        client_token: Optional[str] = None,
        request_user: bool = False,
    ) -> AuthenticateResponse:
        """
        Verify credentials and open a session on the user's first profile.

        Raises:
            InvalidArgumentError: If credentials are missing
            InvalidAgentError: If the agent is not supported
            InvalidCredentialsError: If the identifier or password is wrong
            NoProfilesError: If the user owns no profiles
        """
        ...

    async def refresh(
        self,
        access_token: Optional[str],
        client_token: Optional[str],
        selected_profile_id: Optional[str] = None,
        request_user: bool = False,
    ) -> RefreshResponse:
        """
        Replace a session with a new one under a new access token.

        Raises:
            InvalidArgumentError: If either token is missing
            InvalidTokenError: If the session is unknown or the client token differs
            ExpiredTokenError: If the session expired (it is removed)
            UserNotFoundError: If the owning account is gone
            NoProfilesError: If the user owns no profiles
        """
        ...

    async def validate(
        self,
        access_token: Optional[str],
        client_token: Optional[str] = None,
    ) -> None:
        """
        Check that an access token is usable.

        A missing access token is accepted.

        Raises:
            InvalidTokenError: If the session is unknown or the client token differs
            ExpiredTokenError: If the session expired (it is removed)
        """
        ...

    async def invalidate(self, access_token: Optional[str]) -> None:
        """Remove the session if present. Never fails."""
        ...

    async def resolve_session(self, access_token: Optional[str]) -> Session:
        """
        Return the live session for a bearer token.

        Raises:
            InvalidTokenError: If the token is missing or unknown
            ExpiredTokenError: If the session expired (it is removed)
        """
        ...
