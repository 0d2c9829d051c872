"""
Authentication protocol handler.

Issues, refreshes, validates and invalidates bearer sessions on top of
the credential store, profile registry and session table.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from shared.clock import Clock, utcnow
from shared.exceptions import AuthServerError
from shared.identifiers import compact_identifier, is_identifier
from shared.logging_config import mask_token
from modules.accounts.models import PlayerProfile, UserAccount
from modules.accounts.repository import CredentialStore, ProfileRegistry
from modules.sessions.models import Session
from modules.sessions.repository import SessionTable

from .interfaces import IAuthService
from .models import AuthenticateResponse, ProfileRef, RefreshResponse, UserRef
from .tokens import TokenIssuer
from .exceptions import (
    ExpiredTokenError,
    InternalError,
    InvalidAgentError,
    InvalidArgumentError,
    InvalidCredentialsError,
    InvalidTokenError,
    NoProfilesError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 86400


def _profile_ref(profile: PlayerProfile) -> ProfileRef:
    return ProfileRef(id=profile.id, name=profile.name)


def _user_ref(account: UserAccount) -> UserRef:
    return UserRef(id=account.id, username=account.username, properties=[])


class AuthService(IAuthService):
    """
    Implementation of the authentication protocol.

    Session state moves non-existent -> active -> (refreshed -> active')
    or -> expired/removed. Password work runs in a worker thread so it
    does not block the event loop.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        profiles: ProfileRegistry,
        sessions: SessionTable,
        tokens: Optional[TokenIssuer] = None,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        agent_name: str = "Minecraft",
        agent_version: int = 1,
        clock: Clock = utcnow,
    ):
        self._credentials = credentials
        self._profiles = profiles
        self._sessions = sessions
        self._tokens = tokens or TokenIssuer()
        self._ttl_seconds = ttl_seconds
        self._agent_name = agent_name
        self._agent_version = agent_version
        self._clock = clock

    async def authenticate(
        self,
        identifier: Optional[str],
        password: Optional[str],
        agent_name: Optional[str],
        agent_version: Any,
        client_token: Optional[str] = None,
        request_user: bool = False,
    ) -> AuthenticateResponse:
        if not identifier or not password:
            raise InvalidArgumentError("Credentials can not be null.")

        if not self._is_supported_agent(agent_name, agent_version):
            raise InvalidAgentError()

        account = self._credentials.find_by_login_identifier(identifier)
        if account is None:
            await self._run_blocking(self._credentials.verify_unknown, password)
            logger.info("Rejected login for unknown identifier")
            raise InvalidCredentialsError()

        if not await self._run_blocking(self._credentials.verify_password, account, password):
            logger.info(f"Rejected login for user {account.id}: wrong password")
            raise InvalidCredentialsError()

        profiles = self._profiles.list_by_owner(account.id)
        if not profiles:
            raise NoProfilesError()

        selected = profiles[0]
        access_token = self._tokens.new_access_token()
        client_token = client_token or self._tokens.new_client_token()

        try:
            self._sessions.insert(
                account.id,
                account.username,
                access_token,
                client_token,
                self._ttl_seconds,
            )
        except ValueError as e:
            raise InternalError("Could not create session.") from e

        # A password change may have revoked sessions while this one was
        # being verified; the hash it swaps in first is visible here.
        current = self._credentials.find_by_id(account.id)
        if current is None or current.password_hash != account.password_hash:
            self._sessions.remove(access_token)
            logger.info(f"Dropped login for user {account.id}: password changed meanwhile")
            raise InvalidCredentialsError()

        self._touch_last_login(account.id)
        logger.info(f"User {account.id} authenticated, session {mask_token(access_token)}")

        return AuthenticateResponse(
            access_token=access_token,
            client_token=client_token,
            selected_profile=_profile_ref(selected),
            available_profiles=[_profile_ref(p) for p in profiles],
            user=_user_ref(account) if request_user else None,
        )

    async def refresh(
        self,
        access_token: Optional[str],
        client_token: Optional[str],
        selected_profile_id: Optional[str] = None,
        request_user: bool = False,
    ) -> RefreshResponse:
        if not access_token or not client_token:
            raise InvalidArgumentError("Access token and client token are required.")

        session = self._sessions.find_by_access_token(access_token)
        if session is None or session.client_token != client_token:
            raise InvalidTokenError()

        self._check_not_expired(session)

        account = self._credentials.find_by_id(session.owner_user_id)
        if account is None:
            raise UserNotFoundError()

        profiles = self._profiles.list_by_owner(account.id)
        if not profiles:
            raise NoProfilesError("No profiles available.")

        selected = self._select_profile(profiles, selected_profile_id)

        new_session = self._sessions.build(
            account.id,
            account.username,
            self._tokens.new_access_token(),
            client_token,
            self._ttl_seconds,
        )
        # A concurrent refresh of the same token may have won the swap.
        if not self._sessions.replace(access_token, client_token, new_session):
            raise InvalidTokenError()

        logger.info(
            f"Refreshed session {mask_token(access_token)} -> "
            f"{mask_token(new_session.access_token)} for user {account.id}"
        )

        return RefreshResponse(
            access_token=new_session.access_token,
            client_token=client_token,
            selected_profile=_profile_ref(selected),
            user=_user_ref(account) if request_user else None,
        )

    async def validate(
        self,
        access_token: Optional[str],
        client_token: Optional[str] = None,
    ) -> None:
        if not access_token:
            # Clients rely on a bare validate call succeeding.
            logger.debug("Validate called without an access token; accepting")
            return None

        session = self._sessions.find_by_access_token(access_token)
        if session is None:
            raise InvalidTokenError()

        self._check_not_expired(session)

        if client_token and session.client_token != client_token:
            raise InvalidTokenError()

        return None

    async def invalidate(self, access_token: Optional[str]) -> None:
        if access_token:
            self._sessions.remove(access_token)
            logger.info(f"Invalidated session {mask_token(access_token)}")

    async def resolve_session(self, access_token: Optional[str]) -> Session:
        if not access_token:
            raise InvalidTokenError()

        session = self._sessions.find_by_access_token(access_token)
        if session is None:
            raise InvalidTokenError()

        self._check_not_expired(session)
        return session

    def _is_supported_agent(self, agent_name: Optional[str], agent_version: Any) -> bool:
        # Only a JSON number counts; bool is an int subclass, so True is not 1.
        if isinstance(agent_version, bool) or not isinstance(agent_version, (int, float)):
            return False
        return agent_name == self._agent_name and agent_version == self._agent_version

    def _check_not_expired(self, session: Session) -> None:
        now = self._clock()
        if session.is_expired(now):
            self._sessions.remove_if_expired(session.access_token, now)
            logger.info(f"Session {mask_token(session.access_token)} expired")
            raise ExpiredTokenError()

    def _select_profile(
        self,
        profiles: list[PlayerProfile],
        selected_profile_id: Optional[str],
    ) -> PlayerProfile:
        if selected_profile_id and is_identifier(selected_profile_id):
            wanted = compact_identifier(selected_profile_id)
            for profile in profiles:
                if profile.id == wanted:
                    return profile
        return profiles[0]

    def _touch_last_login(self, user_id: str) -> None:
        try:
            self._credentials.touch_last_login(user_id, self._clock())
        except Exception:
            logger.warning(f"Could not update last login for user {user_id}", exc_info=True)

    async def _run_blocking(self, func: Callable[..., T], *args) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except AuthServerError:
            raise
        except Exception as e:
            logger.exception("Credential check failed")
            raise InternalError() from e
