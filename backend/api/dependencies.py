"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The stores are built once per container and handed to
the services that use them, so every request sees the same tables.
"""

from typing import Optional

from shared.clock import Clock, utcnow
from shared.config import Settings, get_settings
from modules.accounts.interfaces import IAccountService
from modules.accounts.passwords import CredentialHasher
from modules.accounts.repository import CredentialStore, ProfileRegistry
from modules.accounts.service import AccountService
from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService
from modules.auth.tokens import TokenIssuer
from modules.sessions.repository import SessionTable
from modules.sessions.sweeper import SessionSweeper
from modules.sessionserver.interfaces import ISessionServerService
from modules.sessionserver.service import SessionServerService


class ServiceContainer:
    """
    Container for all store and service instances.

    Instances are created lazily on first access and cached for the
    container's lifetime. Use reset_container() to start over in tests.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Clock = utcnow) -> None:
        self._settings = settings or get_settings()
        self._clock = clock
        self._credentials: CredentialStore | None = None
        self._profiles: ProfileRegistry | None = None
        self._sessions: SessionTable | None = None
        self._tokens: TokenIssuer | None = None
        self._auth_service: IAuthService | None = None
        self._account_service: AccountService | None = None
        self._session_server_service: ISessionServerService | None = None
        self._sweeper: SessionSweeper | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def credentials(self) -> CredentialStore:
        """Get the credential store."""
        if self._credentials is None:
            self._credentials = CredentialStore(
                CredentialHasher.from_settings(self._settings),
                clock=self._clock,
            )
        return self._credentials

    @property
    def profiles(self) -> ProfileRegistry:
        """Get the profile registry."""
        if self._profiles is None:
            self._profiles = ProfileRegistry(self.credentials, clock=self._clock)
        return self._profiles

    @property
    def sessions(self) -> SessionTable:
        """Get the session table."""
        if self._sessions is None:
            self._sessions = SessionTable(clock=self._clock)
        return self._sessions

    @property
    def tokens(self) -> TokenIssuer:
        if self._tokens is None:
            self._tokens = TokenIssuer()
        return self._tokens

    @property
    def auth(self) -> IAuthService:
        """Get the auth service instance."""
        if self._auth_service is None:
            self._auth_service = AuthService(
                credentials=self.credentials,
                profiles=self.profiles,
                sessions=self.sessions,
                tokens=self.tokens,
                ttl_seconds=self._settings.access_token_ttl_seconds,
                agent_name=self._settings.supported_agent_name,
                agent_version=self._settings.supported_agent_version,
                clock=self._clock,
            )
        return self._auth_service

    @property
    def accounts(self) -> AccountService:
        """Get the account service instance."""
        if self._account_service is None:
            self._account_service = AccountService(
                credentials=self.credentials,
                profiles=self.profiles,
                sessions=self.sessions,
                min_password_length=self._settings.min_password_length,
            )
        return self._account_service

    @property
    def session_server(self) -> ISessionServerService:
        """Get the session server service instance."""
        if self._session_server_service is None:
            self._session_server_service = SessionServerService(
                credentials=self.credentials,
                profiles=self.profiles,
                auth=self.auth,
                texture_base_url=self._settings.texture_base_url,
                join_ttl_seconds=self._settings.join_ttl_seconds,
                clock=self._clock,
            )
        return self._session_server_service

    @property
    def sweeper(self) -> SessionSweeper:
        if self._sweeper is None:
            self._sweeper = SessionSweeper(
                self.sessions,
                interval_seconds=self._settings.session_sweep_interval_seconds,
            )
        return self._sweeper


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a prepared container (used by tests)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with
    empty stores. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> IAuthService:
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_account_service() -> IAccountService:
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_session_server_service() -> ISessionServerService:
    """FastAPI dependency for session server service."""
    return get_container().session_server
