"""
Account service implementation.

Registration, account info, launcher lookups and password changes on
top of the credential store and profile registry.
"""

import asyncio
import logging
from typing import Optional

from modules.sessions.repository import SessionTable

from .exceptions import (
    AccountNotFoundError,
    DuplicateIdentifierError,
    IncorrectPasswordError,
    MissingFieldsError,
    UnknownPlayerError,
    WeakPasswordError,
)
from .interfaces import IAccountService
from .models import (
    AccountInfo,
    AccountSummary,
    LauncherProfileEntry,
    LauncherUserProfile,
    PlayerProfile,
    ProfileSummary,
    UserAccount,
)
from .repository import CredentialStore, ProfileRegistry

logger = logging.getLogger(__name__)


def _missing(**fields: Optional[str]) -> list[str]:
    return [name for name, value in fields.items() if not value]


class AccountService(IAccountService):
    """Account operations backed by the in-memory stores."""

    def __init__(
        self,
        credentials: CredentialStore,
        profiles: ProfileRegistry,
        sessions: SessionTable,
        min_password_length: int = 6,
    ):
        self._credentials = credentials
        self._profiles = profiles
        self._sessions = sessions
        self._min_password_length = min_password_length

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        profile_name: str,
    ) -> tuple[UserAccount, PlayerProfile]:
        missing = _missing(
            username=username,
            email=email,
            password=password,
            profileName=profile_name,
        )
        if missing:
            raise MissingFieldsError(missing)

        account = await asyncio.to_thread(self._credentials.create, username, email, password)
        profile = self._profiles.create(account.id, profile_name)
        return account, profile

    async def ensure_account(
        self,
        username: str,
        email: str,
        password: str,
        profile_name: str,
    ) -> Optional[UserAccount]:
        """Register the account unless the username or email already exists."""
        try:
            account, _ = await self.register(username, email, password, profile_name)
        except DuplicateIdentifierError:
            logger.debug(f"Account {username} already present, not seeding")
            return None
        return account

    async def get_account_info(self, user_id: str) -> AccountInfo:
        account = self._credentials.find_by_id(user_id)
        if account is None:
            raise AccountNotFoundError(user_id)

        return AccountInfo(
            user=AccountSummary(
                id=account.id,
                username=account.username,
                email=account.email,
                created_at=account.created_at,
                last_login=account.last_login,
            ),
            profiles=[
                ProfileSummary(id=p.id, name=p.name, created_at=p.created_at)
                for p in self._profiles.list_by_owner(account.id)
            ],
        )

    async def get_launcher_profile(self, identifier: str) -> LauncherUserProfile:
        account = self._credentials.find_by_login_identifier(identifier)
        if account is None:
            raise UnknownPlayerError(identifier)

        return LauncherUserProfile(
            id=account.id,
            username=account.username,
            name=account.username,
            profiles=[
                LauncherProfileEntry(id=p.id, name=p.name)
                for p in self._profiles.list_by_owner(account.id)
            ],
        )

    async def change_password(
        self,
        user_id: str,
        current_password: str,
        new_password: str,
    ) -> None:
        missing = _missing(currentPassword=current_password, newPassword=new_password)
        if missing:
            raise MissingFieldsError(missing)
        if len(new_password) < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

        account = self._credentials.find_by_id(user_id)
        if account is None:
            raise AccountNotFoundError(user_id)

        valid = await asyncio.to_thread(
            self._credentials.verify_password, account, current_password
        )
        if not valid:
            raise IncorrectPasswordError()

        new_hash = await asyncio.to_thread(self._credentials.hash_password, new_password)
        # Swap before revoking: a login racing this call re-checks the hash
        # after storing its session.
        self._credentials.update_password_hash(account.id, new_hash)
        revoked = self._sessions.remove_all_for_user(account.id)
        logger.info(f"Password changed for user {account.id}; revoked {revoked} sessions")
