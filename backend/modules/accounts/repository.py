"""
In-memory credential store and profile registry.

Both tables live in a single process and are shared by all request
handlers, so every read and write goes through the table's lock.
Password hashing is CPU-bound and always runs outside the lock.
"""

import logging
import threading
from datetime import datetime
from typing import Optional

from shared.clock import Clock, utcnow
from shared.identifiers import compact_identifier, is_identifier, new_identifier

from .exceptions import AccountNotFoundError, DuplicateIdentifierError
from .models import PlayerProfile, UserAccount
from .passwords import CredentialHasher

logger = logging.getLogger(__name__)


def _normalize_id(value: str) -> Optional[str]:
    if not is_identifier(value):
        return None
    return compact_identifier(value)


class CredentialStore:
    """
    Holds user accounts and verifies their passwords.

    Usernames and emails share one namespace: a login identifier matches
    either field, so a new username may not equal an existing email and
    vice versa.
    """

    def __init__(self, hasher: CredentialHasher, clock: Clock = utcnow) -> None:
        self._hasher = hasher
        self._clock = clock
        self._lock = threading.Lock()
        self._users: dict[str, UserAccount] = {}
        self._dummy_hash: Optional[str] = None

    def find_by_login_identifier(self, identifier: str) -> Optional[UserAccount]:
        """Return the account whose username or email equals identifier."""
        with self._lock:
            return self._find_by_login_locked(identifier)

    def find_by_id(self, user_id: str) -> Optional[UserAccount]:
        key = _normalize_id(user_id)
        if key is None:
            return None
        with self._lock:
            return self._users.get(key)

    def create(self, username: str, email: str, plaintext_password: str) -> UserAccount:
        """
        Create an account with a freshly hashed password.

        Raises:
            DuplicateIdentifierError: If username or email is already taken
        """
        # Fail fast before paying for the hash; the insert re-checks under the lock.
        with self._lock:
            self._check_available_locked(username, email)

        password_hash = self._hasher.hash(plaintext_password)

        with self._lock:
            self._check_available_locked(username, email)
            account = UserAccount(
                id=new_identifier(),
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=self._clock(),
            )
            self._users[account.id] = account

        logger.info(f"Created account {account.id} ({username})")
        return account

    def verify_password(self, account: UserAccount, plaintext_password: str) -> bool:
        return self._hasher.verify(account.password_hash, plaintext_password)

    def verify_unknown(self, plaintext_password: str) -> bool:
        """
        Spend one verification on a throwaway hash and return False.

        Used when the login identifier matched nothing, so both failure
        paths of a login cost the same.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash(new_identifier())
        self._hasher.verify(self._dummy_hash, plaintext_password)
        return False

    def hash_password(self, plaintext_password: str) -> str:
        return self._hasher.hash(plaintext_password)

    def update_password_hash(self, user_id: str, new_hash: str) -> None:
        """
        Raises:
            AccountNotFoundError: If the account does not exist
        """
        with self._lock:
            account = self._get_locked(user_id)
            self._users[account.id] = account.model_copy(update={"password_hash": new_hash})

    def touch_last_login(self, user_id: str, when: Optional[datetime] = None) -> None:
        """
        Raises:
            AccountNotFoundError: If the account does not exist
        """
        with self._lock:
            account = self._get_locked(user_id)
            self._users[account.id] = account.model_copy(
                update={"last_login": when or self._clock()}
            )

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _get_locked(self, user_id: str) -> UserAccount:
        key = _normalize_id(user_id)
        account = self._users.get(key) if key else None
        if account is None:
            raise AccountNotFoundError(user_id)
        return account

    def _find_by_login_locked(self, identifier: str) -> Optional[UserAccount]:
        for account in self._users.values():
            if account.username == identifier or account.email == identifier:
                return account
        return None

    def _check_available_locked(self, username: str, email: str) -> None:
        if self._find_by_login_locked(username) is not None:
            raise DuplicateIdentifierError("username", username)
        if self._find_by_login_locked(email) is not None:
            raise DuplicateIdentifierError("email", email)


class ProfileRegistry:
    """
    Holds player profiles, keeping each owner's profiles in creation order.

    The first profile a user created is their default selection.
    """

    def __init__(self, credentials: CredentialStore, clock: Clock = utcnow) -> None:
        self._credentials = credentials
        self._clock = clock
        self._lock = threading.Lock()
        self._profiles: dict[str, PlayerProfile] = {}
        self._by_owner: dict[str, list[str]] = {}

    def create(self, owner_user_id: str, name: str) -> PlayerProfile:
        """
        Append a new profile to the owner's list.

        Raises:
            AccountNotFoundError: If the owner does not exist
        """
        owner = self._credentials.find_by_id(owner_user_id)
        if owner is None:
            raise AccountNotFoundError(owner_user_id)

        profile = PlayerProfile(
            id=new_identifier(),
            owner_user_id=owner.id,
            name=name,
            created_at=self._clock(),
        )
        with self._lock:
            self._profiles[profile.id] = profile
            self._by_owner.setdefault(owner.id, []).append(profile.id)

        logger.info(f"Created profile {profile.id} ({name}) for user {owner.id}")
        return profile

    def list_by_owner(self, owner_user_id: str) -> list[PlayerProfile]:
        key = _normalize_id(owner_user_id)
        if key is None:
            return []
        with self._lock:
            return [self._profiles[pid] for pid in self._by_owner.get(key, [])]

    def find_by_id(self, profile_id: str) -> Optional[PlayerProfile]:
        key = _normalize_id(profile_id)
        if key is None:
            return None
        with self._lock:
            return self._profiles.get(key)
