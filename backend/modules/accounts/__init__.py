"""
Accounts module.

Holds user accounts and their player profiles.

Public API:
- IAccountService: Interface for account operations
- UserAccount, PlayerProfile: Stored records
- CredentialStore, ProfileRegistry: In-memory tables
- CredentialHasher: argon2id password hashing
- Account exceptions: DuplicateIdentifierError, AccountNotFoundError, etc.
"""

from .interfaces import IAccountService
from .models import UserAccount, PlayerProfile, AccountInfo
from .passwords import CredentialHasher
from .repository import CredentialStore, ProfileRegistry
from .exceptions import (
    DuplicateIdentifierError,
    AccountNotFoundError,
    MissingFieldsError,
    WeakPasswordError,
    IncorrectPasswordError,
    UnknownPlayerError,
)

__all__ = [
    # Interface
    "IAccountService",
    # Models
    "UserAccount",
    "PlayerProfile",
    "AccountInfo",
    # Storage
    "CredentialHasher",
    "CredentialStore",
    "ProfileRegistry",
    # Exceptions
    "DuplicateIdentifierError",
    "AccountNotFoundError",
    "MissingFieldsError",
    "WeakPasswordError",
    "IncorrectPasswordError",
    "UnknownPlayerError",
]
