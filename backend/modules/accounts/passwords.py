"""
Password hashing.

Wraps argon2-cffi's PasswordHasher (argon2id). Verification is constant
time in the library; plaintexts and hashes are never logged.
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from shared.config import Settings


class CredentialHasher:
    """Salted, slow one-way hashing for account passwords."""

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialHasher":
        return cls(
            time_cost=settings.password_hash_time_cost,
            memory_cost=settings.password_hash_memory_cost,
            parallelism=settings.password_hash_parallelism,
        )

    def hash(self, plaintext: str) -> str:
        return self._hasher.hash(plaintext)

    def verify(self, password_hash: str, plaintext: str) -> bool:
        """Return True if plaintext matches the stored hash."""
        try:
            return self._hasher.verify(password_hash, plaintext)
        except (VerificationError, InvalidHashError):
            return False
