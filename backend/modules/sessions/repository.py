"""
In-memory session table.

Reads return raw records, expired or not; interpreting expiry is up to
the caller. All access, including the background sweep, goes through a
single lock so a concurrent reader sees either the old or the new session
of a refresh, never neither.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Optional

from shared.clock import Clock, utcnow

from .models import Session

logger = logging.getLogger(__name__)


class SessionTable:
    """Maps access tokens to sessions."""

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = {}

    def build(
        self,
        owner_user_id: str,
        owner_username: str,
        access_token: str,
        client_token: str,
        ttl_seconds: int,
    ) -> Session:
        """Create a session record without storing it."""
        now = self._clock()
        return Session(
            access_token=access_token,
            client_token=client_token,
            owner_user_id=owner_user_id,
            owner_username=owner_username,
            expires_at=now + timedelta(seconds=ttl_seconds),
            created_at=now,
        )

    def insert(
        self,
        owner_user_id: str,
        owner_username: str,
        access_token: str,
        client_token: str,
        ttl_seconds: int,
    ) -> Session:
        """
        Store a new session expiring ttl_seconds from now.

        Raises:
            ValueError: If the access token is already in use
        """
        session = self.build(owner_user_id, owner_username, access_token, client_token, ttl_seconds)
        with self._lock:
            if access_token in self._sessions:
                raise ValueError("Access token already in use")
            self._sessions[access_token] = session
        return session

    def find_by_access_token(self, access_token: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(access_token)

    def find_by_client_token(self, client_token: str) -> Optional[Session]:
        with self._lock:
            for session in self._sessions.values():
                if session.client_token == client_token:
                    return session
        return None

    def replace(self, old_access_token: str, client_token: str, new_session: Session) -> bool:
        """
        Atomically swap a session for its refreshed successor.

        Returns False, leaving the table untouched, if the old session is
        gone, its client token no longer matches, or the new token is taken.
        """
        with self._lock:
            current = self._sessions.get(old_access_token)
            if current is None or current.client_token != client_token:
                return False
            if new_session.access_token in self._sessions:
                return False
            del self._sessions[old_access_token]
            self._sessions[new_session.access_token] = new_session
        return True

    def remove(self, access_token: str) -> None:
        """Remove a session; no error if absent."""
        with self._lock:
            self._sessions.pop(access_token, None)

    def remove_if_expired(self, access_token: str, now: datetime) -> bool:
        """Remove the session only if it is still present and expired."""
        with self._lock:
            session = self._sessions.get(access_token)
            if session is None or not session.is_expired(now):
                return False
            del self._sessions[access_token]
        return True

    def remove_all_for_user(self, user_id: str) -> int:
        with self._lock:
            tokens = [
                token for token, session in self._sessions.items()
                if session.owner_user_id == user_id
            ]
            for token in tokens:
                del self._sessions[token]
        return len(tokens)

    def sweep_expired(self, now: Optional[datetime] = None) -> int:
        """Remove every session whose expiry is before now."""
        now = now or self._clock()
        with self._lock:
            expired = [
                token for token, session in self._sessions.items()
                if session.is_expired(now)
            ]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
