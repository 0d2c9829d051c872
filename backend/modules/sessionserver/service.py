"""
Session server implementation.

Serves profile payloads with texture properties and verifies that a
player joining a game server authenticated with this server first.
"""

import base64
import json
import logging
import threading
from datetime import timedelta
from typing import Optional

from shared.clock import Clock, utcnow
from shared.identifiers import format_identifier, is_identifier
from modules.accounts.models import PlayerProfile
from modules.accounts.repository import CredentialStore, ProfileRegistry
from modules.auth.exceptions import InvalidArgumentError, ProfileOwnershipError
from modules.auth.interfaces import IAuthService

from .interfaces import ISessionServerService
from .models import ProfilePayload, ProfileProperty, ServerJoin

logger = logging.getLogger(__name__)

DEFAULT_JOIN_TTL_SECONDS = 30


class SessionServerService(ISessionServerService):
    """
    Session server backed by the account stores and the auth service.

    Joins are kept per server id for ``join_ttl_seconds``.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        profiles: ProfileRegistry,
        auth: IAuthService,
        texture_base_url: str,
        join_ttl_seconds: int = DEFAULT_JOIN_TTL_SECONDS,
        clock: Clock = utcnow,
    ):
        self._credentials = credentials
        self._profiles = profiles
        self._auth = auth
        self._texture_base_url = texture_base_url.rstrip("/")
        self._join_ttl = timedelta(seconds=join_ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._joins: dict[str, ServerJoin] = {}

    async def get_profile(self, profile_id: str) -> Optional[ProfilePayload]:
        if not profile_id or not is_identifier(profile_id):
            raise InvalidArgumentError("Invalid UUID format.")

        profile = self._profiles.find_by_id(profile_id)
        if profile is None:
            return None
        if self._credentials.find_by_id(profile.owner_user_id) is None:
            return None
        return self._build_payload(profile)

    async def join(
        self,
        access_token: Optional[str],
        selected_profile_id: Optional[str],
        server_id: Optional[str],
    ) -> None:
        if not access_token or not selected_profile_id or not server_id:
            raise InvalidArgumentError(
                "accessToken, selectedProfile and serverId are required."
            )

        session = await self._auth.resolve_session(access_token)

        profile = self._profiles.find_by_id(selected_profile_id)
        if profile is None or profile.owner_user_id != session.owner_user_id:
            raise ProfileOwnershipError()

        now = self._clock()
        with self._lock:
            self._prune_locked(now)
            self._joins[server_id] = ServerJoin(
                server_id=server_id,
                profile_id=profile.id,
                joined_at=now,
            )
        logger.info(f"Profile {profile.id} joined server {server_id}")

    async def has_joined(
        self,
        username: Optional[str],
        server_id: Optional[str],
    ) -> Optional[ProfilePayload]:
        if not username or not server_id:
            raise InvalidArgumentError("username and serverId are required.")

        now = self._clock()
        with self._lock:
            self._prune_locked(now)
            join = self._joins.get(server_id)
        if join is None:
            return None

        profile = self._profiles.find_by_id(join.profile_id)
        if profile is None or profile.name != username:
            return None
        return self._build_payload(profile)

    def _prune_locked(self, now) -> None:
        stale = [
            server_id for server_id, join in self._joins.items()
            if join.joined_at + self._join_ttl < now
        ]
        for server_id in stale:
            del self._joins[server_id]

    def _build_payload(self, profile: PlayerProfile) -> ProfilePayload:
        display_id = format_identifier(profile.id)
        textures = {
            "timestamp": int(self._clock().timestamp() * 1000),
            "profileId": display_id,
            "profileName": profile.name,
            "textures": {
                "SKIN": {"url": f"{self._texture_base_url}/skin/{profile.id}"},
            },
        }
        encoded = base64.b64encode(json.dumps(textures).encode("utf-8")).decode("ascii")
        return ProfilePayload(
            id=display_id,
            name=profile.name,
            properties=[ProfileProperty(name="textures", value=encoded)],
        )
