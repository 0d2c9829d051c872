"""
Token issuer.

Access tokens are 32 random bytes rendered as 64 hex characters. Client
tokens use the protocol's UUID shape: 32 hex characters, no separators.
"""

import secrets
import uuid

ACCESS_TOKEN_BYTES = 32


class TokenIssuer:
    """Mints unguessable bearer and client tokens."""

    def new_access_token(self) -> str:
        return secrets.token_hex(ACCESS_TOKEN_BYTES)

    def new_client_token(self) -> str:
        return uuid.uuid4().hex
