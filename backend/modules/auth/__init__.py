"""
Authentication module.

Implements the legacy game-client authentication protocol: authenticate,
refresh, validate and invalidate bearer sessions.

Public API:
- IAuthService: Interface for protocol operations
- TokenIssuer: Access/client token generation
- Wire models: AuthenticateRequest, AuthenticateResponse, etc.
- Protocol exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .tokens import TokenIssuer
from .models import (
    Agent,
    ProfileRef,
    UserRef,
    AuthenticateRequest,
    AuthenticateResponse,
    RefreshRequest,
    RefreshResponse,
    ValidateRequest,
    InvalidateRequest,
    ErrorResponse,
)
from .exceptions import (
    ErrorKind,
    ProtocolError,
    InvalidArgumentError,
    InvalidAgentError,
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    NoProfilesError,
    UserNotFoundError,
    ProfileOwnershipError,
    InternalError,
)

__all__ = [
    # Interface
    "IAuthService",
    "TokenIssuer",
    # Models
    "Agent",
    "ProfileRef",
    "UserRef",
    "AuthenticateRequest",
    "AuthenticateResponse",
    "RefreshRequest",
    "RefreshResponse",
    "ValidateRequest",
    "InvalidateRequest",
    "ErrorResponse",
    # Exceptions
    "ErrorKind",
    "ProtocolError",
    "InvalidArgumentError",
    "InvalidAgentError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "NoProfilesError",
    "UserNotFoundError",
    "ProfileOwnershipError",
    "InternalError",
]
