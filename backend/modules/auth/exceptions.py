"""
Authentication protocol exceptions.

Every failure of a protocol operation is one of these. Each carries an
ErrorKind discriminant in ``kind`` (also exposed as ``code``); the API
layer alone decides how a kind is rendered on the wire.
"""

from enum import Enum
from typing import Any, Optional

from shared.exceptions import AuthServerError


class ErrorKind(str, Enum):
    """Failure kinds of the authentication protocol."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    NO_PROFILES = "NO_PROFILES"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ProtocolError(AuthServerError):
    """Base exception for protocol operation failures."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    default_message: str = "An internal server error occurred."

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message or self.default_message, code=self.kind.value, details=details)


class InvalidArgumentError(ProtocolError):
    """Raised when required fields are missing or malformed."""

    kind = ErrorKind.INVALID_ARGUMENT
    default_message = "Invalid argument."


class InvalidAgentError(InvalidArgumentError):
    """Raised when the declared agent is not the supported one."""

    default_message = "Invalid agent."


class InvalidCredentialsError(ProtocolError):
    """
    Raised for an unknown login identifier or a wrong password.

    Both cases share one message so callers cannot tell which check failed.
    """

    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid credentials. Invalid username or password."


class InvalidTokenError(ProtocolError):
    """Raised for an unknown access token or a client token mismatch."""

    kind = ErrorKind.INVALID_TOKEN
    default_message = "Invalid token."


class ExpiredTokenError(ProtocolError):
    """Raised when a session is past its expiry. The session is removed."""

    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Token expired."


class NoProfilesError(ProtocolError):
    """Raised when the authenticated user owns no profiles."""

    kind = ErrorKind.NO_PROFILES
    default_message = "No profiles available for this user."


class UserNotFoundError(ProtocolError):
    """Raised when a session references an account that no longer exists."""

    kind = ErrorKind.USER_NOT_FOUND
    default_message = "User not found."


class ProfileOwnershipError(ProtocolError):
    """Raised when a profile does not belong to the session's user."""

    kind = ErrorKind.FORBIDDEN
    default_message = "Profile does not belong to the user."


class InternalError(ProtocolError):
    """Raised when hashing or storage fails unexpectedly."""

    kind = ErrorKind.INTERNAL_ERROR
