"""
Base exception classes for the auth server.

Each module defines its own exceptions on top of these bases. Only the
API layer turns them into HTTP responses; services raise and propagate.
"""

from typing import Optional, Any


class AuthServerError(Exception):
    """
    Base exception for all auth server errors.

    ``code`` is a stable machine-readable identifier. Subclasses set
    ``default_code``; without one the class name is used.
    """

    default_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """Convert to a response body; empty details are left out."""
        result: dict[str, Any] = {"error": self.code, "message": self.message}
        if include_details and self.details:
            result["details"] = self.details
        return result


class NotFoundError(AuthServerError):
    """An account or profile does not exist."""

    pass


class ValidationError(AuthServerError):
    """Input was missing, malformed or conflicts with existing data."""

    pass


class AuthorizationError(AuthServerError):
    """The caller is known but may not perform the action."""

    pass
