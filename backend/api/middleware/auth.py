"""
Bearer session authentication.

Resolves ``Authorization: Bearer <accessToken>`` to a live session.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import ExpiredTokenError, ProtocolError
from modules.auth.interfaces import IAuthService
from modules.sessions.models import Session

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IAuthService = Depends(get_auth_service),
) -> Session:
    """
    Dependency that requires a valid bearer session.

    Usage:
        @router.get("/protected")
        async def protected_route(session: Session = Depends(get_current_session)):
            return {"user_id": session.owner_user_id}
    """
    if credentials is None:
        raise AuthError("Access token required")

    try:
        return await service.resolve_session(credentials.credentials)
    except ExpiredTokenError:
        raise AuthError("Token has expired")
    except ProtocolError:
        raise AuthError("Invalid or expired token")


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Dependency that returns the raw bearer token without checking it."""
    if credentials is None:
        raise AuthError("Access token required")
    return credentials.credentials


# Type aliases for cleaner route definitions
RequireSession = Depends(get_current_session)
