"""
Shared infrastructure for the auth server.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- clock: Injectable time source
- identifiers: Compact/hyphenated UUID handling
- logging_config: Root logging setup
- models: Wire model base class

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    AuthServerError,
    NotFoundError,
    ValidationError,
    AuthorizationError,
)
from .clock import Clock, utcnow
from .models import CamelModel
from .identifiers import (
    new_identifier,
    is_identifier,
    compact_identifier,
    format_identifier,
)

__all__ = [
    "Settings",
    "Clock",
    "utcnow",
    "get_settings",
    "AuthServerError",
    "NotFoundError",
    "ValidationError",
    "AuthorizationError",
    "CamelModel",
    "new_identifier",
    "is_identifier",
    "compact_identifier",
    "format_identifier",
]
