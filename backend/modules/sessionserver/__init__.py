"""
Session server module.

Public API:
- ISessionServerService: Interface for profile lookup and join checks
- ProfilePayload, ProfileProperty: Profile wire models
"""

from .interfaces import ISessionServerService
from .models import ProfilePayload, ProfileProperty, JoinRequest

__all__ = [
    "ISessionServerService",
    "ProfilePayload",
    "ProfileProperty",
    "JoinRequest",
]
