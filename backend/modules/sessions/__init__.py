"""
Sessions module.

Stores bearer-token sessions and purges expired ones in the background.

Public API:
- Session: The stored session record
- SessionTable: Thread-safe in-memory session storage
- SessionSweeper: Periodic expiry sweep
"""

from .models import Session
from .repository import SessionTable
from .sweeper import SessionSweeper

__all__ = [
    "Session",
    "SessionTable",
    "SessionSweeper",
]
