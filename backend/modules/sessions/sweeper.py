"""
Background expiry sweeper.

Reads already treat expired sessions as absent; the sweeper only
reclaims their memory on a fixed interval.
"""

import asyncio
import logging
from typing import Optional

from .repository import SessionTable

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Periodically purges expired sessions from a SessionTable."""

    def __init__(self, table: SessionTable, interval_seconds: float = 3600) -> None:
        self._table = table
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        removed = self._table.sweep_expired()
        if removed:
            logger.info(f"Swept {removed} expired sessions")
        else:
            logger.debug("Session sweep found nothing to remove")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.sweep_once()
            except Exception:
                logger.exception("Session sweep failed")

    def start(self) -> None:
        """Start sweeping on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Session sweeper started (every {self._interval}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session sweeper stopped")
