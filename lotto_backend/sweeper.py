"""Recurring background task that evicts idle rooms."""
from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import Optional

from .constants import ROOM_EXPIRY_SECONDS, SWEEP_INTERVAL_SECONDS
from .store import RoomStore

logger = logging.getLogger(__name__)


class RoomSweeper:
    """Runs :meth:`RoomStore.sweep_expired` every *interval* seconds.

    The task is bound to the application lifespan through :meth:`start` and
    :meth:`stop`. Tests call :meth:`run_once` instead of waiting on the timer.
    """

    def __init__(
        self,
        store: RoomStore,
        interval: float = SWEEP_INTERVAL_SECONDS,
        ttl: float = ROOM_EXPIRY_SECONDS,
    ):
        self.store = store
        self.interval = interval
        self.ttl = ttl
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self, now: Optional[float] = None) -> int:
        removed = self.store.sweep_expired(now=now, ttl=self.ttl)
        if removed:
            logger.info("Automatic cleanup: %d rooms removed", removed)
        return removed

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.run_once()
            except Exception:
                logger.exception("Room sweep failed")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info("Room sweeper started (interval=%ss, ttl=%ss)", self.interval, self.ttl)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Room sweeper stopped")


__all__ = ["RoomSweeper"]
