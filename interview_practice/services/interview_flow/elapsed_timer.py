"""
Elapsed Timer Module

Periodic timer that calls a tick callback once per interval while it runs. The
interview flow starts one when a session becomes active and stops it as soon as
the session completes or is exited.

Dependencies:
- asyncio: For the background ticking task.
- loguru: For logging operations.
"""

import asyncio
from typing import Callable, Optional
from loguru import logger


class ElapsedTimer:
    """Ticks on the running event loop until stopped."""

    def __init__(self, on_tick: Callable[[], None], interval: float = 1.0, name: str = "elapsed_timer"):
        self.on_tick = on_tick
        self.interval = interval
        self.name = name
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking. Must be called from within a running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)
        logger.debug(f"Started timer {self.name}")

    def stop(self) -> None:
        """Stop ticking. No tick is delivered after this returns."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.debug(f"Stopped timer {self.name}")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.on_tick()
