"""
Timer Driver - ticks a PomodoroTimer once per interval on the event loop.

The tick task exists only while the timer runs. Pausing, resetting,
finishing a cycle or closing the driver cancels it.

Completed cycles are delivered on their own tasks. Those are never
cancelled: pause and reset leave them running, close() waits for them.
"""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable

from neurolearn.timer.pomodoro import CompletedCycle, PomodoroTimer

logger = logging.getLogger(__name__)

CycleCallback = Callable[[CompletedCycle], Awaitable[None]]


class TimerDriver:
    """Runs the one-second tick for a PomodoroTimer."""

    def __init__(
        self,
        timer: PomodoroTimer,
        on_complete: CycleCallback | None = None,
        interval: float = 1.0,
    ):
        self.timer = timer
        self.on_complete = on_complete
        self.interval = interval
        self._task: asyncio.Task | None = None
        self._deliveries: set[asyncio.Task] = set()

    @property
    def ticking(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending_deliveries(self) -> int:
        """Completed cycles whose callback is still running."""
        return len(self._deliveries)

    def start(self) -> None:
        """Start the timer and schedule ticks. Must be called on a running loop."""
        self.timer.start()
        if not self.ticking:
            self._task = asyncio.get_running_loop().create_task(self._run())

    async def pause(self) -> None:
        self.timer.pause()
        await self._cancel()

    async def reset(self) -> None:
        self.timer.reset()
        await self._cancel()

    async def close(self) -> None:
        """Stop ticking for good (component teardown); pending deliveries finish first."""
        self.timer.pause()
        await self._cancel()
        if self._deliveries:
            await asyncio.gather(*self._deliveries)

    async def _cancel(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done() or task is asyncio.current_task():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self) -> None:
        while self.timer.running:
            await asyncio.sleep(self.interval)
            cycle = self.timer.tick()
            if cycle is None:
                continue
            logger.info(f"Pomodoro {cycle.mode.value} cycle of {cycle.duration_minutes} min finished")
            if self.on_complete is not None:
                delivery = asyncio.get_running_loop().create_task(self._deliver(cycle))
                self._deliveries.add(delivery)
                delivery.add_done_callback(self._deliveries.discard)

    async def _deliver(self, cycle: CompletedCycle) -> None:
        try:
            await self.on_complete(cycle)
        except Exception as e:
            logger.error(f"Pomodoro completion handler failed: {e}")
