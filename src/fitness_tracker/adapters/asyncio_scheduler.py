"""Repeating tick scheduler backed by the asyncio event loop."""

import asyncio
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field

from fitness_tracker.services.session_timer import Scheduler


@dataclass
class AsyncioScheduler(Scheduler):
    """Schedules repeating callbacks with `loop.call_later`.

    Each firing re-arms the next call before running the callback, so a
    callback may cancel its own schedule.
    """

    loop: asyncio.AbstractEventLoop | None = None
    _timers: dict[int, asyncio.TimerHandle] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=itertools.count)

    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> int:
        """Run `callback` every `interval_seconds` and return a handle id."""
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        loop = self.loop or asyncio.get_running_loop()
        handle_id = next(self._ids)

        def fire() -> None:
            if handle_id not in self._timers:
                return
            self._timers[handle_id] = loop.call_later(interval_seconds, fire)
            callback()

        self._timers[handle_id] = loop.call_later(interval_seconds, fire)
        return handle_id

    def cancel(self, handle: int) -> None:
        """Stop a schedule; unknown handles are ignored."""
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.cancel()

    def close(self) -> None:
        """Cancel every pending schedule."""
        for handle in list(self._timers):
            self.cancel(handle)

    @property
    def active_count(self) -> int:
        return len(self._timers)
