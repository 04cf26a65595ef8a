"""Countdown state machine for an in-progress workout."""

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import StateError
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.metrics import workout_calorie_estimate

_logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


class Scheduler(Protocol):
    """Source of periodic ticks."""

    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> Hashable:
        """Call `callback` every `interval_seconds` until cancelled."""

    def cancel(self, handle: Hashable) -> None:
        """Stop a schedule created by `schedule_repeating`."""


class SessionState(str, Enum):
    """Lifecycle state of a workout session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in {SessionState.COMPLETED, SessionState.CANCELLED}


@dataclass(frozen=True)
class SessionCompleted:
    """Emitted once when a session counts down to zero."""

    workout_id: UUID
    workout_name: str
    calories_burned: int


CompletionListener = Callable[[SessionCompleted], None]


def format_clock(seconds: int) -> str:
    """Render seconds as mm:ss; minutes may grow past two digits."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    minutes, remainder = divmod(seconds, SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{remainder:02d}"


class WorkoutSessionTimer:
    """Tick-driven countdown for one workout.

    The timer never reads the wall clock. Each tick delivered by the
    scheduler removes one second, which lets tests advance the countdown
    synthetically. Owners must call `close()` (or use the timer as a context
    manager) when they are discarded so no recurring tick is left behind.
    """

    def __init__(
        self,
        workout: Workout,
        scheduler: Scheduler,
        tick_interval_seconds: float = 1.0,
    ) -> None:
        self.workout = workout
        self.remaining_seconds = workout.duration_seconds
        self._scheduler = scheduler
        self._tick_interval_seconds = tick_interval_seconds
        self._state = SessionState.IDLE
        self._handle: Hashable | None = None
        self._listeners: list[CompletionListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def clock(self) -> str:
        return format_clock(self.remaining_seconds)

    @property
    def is_scheduled(self) -> bool:
        return self._handle is not None

    def on_complete(self, listener: CompletionListener) -> None:
        """Register a listener for the completion event."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Start or resume the countdown."""
        if self._state not in {SessionState.IDLE, SessionState.PAUSED}:
            raise StateError(f"Cannot start a session that is {self._state.value}")
        self._handle = self._scheduler.schedule_repeating(
            self._tick_interval_seconds, self.tick
        )
        self._state = SessionState.RUNNING
        _logger.info(
            "Workout session started: workout=%s remaining=%s",
            self.workout.name,
            self.remaining_seconds,
        )

    def pause(self) -> None:
        """Freeze the countdown at its current value."""
        if self._state is not SessionState.RUNNING:
            raise StateError(f"Cannot pause a session that is {self._state.value}")
        self._release_schedule()
        self._state = SessionState.PAUSED
        _logger.info(
            "Workout session paused: workout=%s remaining=%s",
            self.workout.name,
            self.remaining_seconds,
        )

    def tick(self) -> None:
        """Advance the countdown by one second while running."""
        if self._state is not SessionState.RUNNING:
            return
        self.remaining_seconds -= 1
        if self.remaining_seconds > 0:
            return
        self.remaining_seconds = 0
        self._release_schedule()
        self._state = SessionState.COMPLETED
        _logger.info("Workout session completed: workout=%s", self.workout.name)
        event = SessionCompleted(
            workout_id=self.workout.id,
            workout_name=self.workout.name,
            calories_burned=workout_calorie_estimate(self.workout),
        )
        for listener in list(self._listeners):
            listener(event)

    def cancel(self) -> None:
        """Abort the session; only valid before it finishes."""
        if self._state.is_terminal:
            raise StateError(f"Cannot cancel a session that is {self._state.value}")
        self._release_schedule()
        self._state = SessionState.CANCELLED
        _logger.info(
            "Workout session cancelled: workout=%s remaining=%s",
            self.workout.name,
            self.remaining_seconds,
        )

    def close(self) -> None:
        """Tear the session down, cancelling it unless it already finished."""
        if not self._state.is_terminal:
            self.cancel()

    def __enter__(self) -> "WorkoutSessionTimer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _release_schedule(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        self._scheduler.cancel(handle)
