"""Registry of live workout sessions, one per session context."""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from fitness_tracker.services.session_timer import (
    Scheduler,
    SessionCompleted,
    WorkoutSessionTimer,
)
from fitness_tracker.services.workouts import WorkoutCatalogService

_logger = logging.getLogger(__name__)


@dataclass
class WorkoutSessionManager:
    """Owns session timers and guarantees they are released on teardown.

    A session context is whatever screen or client owns the countdown. A
    context holds at most one timer; opening a new one closes the previous.
    """

    catalog: WorkoutCatalogService
    scheduler: Scheduler
    tick_interval_seconds: float = 1.0
    _sessions: dict[str, WorkoutSessionTimer] = field(default_factory=dict)
    _completions: dict[str, SessionCompleted] = field(default_factory=dict)

    def open_session(self, context_id: str, workout_id: UUID) -> WorkoutSessionTimer:
        """Create an idle timer for a catalog workout in a context."""
        workout = self.catalog.get_workout(workout_id)
        if workout is None:
            raise LookupError(f"Unknown workout: {workout_id}")
        self.close_session(context_id)
        timer = WorkoutSessionTimer(
            workout, self.scheduler, tick_interval_seconds=self.tick_interval_seconds
        )

        def record_completion(event: SessionCompleted) -> None:
            self._completions[context_id] = event

        timer.on_complete(record_completion)
        self._sessions[context_id] = timer
        _logger.info(
            "Workout session opened: context=%s workout=%s", context_id, workout.name
        )
        return timer

    def get_session(self, context_id: str) -> WorkoutSessionTimer | None:
        """Return the timer owned by a context, if any."""
        return self._sessions.get(context_id)

    def last_completion(self, context_id: str) -> SessionCompleted | None:
        """Return the completion event of the context's current timer."""
        return self._completions.get(context_id)

    def close_session(self, context_id: str) -> bool:
        """Tear down a context's timer; return False when there was none."""
        timer = self._sessions.pop(context_id, None)
        self._completions.pop(context_id, None)
        if timer is None:
            return False
        timer.close()
        return True

    def close_all(self) -> None:
        """Tear down every live session."""
        for context_id in list(self._sessions):
            self.close_session(context_id)

    @property
    def active_contexts(self) -> list[str]:
        return list(self._sessions)
