"""Workout catalog queries."""

from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from fitness_tracker.domain.workouts import (
    Exercise,
    RepBased,
    Workout,
    WorkoutCategory,
)


@dataclass
class WorkoutCatalogService:
    """Read-only access to the workout catalog."""

    workouts: Sequence[Workout]

    def list_workouts(
        self,
        category: WorkoutCategory | None = None,
        search: str | None = None,
    ) -> list[Workout]:
        """Return workouts in a category whose name or description matches."""
        matches = [
            workout
            for workout in self.workouts
            if category is None or workout.category is category
        ]
        needle = (search or "").strip().casefold()
        if not needle:
            return matches
        return [
            workout
            for workout in matches
            if needle in workout.name.casefold()
            or needle in workout.description.casefold()
        ]

    def get_workout(self, workout_id: UUID) -> Workout | None:
        """Return a workout by id, if present."""
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        return None


def describe_exercise(exercise: Exercise) -> str:
    """Short volume label, e.g. '4 sets x 12 reps' or '1 set x 300 s'."""
    load = exercise.load
    sets_label = "set" if load.sets == 1 else "sets"
    if isinstance(load, RepBased):
        return f"{load.sets} {sets_label} x {load.reps} reps"
    return f"{load.sets} {sets_label} x {load.duration_seconds} s"
