"""Domain models for the workout catalog."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4

from fitness_tracker.domain.errors import ValidationError


class WorkoutCategory(str, Enum):
    """Catalog category of a workout."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    HIIT = "hiit"
    YOGA = "yoga"
    PILATES = "pilates"
    OTHER = "other"


class WorkoutDifficulty(str, Enum):
    """Difficulty level of a workout."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def _require_count(field_name: str, value: object, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, "must be an integer")
    if value < minimum:
        raise ValidationError(field_name, f"must be at least {minimum}")


@dataclass(frozen=True)
class RepBased:
    """Exercise performed as sets of repetitions."""

    sets: int
    reps: int

    def __post_init__(self) -> None:
        _require_count("sets", self.sets, 1)
        _require_count("reps", self.reps, 1)


@dataclass(frozen=True)
class TimeBased:
    """Exercise performed as sets held for a duration."""

    sets: int
    duration_seconds: int

    def __post_init__(self) -> None:
        _require_count("sets", self.sets, 1)
        _require_count("duration_seconds", self.duration_seconds, 1)


ExerciseLoad = RepBased | TimeBased


@dataclass(frozen=True)
class Exercise:
    """Single exercise within a workout."""

    name: str
    description: str
    load: ExerciseLoad
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "must not be empty")
        if not isinstance(self.load, RepBased | TimeBased):
            raise ValidationError("load", "must be RepBased or TimeBased")

    @classmethod
    def from_counts(
        cls,
        name: str,
        description: str,
        sets: int = 1,
        reps: int = 0,
        duration: int = 0,
    ) -> "Exercise":
        """Build an exercise from raw counts.

        Positive reps make the exercise rep based; otherwise a positive
        duration (seconds) makes it time based.
        """
        if reps > 0:
            return cls(name=name, description=description, load=RepBased(sets, reps))
        if duration > 0:
            return cls(
                name=name, description=description, load=TimeBased(sets, duration)
            )
        raise ValidationError("load", "either reps or duration must be positive")


@dataclass(frozen=True, eq=False)
class Workout:
    """Read-only catalog workout."""

    name: str
    description: str
    duration_minutes: int
    calories_burn: int
    category: WorkoutCategory
    difficulty: WorkoutDifficulty
    exercises: tuple[Exercise, ...] = ()
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "must not be empty")
        _require_count("duration_minutes", self.duration_minutes, 1)
        _require_count("calories_burn", self.calories_burn, 0)
        object.__setattr__(self, "exercises", tuple(self.exercises))

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workout):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
