"""Domain models for measurable goals."""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

from fitness_tracker.domain.errors import ValidationError


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


@dataclass(frozen=True, eq=False)
class Goal:
    """A tracked goal such as daily water or steps."""

    name: str
    target_value: float
    current_value: float
    deadline: date
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "must not be empty")
        if not _is_number(self.target_value):
            raise ValidationError("target_value", "must be a finite number")
        if self.target_value <= 0:
            raise ValidationError("target_value", "must be positive")
        if not _is_number(self.current_value):
            raise ValidationError("current_value", "must be a finite number")
        if self.current_value < 0:
            raise ValidationError("current_value", "must not be negative")
        if not isinstance(self.deadline, date):
            raise ValidationError("deadline", "must be a date")

    def with_current_value(self, current_value: float) -> "Goal":
        """Return a copy of the goal with a new current value."""
        return replace(self, current_value=current_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Goal):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
