"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from fitness_tracker.domain.errors import ValidationError


class MealType(str, Enum):
    """Fixed meal-type buckets used to group logged meals."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True, eq=False)
class Meal:
    """A logged meal. Two meals are equal when their ids match."""

    name: str
    calories: int
    meal_type: MealType
    logged_at: datetime
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "must not be empty")
        if isinstance(self.calories, bool) or not isinstance(self.calories, int):
            raise ValidationError("calories", "must be an integer")
        if self.calories < 0:
            raise ValidationError("calories", "must not be negative")
        if not isinstance(self.meal_type, MealType):
            raise ValidationError("meal_type", "must be a MealType")
        if not isinstance(self.logged_at, datetime):
            raise ValidationError("logged_at", "must be a datetime")
        if self.logged_at.tzinfo is None:
            raise ValidationError("logged_at", "must be timezone-aware")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
