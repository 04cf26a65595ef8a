"""User preference models."""

from dataclasses import dataclass

from fitness_tracker.domain.errors import ValidationError

DEFAULT_DAILY_CALORIE_GOAL = 2000


@dataclass(frozen=True)
class UserSettings:
    """Process-wide user preferences."""

    daily_calorie_goal: int = DEFAULT_DAILY_CALORIE_GOAL

    def __post_init__(self) -> None:
        goal = self.daily_calorie_goal
        if isinstance(goal, bool) or not isinstance(goal, int) or goal <= 0:
            raise ValidationError("daily_calorie_goal", "must be a positive integer")
