"""In-memory adapters used when no database is configured."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.meals import Meal
from fitness_tracker.services.goals import GoalRepository
from fitness_tracker.services.meals import MealRepository
from fitness_tracker.services.user_settings import SettingsStorage


@dataclass
class InMemoryMealRepository(MealRepository):
    """Meal log kept in process memory."""

    meals: list[Meal] = field(default_factory=list)

    def load(self) -> list[Meal]:
        return list(self.meals)

    def save(self, meals: Sequence[Meal]) -> None:
        self.meals = list(meals)


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """Goals kept in process memory."""

    goals: list[Goal] = field(default_factory=list)

    def load(self) -> list[Goal]:
        return list(self.goals)

    def save(self, goals: Sequence[Goal]) -> None:
        self.goals = list(goals)


@dataclass
class InMemorySettingsStorage(SettingsStorage):
    """Key-value settings kept in process memory."""

    values: dict[str, int] = field(default_factory=dict)

    def get_int(self, key: str) -> int | None:
        return self.values.get(key)

    def set_int(self, key: str, value: int) -> None:
        self.values[key] = value
