"""Meal logging service."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.meals import Meal, MealType
from fitness_tracker.services.inputs import (
    parse_meal_type,
    parse_name,
    parse_non_negative_int,
)
from fitness_tracker.services.metrics import CalorieSummary, TimeWindow, daily_summary


class MealRepository(Protocol):
    """Persistence interface for the meal log."""

    def load(self) -> list[Meal]:
        """Return every logged meal."""

    def save(self, meals: Sequence[Meal]) -> None:
        """Replace the stored meal log with `meals`."""


@dataclass
class MealLogService:
    """Service that validates, stores and summarizes meals."""

    repository: MealRepository

    def log_meal(
        self,
        name: str,
        calories: int | str,
        meal_type: MealType | str,
        logged_at: datetime | None = None,
    ) -> Meal:
        """Validate raw input, append the meal and persist the log."""
        meal = Meal(
            name=parse_name(name),
            calories=parse_non_negative_int(calories, "calories"),
            meal_type=parse_meal_type(meal_type),
            logged_at=logged_at or datetime.now(tz=UTC),
        )
        meals = self.repository.load()
        meals.append(meal)
        self.repository.save(meals)
        return meal

    def delete_meal(self, meal_id: UUID) -> bool:
        """Remove a meal; return False when it was not in the log."""
        meals = self.repository.load()
        remaining = [meal for meal in meals if meal.id != meal_id]
        if len(remaining) == len(meals):
            return False
        self.repository.save(remaining)
        return True

    def list_meals(self) -> list[Meal]:
        """Return the meal log in insertion order."""
        return self.repository.load()

    def summary(
        self, daily_goal: int, window: TimeWindow | None = None
    ) -> CalorieSummary:
        """Return consumed and remaining calories for the window."""
        return daily_summary(self.repository.load(), daily_goal, window)
