"""Goal tracking service."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.catalog import default_goals
from fitness_tracker.domain.errors import ValidationError
from fitness_tracker.domain.goals import Goal
from fitness_tracker.services.inputs import (
    parse_name,
    parse_non_negative_number,
    parse_positive_number,
)


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def load(self) -> list[Goal]:
        """Return every goal."""

    def save(self, goals: Sequence[Goal]) -> None:
        """Replace the stored goals with `goals`."""


def _parse_deadline(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError("deadline", "must be an ISO date") from None


@dataclass
class GoalService:
    """Service for creating, editing and tracking goals."""

    repository: GoalRepository

    def list_goals(self) -> list[Goal]:
        """Return all goals in insertion order."""
        return self.repository.load()

    def get_goal(self, goal_id: UUID) -> Goal | None:
        """Return a goal by id, if present."""
        for goal in self.repository.load():
            if goal.id == goal_id:
                return goal
        return None

    def add_goal(
        self,
        name: str,
        target_value: float | str,
        current_value: float | str,
        deadline: date | str,
    ) -> Goal:
        """Validate raw input and store a new goal."""
        goal = Goal(
            name=parse_name(name),
            target_value=parse_positive_number(target_value, "target_value"),
            current_value=parse_non_negative_number(current_value, "current_value"),
            deadline=_parse_deadline(deadline),
        )
        goals = self.repository.load()
        goals.append(goal)
        self.repository.save(goals)
        return goal

    def update_goal(
        self,
        goal_id: UUID,
        name: str,
        target_value: float | str,
        current_value: float | str,
        deadline: date | str,
    ) -> Goal | None:
        """Replace a goal's fields, keeping its id and position."""
        existing = self.get_goal(goal_id)
        if existing is None:
            return None
        updated = replace(
            existing,
            name=parse_name(name),
            target_value=parse_positive_number(target_value, "target_value"),
            current_value=parse_non_negative_number(current_value, "current_value"),
            deadline=_parse_deadline(deadline),
        )
        return self._store(updated)

    def update_current_value(
        self, goal_id: UUID, current_value: float | str
    ) -> Goal | None:
        """Record new progress for a goal."""
        existing = self.get_goal(goal_id)
        if existing is None:
            return None
        value = parse_non_negative_number(current_value, "current_value")
        return self._store(existing.with_current_value(value))

    def delete_goal(self, goal_id: UUID) -> bool:
        """Remove a goal; return False when it does not exist."""
        goals = self.repository.load()
        remaining = [goal for goal in goals if goal.id != goal_id]
        if len(remaining) == len(goals):
            return False
        self.repository.save(remaining)
        return True

    def seed_defaults(self, today: date) -> list[Goal]:
        """Install the starter goals when no goals exist yet."""
        goals = self.repository.load()
        if goals:
            return goals
        goals = default_goals(today)
        self.repository.save(goals)
        return goals

    def _store(self, updated: Goal) -> Goal | None:
        goals = self.repository.load()
        for index, goal in enumerate(goals):
            if goal.id == updated.id:
                goals[index] = updated
                self.repository.save(goals)
                return updated
        return None
