"""Request bodies accepted by the HTTP API.

Numeric fields accept text as typed into a form; the services parse and
validate them so errors name the offending field.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel


class MealCreate(BaseModel):
    """New meal log entry."""

    name: str
    calories: int | str
    meal_type: str
    logged_at: datetime | None = None


class GoalWrite(BaseModel):
    """Fields of a new or edited goal."""

    name: str
    target_value: float | str
    current_value: float | str = 0
    deadline: date | str


class GoalProgress(BaseModel):
    current_value: float | str


class CalorieGoalUpdate(BaseModel):
    daily_calorie_goal: int | str


class SessionOpen(BaseModel):
    workout_id: UUID
