"""Derived metrics over snapshots of meals, goals and workouts.

Every function here is pure: the same input collection always yields the
same result and nothing is mutated.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.meals import Meal, MealType
from fitness_tracker.domain.workouts import RepBased, TimeBased, Workout


@dataclass(frozen=True)
class TimeWindow:
    """Half-open time range `[start, end)` used to scope meal totals."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("TimeWindow bounds must be timezone-aware")
        if self.end <= self.start:
            raise ValueError("TimeWindow end must be after start")

    @classmethod
    def for_day(cls, day: date, timezone_name: str = "UTC") -> "TimeWindow":
        """Return the window covering a calendar day in the given timezone."""
        tz = ZoneInfo(timezone_name)
        start = datetime.combine(day, time.min, tzinfo=tz)
        end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
        return cls(start=start, end=end)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


@dataclass(frozen=True)
class WorkoutTotals:
    """Aggregate volume of a workout's exercises."""

    exercise_count: int
    total_sets: int
    total_reps: int
    total_timed_seconds: int


@dataclass(frozen=True)
class CalorieSummary:
    """Numbers shown on the daily calorie view."""

    consumed: int
    goal: int
    remaining: int
    progress: float
    by_meal_type: dict[MealType, list[Meal]]


def _in_window(meals: Iterable[Meal], window: TimeWindow | None) -> list[Meal]:
    if window is None:
        return list(meals)
    return [meal for meal in meals if window.contains(meal.logged_at)]


def total_calories_consumed(
    meals: Iterable[Meal], window: TimeWindow | None = None
) -> int:
    """Sum calories across meals, optionally limited to a time window."""
    return sum(meal.calories for meal in _in_window(meals, window))


def calories_remaining(total: int, goal: int) -> int:
    """Calories left for the day; never negative."""
    return max(0, goal - total)


def calorie_progress(total: int, goal: int) -> float:
    """Share of the daily goal consumed, clamped to [0, 1]."""
    if goal <= 0:
        return 0.0
    return display_progress(total / goal)


def group_by_meal_type(meals: Iterable[Meal]) -> dict[MealType, list[Meal]]:
    """Partition meals into the four meal-type buckets, keeping input order."""
    buckets: dict[MealType, list[Meal]] = {meal_type: [] for meal_type in MealType}
    for meal in meals:
        buckets[meal.meal_type].append(meal)
    return buckets


def goal_progress(goal: Goal) -> float:
    """Raw progress ratio; values above 1.0 mean the goal was exceeded."""
    return goal.current_value / goal.target_value


def display_progress(ratio: float) -> float:
    """Clamp a progress ratio to [0, 1] for display."""
    return min(max(ratio, 0.0), 1.0)


def progress_percent(goal: Goal) -> int:
    """Whole-number percentage of display progress."""
    return int(display_progress(goal_progress(goal)) * 100)


def workout_calorie_estimate(workout: Workout) -> int:
    """Calories burned according to the catalog entry."""
    return workout.calories_burn


def workout_totals(workout: Workout) -> WorkoutTotals:
    """Count sets, reps and timed seconds across a workout's exercises."""
    total_sets = 0
    total_reps = 0
    total_timed_seconds = 0
    for exercise in workout.exercises:
        load = exercise.load
        total_sets += load.sets
        if isinstance(load, RepBased):
            total_reps += load.sets * load.reps
        elif isinstance(load, TimeBased):
            total_timed_seconds += load.sets * load.duration_seconds
    return WorkoutTotals(
        exercise_count=len(workout.exercises),
        total_sets=total_sets,
        total_reps=total_reps,
        total_timed_seconds=total_timed_seconds,
    )


def daily_summary(
    meals: Iterable[Meal], daily_goal: int, window: TimeWindow | None = None
) -> CalorieSummary:
    """Build the calorie summary for the meals inside `window`."""
    scoped = _in_window(meals, window)
    consumed = total_calories_consumed(scoped)
    return CalorieSummary(
        consumed=consumed,
        goal=daily_goal,
        remaining=calories_remaining(consumed, daily_goal),
        progress=calorie_progress(consumed, daily_goal),
        by_meal_type=group_by_meal_type(scoped),
    )
