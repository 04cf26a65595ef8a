"""Shared test fixtures."""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from fitness_tracker.adapters.in_memory import (
    InMemoryGoalRepository,
    InMemoryMealRepository,
    InMemorySettingsStorage,
)
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.catalog import BUILT_IN_WORKOUTS
from fitness_tracker.domain.meals import Meal, MealType
from fitness_tracker.domain.workouts import (
    Exercise,
    Workout,
    WorkoutCategory,
    WorkoutDifficulty,
)
from fitness_tracker.services.goals import GoalService
from fitness_tracker.services.meals import MealLogService
from fitness_tracker.services.session_timer import Scheduler
from fitness_tracker.services.sessions import WorkoutSessionManager
from fitness_tracker.services.user_settings import SettingsStorage, UserSettingsService
from fitness_tracker.services.workouts import WorkoutCatalogService


@dataclass
class ManualScheduler(Scheduler):
    """Scheduler whose ticks are fired explicitly by the test."""

    callbacks: dict[int, Callable[[], None]] = field(default_factory=dict)
    intervals: list[float] = field(default_factory=list)
    cancelled: list[int] = field(default_factory=list)
    next_handle: int = 0

    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> int:
        handle = self.next_handle
        self.next_handle += 1
        self.callbacks[handle] = callback
        self.intervals.append(interval_seconds)
        return handle

    def cancel(self, handle: int) -> None:
        self.callbacks.pop(handle, None)
        self.cancelled.append(handle)

    def advance(self, ticks: int = 1) -> int:
        """Fire every active schedule `ticks` times; return callbacks delivered."""
        delivered = 0
        for _ in range(ticks):
            for handle, callback in list(self.callbacks.items()):
                if handle in self.callbacks:
                    callback()
                    delivered += 1
        return delivered

    @property
    def active_count(self) -> int:
        return len(self.callbacks)


@dataclass
class FailingSettingsStorage(SettingsStorage):
    """Settings storage whose writes always fail."""

    stored: int | None = None
    attempts: int = 0

    def get_int(self, key: str) -> int | None:
        return self.stored

    def set_int(self, key: str, value: int) -> None:
        self.attempts += 1
        raise RuntimeError("disk full")


def make_meal(
    calories: int,
    meal_type: MealType = MealType.LUNCH,
    name: str = "Meal",
    logged_at: datetime | None = None,
) -> Meal:
    return Meal(
        name=name,
        calories=calories,
        meal_type=meal_type,
        logged_at=logged_at or datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
    )


def make_workout(duration_minutes: int = 2, calories_burn: int = 50) -> Workout:
    return Workout(
        name="Short circuit",
        description="Quick test workout",
        duration_minutes=duration_minutes,
        calories_burn=calories_burn,
        category=WorkoutCategory.OTHER,
        difficulty=WorkoutDifficulty.BEGINNER,
        exercises=(
            Exercise.from_counts("Squats", "Bodyweight", sets=2, reps=10),
            Exercise.from_counts("Plank", "Hold", sets=1, duration=30),
        ),
    )


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    # create_app() detaches the package logger from root, which hides records
    # from caplog in later tests.
    yield
    logger = logging.getLogger("fitness_tracker")
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, supabase_url=None, supabase_service_key=None)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def settings_storage() -> InMemorySettingsStorage:
    return InMemorySettingsStorage()


@pytest.fixture
def container(
    settings: Settings,
    scheduler: ManualScheduler,
    settings_storage: InMemorySettingsStorage,
) -> AppContainer:
    catalog = WorkoutCatalogService(BUILT_IN_WORKOUTS)
    session_manager = WorkoutSessionManager(catalog=catalog, scheduler=scheduler)

    async def close_resources() -> None:
        session_manager.close_all()

    return AppContainer(
        settings=settings,
        meal_log_service=MealLogService(InMemoryMealRepository()),
        goal_service=GoalService(InMemoryGoalRepository()),
        user_settings_service=UserSettingsService.load(settings_storage),
        workout_catalog_service=catalog,
        session_manager=session_manager,
        scheduler=scheduler,
        close_resources=close_resources,
    )
