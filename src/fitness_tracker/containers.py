"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import create_client

from fitness_tracker.adapters.asyncio_scheduler import AsyncioScheduler
from fitness_tracker.adapters.in_memory import (
    InMemoryGoalRepository,
    InMemoryMealRepository,
    InMemorySettingsStorage,
)
from fitness_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_settings_storage import (
    SupabaseSettingsStorage,
)
from fitness_tracker.config import Settings
from fitness_tracker.domain.catalog import BUILT_IN_WORKOUTS
from fitness_tracker.services.goals import GoalRepository, GoalService
from fitness_tracker.services.meals import MealLogService, MealRepository
from fitness_tracker.services.session_timer import Scheduler
from fitness_tracker.services.sessions import WorkoutSessionManager
from fitness_tracker.services.user_settings import (
    SettingsStorage,
    UserSettingsService,
)
from fitness_tracker.services.workouts import WorkoutCatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_log_service: MealLogService
    goal_service: GoalService
    user_settings_service: UserSettingsService
    workout_catalog_service: WorkoutCatalogService
    session_manager: WorkoutSessionManager
    scheduler: Scheduler
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    meal_repository: MealRepository
    goal_repository: GoalRepository
    settings_storage: SettingsStorage
    if resolved_settings.uses_supabase:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        meal_repository = SupabaseMealRepository(supabase_client)
        goal_repository = SupabaseGoalRepository(supabase_client)
        settings_storage = SupabaseSettingsStorage(supabase_client)
    else:
        meal_repository = InMemoryMealRepository()
        goal_repository = InMemoryGoalRepository()
        settings_storage = InMemorySettingsStorage()

    goal_service = GoalService(goal_repository)
    if resolved_settings.seed_default_goals:
        goal_service.seed_defaults(datetime.now(tz=UTC).date())
    user_settings_service = UserSettingsService.load(
        settings_storage,
        default_daily_calorie_goal=resolved_settings.default_daily_calorie_goal,
    )
    workout_catalog_service = WorkoutCatalogService(BUILT_IN_WORKOUTS)
    scheduler = AsyncioScheduler()
    session_manager = WorkoutSessionManager(
        catalog=workout_catalog_service,
        scheduler=scheduler,
        tick_interval_seconds=resolved_settings.tick_interval_seconds,
    )

    async def close_resources() -> None:
        session_manager.close_all()
        scheduler.close()

    return AppContainer(
        settings=resolved_settings,
        meal_log_service=MealLogService(meal_repository),
        goal_service=goal_service,
        user_settings_service=user_settings_service,
        workout_catalog_service=workout_catalog_service,
        session_manager=session_manager,
        scheduler=scheduler,
        close_resources=close_resources,
    )
