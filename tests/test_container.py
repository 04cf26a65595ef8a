"""Tests for container wiring."""

import asyncio

from fitness_tracker.adapters.asyncio_scheduler import AsyncioScheduler
from fitness_tracker.adapters.in_memory import InMemoryMealRepository
from fitness_tracker.config import Settings
from fitness_tracker.containers import build_container


def test_build_container_without_supabase_uses_memory(settings: Settings) -> None:
    container = build_container(settings)

    assert not settings.uses_supabase
    assert isinstance(container.meal_log_service.repository, InMemoryMealRepository)
    assert isinstance(container.scheduler, AsyncioScheduler)
    assert len(container.goal_service.list_goals()) == 3
    assert container.user_settings_service.daily_calorie_goal == 2000
    asyncio.run(container.close_resources())


def test_build_container_respects_settings() -> None:
    settings = Settings(
        _env_file=None,
        supabase_url=None,
        default_daily_calorie_goal=1800,
        seed_default_goals=False,
        tick_interval_seconds=0.5,
    )

    container = build_container(settings)

    assert container.goal_service.list_goals() == []
    assert container.user_settings_service.daily_calorie_goal == 1800
    assert container.session_manager.tick_interval_seconds == 0.5
