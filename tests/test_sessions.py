"""Tests for the session registry."""

from uuid import uuid4

import pytest

from fitness_tracker.domain.catalog import BUILT_IN_WORKOUTS
from fitness_tracker.services.session_timer import SessionState
from fitness_tracker.services.sessions import WorkoutSessionManager
from fitness_tracker.services.workouts import WorkoutCatalogService
from tests.conftest import ManualScheduler


@pytest.fixture
def manager(scheduler: ManualScheduler) -> WorkoutSessionManager:
    return WorkoutSessionManager(
        catalog=WorkoutCatalogService(BUILT_IN_WORKOUTS), scheduler=scheduler
    )


def test_open_session_creates_idle_timer(manager: WorkoutSessionManager) -> None:
    workout = BUILT_IN_WORKOUTS[0]

    timer = manager.open_session("detail-1", workout.id)

    assert timer.state is SessionState.IDLE
    assert timer.remaining_seconds == workout.duration_minutes * 60
    assert manager.get_session("detail-1") is timer


def test_open_session_unknown_workout(manager: WorkoutSessionManager) -> None:
    with pytest.raises(LookupError):
        manager.open_session("detail-1", uuid4())


def test_reopening_a_context_closes_previous_timer(
    manager: WorkoutSessionManager, scheduler: ManualScheduler
) -> None:
    first = manager.open_session("detail-1", BUILT_IN_WORKOUTS[0].id)
    first.start()

    second = manager.open_session("detail-1", BUILT_IN_WORKOUTS[1].id)

    assert first.state is SessionState.CANCELLED
    assert second.state is SessionState.IDLE
    assert scheduler.active_count == 0


def test_contexts_do_not_interfere(
    manager: WorkoutSessionManager, scheduler: ManualScheduler
) -> None:
    first = manager.open_session("a", BUILT_IN_WORKOUTS[0].id)
    second = manager.open_session("b", BUILT_IN_WORKOUTS[2].id)
    first.start()
    second.start()
    scheduler.advance(10)

    manager.close_session("a")
    scheduler.advance(5)

    assert first.state is SessionState.CANCELLED
    assert first.remaining_seconds == first.workout.duration_seconds - 10
    assert second.remaining_seconds == second.workout.duration_seconds - 15


def test_completion_is_recorded_per_context(
    manager: WorkoutSessionManager, scheduler: ManualScheduler
) -> None:
    workout = BUILT_IN_WORKOUTS[2]
    timer = manager.open_session("detail-1", workout.id)
    timer.start()

    scheduler.advance(workout.duration_seconds)

    completion = manager.last_completion("detail-1")
    assert completion is not None
    assert completion.workout_id == workout.id
    assert completion.calories_burned == workout.calories_burn


def test_close_all_stops_every_tick(
    manager: WorkoutSessionManager, scheduler: ManualScheduler
) -> None:
    for context_id, workout in zip("xyz", BUILT_IN_WORKOUTS, strict=False):
        manager.open_session(context_id, workout.id).start()

    manager.close_all()

    assert manager.active_contexts == []
    assert scheduler.active_count == 0
    assert scheduler.advance(3) == 0


def test_close_unknown_context(manager: WorkoutSessionManager) -> None:
    assert manager.close_session("missing") is False
