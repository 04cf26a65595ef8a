"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from fitness_tracker.api.schemas import (
    CalorieGoalUpdate,
    GoalProgress,
    GoalWrite,
    MealCreate,
    SessionOpen,
)
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import StateError, ValidationError
from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.meals import Meal
from fitness_tracker.domain.workouts import RepBased, Workout, WorkoutCategory
from fitness_tracker.services.metrics import (
    CalorieSummary,
    TimeWindow,
    goal_progress,
    progress_percent,
    workout_totals,
)
from fitness_tracker.services.session_timer import WorkoutSessionTimer
from fitness_tracker.services.sessions import WorkoutSessionManager
from fitness_tracker.services.workouts import describe_exercise


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "validation_error",
                "field": exc.field,
                "detail": exc.message,
            },
        )

    @app.exception_handler(StateError)
    async def state_error_handler(request: Request, exc: StateError) -> JSONResponse:
        logger.warning("Rejected session transition: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "state_error", "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/meals")
    async def list_meals(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_log_service.list_meals()
        return {"meals": [_meal_payload(meal) for meal in meals]}

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def create_meal(body: MealCreate, request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_log_service.log_meal(
            name=body.name,
            calories=body.calories,
            meal_type=body.meal_type,
            logged_at=body.logged_at,
        )
        return _meal_payload(meal)

    @app.delete("/meals/{meal_id}")
    async def delete_meal(meal_id: UUID, request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        if not state_container.meal_log_service.delete_meal(meal_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "deleted"}

    @app.get("/summary")
    async def calorie_summary(
        request: Request, day: date | None = None, timezone: str = "UTC"
    ) -> dict[str, object]:
        """Return calorie totals for a day, or for the whole log without `day`."""
        state_container: AppContainer = request.app.state.container
        if not _is_valid_timezone(timezone):
            raise ValidationError("timezone", "must be an IANA timezone name")
        window = TimeWindow.for_day(day, timezone) if day else None
        summary = state_container.meal_log_service.summary(
            state_container.user_settings_service.daily_calorie_goal, window
        )
        return _summary_payload(summary)

    @app.get("/goals")
    async def list_goals(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        goals = state_container.goal_service.list_goals()
        return {"goals": [_goal_payload(goal) for goal in goals]}

    @app.post("/goals", status_code=status.HTTP_201_CREATED)
    async def create_goal(body: GoalWrite, request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        goal = state_container.goal_service.add_goal(
            name=body.name,
            target_value=body.target_value,
            current_value=body.current_value,
            deadline=body.deadline,
        )
        return _goal_payload(goal)

    @app.put("/goals/{goal_id}")
    async def update_goal(
        goal_id: UUID, body: GoalWrite, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        goal = state_container.goal_service.update_goal(
            goal_id,
            name=body.name,
            target_value=body.target_value,
            current_value=body.current_value,
            deadline=body.deadline,
        )
        if goal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _goal_payload(goal)

    @app.patch("/goals/{goal_id}/progress")
    async def update_goal_progress(
        goal_id: UUID, body: GoalProgress, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        goal = state_container.goal_service.update_current_value(
            goal_id, body.current_value
        )
        if goal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _goal_payload(goal)

    @app.delete("/goals/{goal_id}")
    async def delete_goal(goal_id: UUID, request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        if not state_container.goal_service.delete_goal(goal_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "deleted"}

    @app.get("/settings")
    async def get_settings(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        return {
            "daily_calorie_goal": (
                state_container.user_settings_service.daily_calorie_goal
            )
        }

    @app.put("/settings")
    async def update_settings(
        body: CalorieGoalUpdate, request: Request
    ) -> dict[str, object]:
        """Update the daily calorie goal; write failures come back as a warning."""
        state_container: AppContainer = request.app.state.container
        update = state_container.user_settings_service.set_daily_calorie_goal(
            body.daily_calorie_goal
        )
        return {
            "daily_calorie_goal": update.settings.daily_calorie_goal,
            "persisted": update.persisted,
            "warning": str(update.warning) if update.warning else None,
        }

    @app.get("/workouts")
    async def list_workouts(
        request: Request,
        category: WorkoutCategory | None = None,
        search: str | None = None,
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        workouts = state_container.workout_catalog_service.list_workouts(
            category=category, search=search
        )
        return {"workouts": [_workout_summary(workout) for workout in workouts]}

    @app.get("/workouts/{workout_id}")
    async def workout_detail(workout_id: UUID, request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        workout = state_container.workout_catalog_service.get_workout(workout_id)
        if workout is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _workout_detail(workout)

    @app.post("/sessions/{context_id}", status_code=status.HTTP_201_CREATED)
    async def open_session(
        context_id: str, body: SessionOpen, request: Request
    ) -> dict[str, object]:
        """Open a fresh idle session, replacing the context's previous one."""
        manager = _session_manager(request)
        try:
            timer = manager.open_session(context_id, body.workout_id)
        except LookupError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
        return _session_payload(manager, context_id, timer)

    @app.get("/sessions/{context_id}")
    async def get_session(context_id: str, request: Request) -> dict[str, object]:
        manager = _session_manager(request)
        timer = _require_session(manager, context_id)
        return _session_payload(manager, context_id, timer)

    @app.post("/sessions/{context_id}/start")
    async def start_session(context_id: str, request: Request) -> dict[str, object]:
        manager = _session_manager(request)
        timer = _require_session(manager, context_id)
        timer.start()
        return _session_payload(manager, context_id, timer)

    @app.post("/sessions/{context_id}/pause")
    async def pause_session(context_id: str, request: Request) -> dict[str, object]:
        manager = _session_manager(request)
        timer = _require_session(manager, context_id)
        timer.pause()
        return _session_payload(manager, context_id, timer)

    @app.delete("/sessions/{context_id}")
    async def close_session(context_id: str, request: Request) -> dict[str, str]:
        """Tear down the context's session so no further ticks occur."""
        manager = _session_manager(request)
        if not manager.close_session(context_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "closed"}

    return app


def _session_manager(request: Request) -> WorkoutSessionManager:
    state_container: AppContainer = request.app.state.container
    return state_container.session_manager


def _require_session(
    manager: WorkoutSessionManager, context_id: str
) -> WorkoutSessionTimer:
    timer = manager.get_session(context_id)
    if timer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return timer


def _meal_payload(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "calories": meal.calories,
        "meal_type": meal.meal_type.value,
        "logged_at": meal.logged_at.isoformat(),
    }


def _goal_payload(goal: Goal) -> dict[str, object]:
    return {
        "id": str(goal.id),
        "name": goal.name,
        "target_value": goal.target_value,
        "current_value": goal.current_value,
        "deadline": goal.deadline.isoformat(),
        "progress": goal_progress(goal),
        "percent": progress_percent(goal),
    }


def _summary_payload(summary: CalorieSummary) -> dict[str, object]:
    return {
        "consumed": summary.consumed,
        "goal": summary.goal,
        "remaining": summary.remaining,
        "progress": summary.progress,
        "meals": {
            meal_type.value: [_meal_payload(meal) for meal in meals]
            for meal_type, meals in summary.by_meal_type.items()
        },
    }


def _workout_summary(workout: Workout) -> dict[str, object]:
    return {
        "id": str(workout.id),
        "name": workout.name,
        "description": workout.description,
        "duration_minutes": workout.duration_minutes,
        "calories_burn": workout.calories_burn,
        "category": workout.category.value,
        "difficulty": workout.difficulty.value,
    }


def _workout_detail(workout: Workout) -> dict[str, object]:
    totals = workout_totals(workout)
    exercises = []
    for exercise in workout.exercises:
        load = exercise.load
        entry: dict[str, object] = {
            "name": exercise.name,
            "description": exercise.description,
            "sets": load.sets,
            "label": describe_exercise(exercise),
        }
        if isinstance(load, RepBased):
            entry["kind"] = "reps"
            entry["reps"] = load.reps
        else:
            entry["kind"] = "time"
            entry["duration_seconds"] = load.duration_seconds
        exercises.append(entry)
    return {
        **_workout_summary(workout),
        "exercises": exercises,
        "totals": {
            "exercise_count": totals.exercise_count,
            "total_sets": totals.total_sets,
            "total_reps": totals.total_reps,
            "total_timed_seconds": totals.total_timed_seconds,
        },
    }


def _session_payload(
    manager: WorkoutSessionManager, context_id: str, timer: WorkoutSessionTimer
) -> dict[str, object]:
    completion = manager.last_completion(context_id)
    return {
        "context_id": context_id,
        "workout_id": str(timer.workout.id),
        "workout_name": timer.workout.name,
        "state": timer.state.value,
        "remaining_seconds": timer.remaining_seconds,
        "clock": timer.clock,
        "completion": (
            {"calories_burned": completion.calories_burned}
            if completion is not None
            else None
        ),
    }


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except Exception:
        return False
    return True
