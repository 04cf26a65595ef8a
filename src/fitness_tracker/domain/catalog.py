"""Built-in workout catalog and starter goals."""

from datetime import date, timedelta
from uuid import NAMESPACE_URL, uuid5

from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.workouts import (
    Exercise,
    Workout,
    WorkoutCategory,
    WorkoutDifficulty,
)

_NAMESPACE = uuid5(NAMESPACE_URL, "fitness-tracker/workouts")


def _workout(  # noqa: PLR0913
    name: str,
    description: str,
    duration_minutes: int,
    calories_burn: int,
    category: WorkoutCategory,
    difficulty: WorkoutDifficulty,
    exercises: list[Exercise],
) -> Workout:
    # Stable ids keep catalog references valid across restarts.
    return Workout(
        id=uuid5(_NAMESPACE, name),
        name=name,
        description=description,
        duration_minutes=duration_minutes,
        calories_burn=calories_burn,
        category=category,
        difficulty=difficulty,
        exercises=tuple(exercises),
    )


_ex = Exercise.from_counts

BUILT_IN_WORKOUTS: tuple[Workout, ...] = (
    _workout(
        "Interval running",
        "Alternate fast and slow running for maximum calorie burn",
        30,
        300,
        WorkoutCategory.CARDIO,
        WorkoutDifficulty.INTERMEDIATE,
        [
            _ex("Warm-up", "Easy jog", duration=300),
            _ex("Sprint", "Top speed", sets=8, duration=30),
            _ex("Slow run", "Recovery", sets=8, duration=60),
            _ex("Cool-down", "Easy jog", duration=300),
        ],
    ),
    _workout(
        "Upper body strength",
        "Compound session for upper body strength",
        45,
        250,
        WorkoutCategory.STRENGTH,
        WorkoutDifficulty.ADVANCED,
        [
            _ex("Push-ups", "Classic push-ups", sets=4, reps=12),
            _ex("Pull-ups", "Wide grip pull-ups", sets=4, reps=8),
            _ex("Dips", "Parallel bar dips", sets=3, reps=10),
        ],
    ),
    _workout(
        "Morning yoga",
        "Gentle flow for an energetic start to the day",
        20,
        120,
        WorkoutCategory.YOGA,
        WorkoutDifficulty.BEGINNER,
        [
            _ex("Downward dog", "Downward facing dog", duration=60),
            _ex("Warrior pose", "Warrior I", sets=2, duration=45),
            _ex("Cat pose", "Back stretch", duration=60),
        ],
    ),
    _workout(
        "Explosive HIIT",
        "High intensity intervals for fast results",
        25,
        400,
        WorkoutCategory.HIIT,
        WorkoutDifficulty.ADVANCED,
        [
            _ex("Burpees", "Maximum intensity", sets=5, reps=10),
            _ex("Jumping jacks", "Jumps with legs apart", sets=5, reps=20),
            _ex("Plank", "With shoulder taps", sets=5, reps=15),
        ],
    ),
    _workout(
        "Full body stretch",
        "Complete stretching routine to improve flexibility",
        35,
        150,
        WorkoutCategory.FLEXIBILITY,
        WorkoutDifficulty.BEGINNER,
        [
            _ex("Forward fold", "Reach for straight legs", sets=3, duration=45),
            _ex("Butterfly", "Inner thigh stretch", duration=60),
            _ex("Bridge", "Back bend", sets=3, duration=30),
        ],
    ),
    _workout(
        "Pilates core",
        "Strengthen the core and improve posture",
        40,
        200,
        WorkoutCategory.PILATES,
        WorkoutDifficulty.INTERMEDIATE,
        [
            _ex("The hundred", "Classic pilates move", duration=120),
            _ex("Crunches", "Torso lifts", sets=3, reps=15),
            _ex("Plank", "Hold", sets=3, duration=60),
        ],
    ),
    _workout(
        "Cardio mix",
        "Varied cardio session",
        35,
        280,
        WorkoutCategory.CARDIO,
        WorkoutDifficulty.INTERMEDIATE,
        [
            _ex("Jumping jacks", "Jumps with arms and legs apart", sets=4, reps=25),
            _ex("Jump rope", "Skipping", duration=180),
            _ex("Step-ups", "Step onto a platform", sets=3, reps=20),
        ],
    ),
    _workout(
        "Leg day",
        "Powerful lower body session",
        50,
        350,
        WorkoutCategory.STRENGTH,
        WorkoutDifficulty.INTERMEDIATE,
        [
            _ex("Squats", "Classic squats", sets=4, reps=15),
            _ex("Lunges", "Forward lunges", sets=3, reps=12),
            _ex("Calf raises", "For the calves", sets=4, reps=20),
        ],
    ),
    _workout(
        "Evening yoga",
        "Relaxing flow to end the day",
        25,
        100,
        WorkoutCategory.YOGA,
        WorkoutDifficulty.BEGINNER,
        [
            _ex("Child's pose", "Relax the back", duration=120),
            _ex("Supine twist", "For the spine", sets=2, duration=60),
            _ex("Savasana", "Full relaxation", duration=300),
        ],
    ),
    _workout(
        "Tabata",
        "Classic tabata session",
        20,
        250,
        WorkoutCategory.HIIT,
        WorkoutDifficulty.ADVANCED,
        [
            _ex("Jump squats", "20 s work, 10 s rest", sets=8, reps=8),
            _ex("Mountain climbers", "20 s work, 10 s rest", sets=8, reps=8),
            _ex("Push-ups", "20 s work, 10 s rest", sets=8, reps=8),
        ],
    ),
)


def default_goals(today: date) -> list[Goal]:
    """Return the starter goals, all due the day after `today`."""
    deadline = today + timedelta(days=1)
    return [
        Goal(
            name="Daily calories", target_value=2000, current_value=0, deadline=deadline
        ),
        Goal(name="Water", target_value=2000, current_value=500, deadline=deadline),
        Goal(name="Steps", target_value=10000, current_value=2500, deadline=deadline),
    ]
