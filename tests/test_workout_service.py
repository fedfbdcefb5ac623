"""Tests for set weighting, plan generation and plan rendering."""

import pytest

from fitness_planner.catalog import ExerciseCatalog, build_catalog
from fitness_planner.enums import WorkoutType
from fitness_planner.generator import (
    GeneratedWorkout,
    WorkoutExercise,
    WorkoutRequest,
    WorkoutSet,
    cooldown_block,
    warmup_block,
)
from fitness_planner.services.workout_service import (
    UserProfile,
    WorkoutService,
    apply_set_weights,
)

CATALOG = ExerciseCatalog(build_catalog())


def _profile(**overrides) -> UserProfile:
    values = {
        "bodyweight": 70,
        "gender": "male",
        "age": 30,
        "experience": "intermediate",
        "measurement_system": "metric",
        "goal": "maintenance",
    }
    values.update(overrides)
    return UserProfile(**values)


def _bench_workout(exercise_id: str = "barbell-bench-press") -> GeneratedWorkout:
    sets = [
        WorkoutSet(reps=15, rpe=4, is_warmup=True),
        WorkoutSet(reps=12, rpe=6, is_warmup=True),
        WorkoutSet(reps=10, rpe=8),
    ]
    return GeneratedWorkout(
        exercises=[WorkoutExercise(exercise_id, sets, 120)],
        workout_type=WorkoutType.HYPERTROPHY,
        warmup=warmup_block(1),
        cooldown=cooldown_block(),
        estimated_duration=20,
    )


def test_apply_set_weights():
    """Baseline 55 kg: warm-ups at half, working set scaled by RPE 8."""
    workout = _bench_workout()
    weighted = apply_set_weights(workout, CATALOG, _profile())

    weights = [s.weight for s in weighted.exercises[0].sets]
    assert weights == [27.5, 27.5, 52.5]
    # input is left untouched
    assert all(s.weight == 0 for s in workout.exercises[0].sets)


def test_apply_set_weights_imperial():
    weighted = apply_set_weights(
        _bench_workout(), CATALOG, _profile(bodyweight=154, measurement_system="imperial")
    )
    assert all(s.weight % 5 == 0 for s in weighted.exercises[0].sets)


def test_apply_set_weights_unknown_exercise():
    weighted = apply_set_weights(_bench_workout("not-an-exercise"), CATALOG, _profile())
    assert all(s.weight == 0 for s in weighted.exercises[0].sets)


def test_profile_rejects_unknown_values():
    with pytest.raises(ValueError):
        _profile(gender="robot")
    assert _profile().unit == "kg"
    assert _profile(measurement_system="imperial").unit == "lbs"


@pytest.mark.asyncio
async def test_generate_plan_is_reproducible():
    service = WorkoutService(catalog=CATALOG)
    request = WorkoutRequest(
        goal="strength",
        experience="intermediate",
        available_equipment=["barbell", "dumbbell", "bench", "cable", "machine"],
        time_available=60,
        week_in_cycle=3,
    )

    first = await service.generate_plan(request, _profile(), seed=7)
    second = await service.generate_plan(request, _profile(), seed=7)

    assert first.to_dict() == second.to_dict()
    assert first.exercises
    for item in first.exercises:
        exercise = CATALOG.get(item.exercise_id)
        for s in item.sets:
            if exercise.baseline_strength_ratio:
                assert s.weight > 0
            assert s.weight % 2.5 == 0


@pytest.mark.asyncio
async def test_service_keeps_an_empty_catalog():
    empty = ExerciseCatalog([])
    service = WorkoutService(catalog=empty)
    assert service.catalog is empty

    request = WorkoutRequest(
        goal="strength",
        experience="beginner",
        available_equipment=["bodyweight"],
        time_available=30,
    )
    workout = await service.generate_plan(request, _profile(), seed=1)
    assert workout.exercises == []


def test_render_plan_message():
    service = WorkoutService(catalog=CATALOG)
    weighted = apply_set_weights(_bench_workout(), CATALOG, _profile())

    result = service.render_plan_message(weighted, unit="kg")
    lines = result.splitlines()
    assert lines[0] == "Hypertrophy workout — ~20 min"
    assert "Dynamic Warm-up (5 min)" in result
    assert "• Barbell Bench Press: 1x10 @ 52.5 kg RPE8 (+2 warm-up), rest 120s" in lines
    assert lines[-1] == "Cooldown & Stretching (5 min)"
