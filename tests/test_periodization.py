import pytest

from fitness_planner.enums import FitnessGoal, WorkoutType
from fitness_planner.periodization import deload_parameters, periodization_block, week_parameters


@pytest.mark.parametrize("goal", list(FitnessGoal))
def test_cycle_repeats_every_four_weeks(goal: FitnessGoal) -> None:
    for week in range(1, 13):
        assert week_parameters(goal, week) == week_parameters(goal, week + 4)


@pytest.mark.parametrize("goal", list(FitnessGoal))
def test_fourth_week_is_deload(goal: FitnessGoal) -> None:
    for week in (4, 8, 12, 40):
        params = week_parameters(goal, week)
        assert params.type is WorkoutType.DELOAD
        assert params.week_number == 4


def test_non_positive_weeks_wrap() -> None:
    assert week_parameters("strength", 0).week_number == 4
    assert week_parameters("strength", -3).week_number == 1
    assert week_parameters("strength", -1).week_number == 3


def test_strength_cycle_values() -> None:
    week = week_parameters("strength", 3)
    assert week.type is WorkoutType.STRENGTH
    assert week.intensity == 0.9
    assert (week.sets.min, week.sets.max) == (3, 4)
    assert (week.reps.min, week.reps.max) == (2, 4)
    assert (week.rpe.min, week.rpe.max) == (9, 10)


def test_unknown_goal_rejected() -> None:
    with pytest.raises(ValueError):
        week_parameters("bulking", 1)


def test_periodization_block() -> None:
    block = periodization_block(8)
    assert [w.week_number for w in block] == list(range(1, 9))
    assert [w.week_number for w in block if w.deload] == [4, 8]
    assert periodization_block(0) == []


def test_deload_parameters() -> None:
    params = deload_parameters()
    assert params.intensity_reduction == 0.3
    assert params.volume_reduction == 0.4
    assert "Active recovery" in params.focus_areas
