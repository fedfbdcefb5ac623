import pytest

from fitness_planner.enums import ExperienceLevel
from fitness_planner.weights import (
    adjust_for_goal,
    age_factor,
    baseline_weight,
    round_weight,
    rpe_weight_table,
    set_weight,
)


def test_baseline_weight_intermediate_male() -> None:
    # 70 * 1.5 * 0.8 = 84 -> nearest 2.5
    assert baseline_weight(1.5, 70, "male", 30, "intermediate", "metric") == 85


def test_baseline_weight_imperial_rounds_to_five() -> None:
    # 150 * 0.8 * 0.6 = 72 -> nearest 5
    assert baseline_weight(1.0, 150, "female", 25, "beginner", "imperial") == 70


def test_age_factor() -> None:
    assert age_factor(18) == 1.0
    assert age_factor(30) == 1.0
    assert age_factor(16) == 0.8
    assert age_factor(40) == pytest.approx(0.95)
    # Clamped instead of going negative for implausible ages
    assert age_factor(250) == 0.5
    assert baseline_weight(1.0, 100, "male", 250, "advanced", "metric") == 50


def test_baseline_weight_monotonic_in_experience() -> None:
    for ratio in (0.3, 0.7, 1.0, 1.75, 2.0):
        for bodyweight in (50, 70, 95, 120):
            weights = [
                baseline_weight(ratio, bodyweight, "female", 45, level, "metric")
                for level in ExperienceLevel
            ]
            assert weights == sorted(weights)


def test_baseline_weight_rejects_unknown_experience() -> None:
    with pytest.raises(ValueError):
        baseline_weight(1.0, 70, "male", 30, "legendary", "metric")


def test_adjust_for_goal() -> None:
    assert adjust_for_goal(85, "strength") == pytest.approx(93.5)
    assert adjust_for_goal(100, "weight_loss") == pytest.approx(80)
    assert adjust_for_goal(100, "muscle_gain") == pytest.approx(90)
    assert adjust_for_goal(100, "endurance") == pytest.approx(70)
    assert adjust_for_goal(100, "maintenance") == 100


def test_set_weight_warmup_ramp() -> None:
    assert set_weight(100, 10, 4, True) == pytest.approx(50)
    assert set_weight(100, 7, 6, True) == pytest.approx(70)
    assert set_weight(100, 3, 8, True) == pytest.approx(90)


def test_set_weight_working_sets() -> None:
    assert set_weight(100, 10, 10, False) == pytest.approx(100)
    assert set_weight(100, 5, 10, False) == pytest.approx(110)
    # 1.14 rep factor, 0.94 RPE factor
    assert set_weight(100, 3, 8, False) == pytest.approx(107.16)
    assert set_weight(100, 20, 10, False) == pytest.approx(85)


def test_round_weight_half_up() -> None:
    assert round_weight(83.75, "metric") == 85
    assert round_weight(83.7, "metric") == 82.5
    assert round_weight(72.5, "imperial") == 75


def test_rpe_weight_table() -> None:
    table = rpe_weight_table(100, "metric")
    assert list(table) == [6, 7, 8, 9, 10]
    assert table[6] == 102.5
    assert table[10] == 110
    assert list(table.values()) == sorted(table.values())
