"""
Recommended load calculation.

Baseline loads come from bodyweight times an exercise's strength ratio,
scaled by gender, age and experience, then rounded to plate increments
(2.5 kg or 5 lbs).
"""

from __future__ import annotations

import math

from .enums import ExperienceLevel, FitnessGoal, Gender, MeasurementSystem
from .progression import progression

__all__ = [
    "adjust_for_goal",
    "baseline_weight",
    "progression",
    "round_to_increment",
    "round_weight",
    "rpe_weight_table",
    "set_weight",
]

EXPERIENCE_FACTORS: dict[ExperienceLevel, float] = {
    ExperienceLevel.BEGINNER: 0.6,
    ExperienceLevel.INTERMEDIATE: 0.8,
    ExperienceLevel.ADVANCED: 1.0,
    ExperienceLevel.EXPERT: 1.2,
}

GOAL_FACTORS: dict[FitnessGoal, float] = {
    FitnessGoal.WEIGHT_LOSS: 0.8,
    FitnessGoal.MUSCLE_GAIN: 0.9,
    FitnessGoal.STRENGTH: 1.1,
    FitnessGoal.ENDURANCE: 0.7,
    FitnessGoal.MAINTENANCE: 1.0,
}

MIN_AGE_FACTOR = 0.5

PLATE_INCREMENTS: dict[MeasurementSystem, float] = {
    MeasurementSystem.METRIC: 2.5,
    MeasurementSystem.IMPERIAL: 5.0,
}


def round_to_increment(value: float, increment: float) -> float:
    """Round half up to the nearest multiple of increment."""
    return math.floor(value / increment + 0.5) * increment


def round_weight(weight: float, measurement_system: MeasurementSystem | str) -> float:
    return round_to_increment(weight, PLATE_INCREMENTS[MeasurementSystem(measurement_system)])


def gender_factor(gender: Gender | str) -> float:
    return 1.0 if Gender(gender) is Gender.MALE else 0.8


def age_factor(age: float) -> float:
    """1.0 from 18 to 30, minus 0.5% per year after 30, 0.8 under 18."""
    if age > 30:
        return max(MIN_AGE_FACTOR, 1.0 - (age - 30) * 0.005)
    if age < 18:
        return 0.8
    return 1.0


def baseline_weight(
    exercise_ratio: float,
    bodyweight: float,
    gender: Gender | str,
    age: float,
    experience: ExperienceLevel | str,
    measurement_system: MeasurementSystem | str,
) -> float:
    weight = bodyweight * exercise_ratio
    weight *= gender_factor(gender)
    weight *= age_factor(age)
    weight *= EXPERIENCE_FACTORS[ExperienceLevel(experience)]
    return round_weight(weight, measurement_system)


def adjust_for_goal(base_weight: float, goal: FitnessGoal | str) -> float:
    return base_weight * GOAL_FACTORS[FitnessGoal(goal)]


def set_weight(base_weight: float, target_reps: int, target_rpe: float, is_warmup: bool) -> float:
    """
    Load for a single set.

    Warm-up sets ramp by rep count (50%, 70%, 90% of base). Working sets scale
    up for low reps, down for 15+ reps, and by target RPE.
    """
    if is_warmup:
        if target_reps > 8:
            return base_weight * 0.5
        if target_reps > 5:
            return base_weight * 0.7
        return base_weight * 0.9

    rep_factor = 1.0
    if target_reps <= 5:
        rep_factor = 1.1 + 0.02 * (5 - target_reps)
    elif target_reps >= 15:
        rep_factor = 0.9 - 0.01 * (target_reps - 15)

    rpe_factor = 0.7 + target_rpe * 0.03
    return base_weight * rep_factor * rpe_factor


def rpe_weight_table(
    adjusted_weight: float, measurement_system: MeasurementSystem | str
) -> dict[int, float]:
    """Suggested loads for RPE 6 through 10, rounded to plate increments."""
    return {
        rpe: round_weight(adjusted_weight * (0.9 + rpe * 0.02), measurement_system)
        for rpe in range(6, 11)
    }
