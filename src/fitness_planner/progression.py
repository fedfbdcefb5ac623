"""Progression logic for training loads."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import ExperienceLevel, MeasurementSystem

if TYPE_CHECKING:
    from .generator import WorkoutExercise

logger = logging.getLogger(__name__)

WEEKLY_RATES: dict[ExperienceLevel, float] = {
    ExperienceLevel.BEGINNER: 0.05,
    ExperienceLevel.INTERMEDIATE: 0.025,
    ExperienceLevel.ADVANCED: 0.0125,
    ExperienceLevel.EXPERT: 0.00625,
}

PER_WORKOUT_RATES: dict[ExperienceLevel, float] = {
    ExperienceLevel.BEGINNER: 0.025,
    ExperienceLevel.INTERMEDIATE: 0.015,
    ExperienceLevel.ADVANCED: 0.0075,
    ExperienceLevel.EXPERT: 0.005,
}


def _increment_for(current_weight: float, measurement_system: MeasurementSystem) -> float:
    if measurement_system is MeasurementSystem.METRIC:
        return 1.0 if current_weight < 20 else 2.5
    return 2.5 if current_weight < 45 else 5.0


def progression(
    current_weight: float,
    experience: ExperienceLevel | str,
    success_rate: float,
    rpe: float,
    measurement_system: MeasurementSystem | str,
) -> float:
    """Next week's load from the current one, last week's RPE and set success rate."""
    system = MeasurementSystem(measurement_system)
    rate = WEEKLY_RATES[ExperienceLevel(experience)]

    if rpe < 7:
        rate *= 1.2
    elif rpe > 8:
        rate *= 0.8

    if success_rate < 0.8:
        rate *= 0.75
    elif success_rate > 0.95:
        rate *= 1.2

    increment = _increment_for(current_weight, system)
    increase = math.floor(current_weight * rate / increment + 0.5) * increment
    logger.debug(
        "Progression: current=%s rate=%.5f increase=%s", current_weight, rate, increase
    )
    return current_weight + increase


def adjust_for_rpe_feedback(current_weight: float, rpe: float, target_rpe: float) -> float:
    """Nudge the load by 2.5% or 5% when reported RPE misses the target."""
    if rpe == target_rpe:
        return current_weight
    if rpe == target_rpe - 1:
        return current_weight * 1.025
    if rpe <= target_rpe - 2:
        return current_weight * 1.05
    if rpe == target_rpe + 1:
        return current_weight * 0.975
    if rpe >= target_rpe + 2:
        return current_weight * 0.95
    return current_weight


@dataclass(frozen=True)
class Readiness:
    progression_rate: float
    recommendation: str
    readiness: float  # 0-100

    def to_dict(self) -> dict[str, float | str]:
        return {
            "progression_rate": self.progression_rate,
            "recommendation": self.recommendation,
            "readiness": self.readiness,
        }


def exercise_readiness(
    history: Sequence["WorkoutExercise"], experience: ExperienceLevel | str
) -> Readiness:
    """
    Score how ready a lifter is to add load, from the last three sessions
    of one exercise.
    """
    if len(history) < 2:
        return Readiness(0.0, "Need more workout data to calculate progression", 0.0)

    total_sets = 0
    successful_sets = 0
    rpe_total = 0.0
    rpe_sets = 0
    for session in history[-3:]:
        for s in session.sets:
            if s.is_warmup or not s.completed:
                continue
            total_sets += 1
            if s.actual_reps and s.actual_reps >= s.reps:
                successful_sets += 1
            if s.actual_rpe:
                rpe_total += s.actual_rpe
                rpe_sets += 1

    success_rate = successful_sets / total_sets if total_sets else 0.0
    average_rpe = rpe_total / rpe_sets if rpe_sets else 7.0

    rate = PER_WORKOUT_RATES[ExperienceLevel(experience)]
    if success_rate < 0.7:
        rate *= 0.5
    elif success_rate > 0.9:
        rate *= 1.5

    if average_rpe < 7:
        rate *= 1.2
    elif average_rpe > 8:
        rate *= 0.8

    score = min(100.0, max(0.0, success_rate * 70 + (10 - average_rpe) * 3))

    if score > 80:
        recommendation = "Ready for progression. Increase weight for next workout."
    elif score > 60:
        recommendation = "Making progress. Continue with current weight."
    elif score > 40:
        recommendation = "Adapting to current load. Focus on form and technique."
    else:
        recommendation = "Struggling with current weight. Consider reducing weight slightly."

    return Readiness(rate, recommendation, score)
