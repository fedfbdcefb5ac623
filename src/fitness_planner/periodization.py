"""
Standard 4-week periodization cycles per fitness goal.

Week 4 of every cycle is a deload. Cycles repeat indefinitely, so any
integer week maps onto the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .enums import FitnessGoal, WorkoutType

CYCLE_LENGTH = 4


@dataclass(frozen=True)
class IntRange:
    min: int
    max: int

    def to_dict(self) -> dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class PeriodizationWeek:
    week_number: int
    type: WorkoutType
    intensity: float  # fraction of max effort
    sets: IntRange
    reps: IntRange
    rpe: IntRange

    def to_dict(self) -> dict[str, Any]:
        return {
            "week_number": self.week_number,
            "type": self.type.value,
            "intensity": self.intensity,
            "sets": self.sets.to_dict(),
            "reps": self.reps.to_dict(),
            "rpe": self.rpe.to_dict(),
        }


def _week(
    number: int,
    kind: WorkoutType,
    intensity: float,
    sets: tuple[int, int],
    reps: tuple[int, int],
    rpe: tuple[int, int],
) -> PeriodizationWeek:
    return PeriodizationWeek(
        number, kind, intensity, IntRange(*sets), IntRange(*reps), IntRange(*rpe)
    )


S, H, E, D = (
    WorkoutType.STRENGTH,
    WorkoutType.HYPERTROPHY,
    WorkoutType.ENDURANCE,
    WorkoutType.DELOAD,
)

PERIODIZATION_CYCLES: dict[FitnessGoal, tuple[PeriodizationWeek, ...]] = {
    FitnessGoal.STRENGTH: (
        _week(1, H, 0.75, (3, 4), (8, 12), (7, 8)),
        _week(2, S, 0.85, (4, 5), (4, 6), (8, 9)),
        _week(3, S, 0.9, (3, 4), (2, 4), (9, 10)),
        _week(4, D, 0.65, (2, 3), (6, 8), (5, 7)),
    ),
    FitnessGoal.MUSCLE_GAIN: (
        _week(1, H, 0.75, (3, 4), (8, 12), (7, 8)),
        _week(2, H, 0.8, (4, 5), (8, 12), (8, 9)),
        _week(3, S, 0.85, (3, 4), (6, 8), (8, 9)),
        _week(4, D, 0.65, (2, 3), (10, 15), (6, 7)),
    ),
    FitnessGoal.WEIGHT_LOSS: (
        _week(1, E, 0.65, (2, 3), (15, 20), (6, 7)),
        _week(2, H, 0.7, (3, 4), (10, 15), (7, 8)),
        _week(3, E, 0.7, (2, 3), (15, 20), (7, 8)),
        _week(4, D, 0.6, (2, 3), (10, 15), (5, 6)),
    ),
    FitnessGoal.ENDURANCE: (
        _week(1, E, 0.65, (2, 3), (15, 20), (6, 7)),
        _week(2, E, 0.7, (3, 4), (15, 20), (7, 8)),
        _week(3, H, 0.75, (3, 4), (8, 12), (7, 8)),
        _week(4, D, 0.6, (2, 3), (12, 15), (5, 6)),
    ),
    FitnessGoal.MAINTENANCE: (
        _week(1, H, 0.75, (3, 4), (8, 12), (7, 8)),
        _week(2, S, 0.8, (3, 4), (5, 8), (7, 8)),
        _week(3, E, 0.7, (2, 3), (12, 15), (6, 7)),
        _week(4, D, 0.65, (2, 3), (8, 12), (5, 6)),
    ),
}


def week_parameters(goal: FitnessGoal | str, week_in_cycle: int) -> PeriodizationWeek:
    """Parameters for the given week; zero and negative weeks wrap like any other."""
    index = (week_in_cycle - 1) % CYCLE_LENGTH
    return PERIODIZATION_CYCLES[FitnessGoal(goal)][index]


@dataclass(frozen=True)
class BlockWeek:
    week_number: int
    deload: bool


def periodization_block(weeks: int) -> list[BlockWeek]:
    """Weeks 1..n of a training block, flagging every fourth as a deload."""
    return [BlockWeek(i, i % CYCLE_LENGTH == 0) for i in range(1, weeks + 1)]


@dataclass(frozen=True)
class DeloadParameters:
    intensity_reduction: float
    volume_reduction: float
    focus_areas: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "intensity_reduction": self.intensity_reduction,
            "volume_reduction": self.volume_reduction,
            "focus_areas": list(self.focus_areas),
        }


def deload_parameters() -> DeloadParameters:
    return DeloadParameters(
        intensity_reduction=0.3,
        volume_reduction=0.4,
        focus_areas=("Mobility work", "Active recovery", "Technique refinement"),
    )
