"""
Workout generation: pick a training phase, select exercises for the session
and assign sets, reps, rest and RPE.

Every random draw goes through the ``rng`` argument, so a seeded
``random.Random`` reproduces a workout exactly.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from .catalog import Exercise
from .enums import (
    Difficulty,
    EquipmentType,
    ExperienceLevel,
    FitnessGoal,
    MuscleGroup,
    WorkoutType,
)
from .periodization import CYCLE_LENGTH, IntRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkoutTypeDefinition:
    sets: IntRange
    reps: IntRange
    rest: IntRange  # seconds
    rpe: IntRange


WORKOUT_TYPE_DEFINITIONS: dict[WorkoutType, WorkoutTypeDefinition] = {
    WorkoutType.STRENGTH: WorkoutTypeDefinition(
        IntRange(3, 5), IntRange(3, 6), IntRange(180, 300), IntRange(8, 10)
    ),
    WorkoutType.HYPERTROPHY: WorkoutTypeDefinition(
        IntRange(3, 4), IntRange(8, 12), IntRange(60, 120), IntRange(7, 9)
    ),
    WorkoutType.ENDURANCE: WorkoutTypeDefinition(
        IntRange(2, 3), IntRange(15, 20), IntRange(30, 60), IntRange(6, 8)
    ),
    WorkoutType.DELOAD: WorkoutTypeDefinition(
        IntRange(2, 3), IntRange(8, 12), IntRange(60, 120), IntRange(5, 7)
    ),
}

# Top three phases per goal, rotated through on non-deload weeks
GOAL_PHASE_PRIORITY: dict[FitnessGoal, tuple[WorkoutType, WorkoutType, WorkoutType]] = {
    FitnessGoal.STRENGTH: (WorkoutType.STRENGTH, WorkoutType.HYPERTROPHY, WorkoutType.ENDURANCE),
    FitnessGoal.MUSCLE_GAIN: (
        WorkoutType.HYPERTROPHY,
        WorkoutType.STRENGTH,
        WorkoutType.ENDURANCE,
    ),
    FitnessGoal.WEIGHT_LOSS: (
        WorkoutType.ENDURANCE,
        WorkoutType.HYPERTROPHY,
        WorkoutType.STRENGTH,
    ),
    FitnessGoal.ENDURANCE: (WorkoutType.ENDURANCE, WorkoutType.HYPERTROPHY, WorkoutType.STRENGTH),
    FitnessGoal.MAINTENANCE: (
        WorkoutType.HYPERTROPHY,
        WorkoutType.STRENGTH,
        WorkoutType.ENDURANCE,
    ),
}

DEFAULT_MUSCLE_GROUPS: tuple[MuscleGroup, ...] = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.BICEPS,
    MuscleGroup.TRICEPS,
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
    MuscleGroup.ABS,
)

EXPERIENCE_EXERCISE_CAPS: dict[ExperienceLevel, int] = {
    ExperienceLevel.BEGINNER: 5,
    ExperienceLevel.INTERMEDIATE: 7,
    ExperienceLevel.ADVANCED: 9,
    ExperienceLevel.EXPERT: 9,
}

MIN_EXERCISES = 3
WARMUP_MINUTES = 5
COOLDOWN_MINUTES = 5
SET_EXECUTION_SECONDS = 30

# Primary muscles that always get warm-up sets
_WARMUP_MUSCLES = frozenset({MuscleGroup.BACK, MuscleGroup.CHEST, MuscleGroup.QUADS})

WARMUP_INSTRUCTIONS = (
    "5 minutes light cardio (jogging, jumping jacks, or stationary bike)",
    "Arm circles forward and backward (10 each direction)",
    "Bodyweight squats (15 reps)",
    "Walking lunges (10 per leg)",
    "Push-ups (10 reps)",
    "Light stretching for major muscle groups (30 seconds each)",
)

COOLDOWN_INSTRUCTIONS = (
    "2 minutes very light cardio to gradually reduce heart rate",
    "Static stretching for all major muscle groups (30-45 seconds each)",
    "Focus on muscles worked during the session",
    "Deep breathing to promote recovery and relaxation",
)


@dataclass
class WorkoutSet:
    reps: int
    weight: float = 0.0
    rpe: int | None = None
    is_warmup: bool = False
    completed: bool = False
    actual_reps: int | None = None
    actual_rpe: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reps": self.reps,
            "weight": self.weight,
            "rpe": self.rpe,
            "is_warmup": self.is_warmup,
            "completed": self.completed,
            "actual_reps": self.actual_reps,
            "actual_rpe": self.actual_rpe,
        }


@dataclass
class WorkoutExercise:
    exercise_id: str
    sets: list[WorkoutSet]
    rest_between_sets: int  # seconds
    notes: str = ""

    @property
    def working_sets(self) -> list[WorkoutSet]:
        return [s for s in self.sets if not s.is_warmup]

    def to_dict(self) -> dict[str, Any]:
        return {
            "exercise_id": self.exercise_id,
            "sets": [s.to_dict() for s in self.sets],
            "rest_between_sets": self.rest_between_sets,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class ProtocolBlock:
    name: str
    duration: int  # minutes
    instructions: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "instructions": list(self.instructions),
        }


@dataclass
class WorkoutRequest:
    goal: FitnessGoal
    experience: ExperienceLevel
    available_equipment: list[EquipmentType]
    time_available: int  # minutes
    week_in_cycle: int = 1
    muscle_group_preferences: list[MuscleGroup] = field(default_factory=list)
    excluded_exercises: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.goal = FitnessGoal(self.goal)
        self.experience = ExperienceLevel(self.experience)
        self.available_equipment = [EquipmentType(e) for e in self.available_equipment]
        self.muscle_group_preferences = [MuscleGroup(m) for m in self.muscle_group_preferences]


@dataclass
class GeneratedWorkout:
    exercises: list[WorkoutExercise]
    workout_type: WorkoutType
    warmup: ProtocolBlock
    cooldown: ProtocolBlock
    estimated_duration: int  # minutes

    def to_dict(self) -> dict[str, Any]:
        return {
            "exercises": [e.to_dict() for e in self.exercises],
            "workout_type": self.workout_type.value,
            "warmup": self.warmup.to_dict(),
            "cooldown": self.cooldown.to_dict(),
            "estimated_duration": self.estimated_duration,
        }


def phase_for_week(goal: FitnessGoal | str, week_in_cycle: int) -> WorkoutType:
    """Deload every fourth week, otherwise rotate through the goal's top three phases."""
    if week_in_cycle % CYCLE_LENGTH == 0:
        return WorkoutType.DELOAD
    return GOAL_PHASE_PRIORITY[FitnessGoal(goal)][week_in_cycle % 3]


def exercise_count(
    time_available: float, workout_type: WorkoutType, experience: ExperienceLevel | str
) -> int:
    """How many exercises fit in the session, capped by experience, at least three."""
    definition = WORKOUT_TYPE_DEFINITIONS[WorkoutType(workout_type)]
    set_seconds = definition.rest.min + SET_EXECUTION_SECONDS
    exercise_seconds = (time_available - WARMUP_MINUTES - COOLDOWN_MINUTES) * 60
    avg_sets = (definition.sets.min + definition.sets.max) / 2
    count = math.floor(exercise_seconds / (avg_sets * set_seconds))
    count = min(count, EXPERIENCE_EXERCISE_CAPS[ExperienceLevel(experience)])
    return max(MIN_EXERCISES, count)


def _allowed_for(experience: ExperienceLevel, difficulty: Difficulty) -> bool:
    if experience is ExperienceLevel.BEGINNER:
        return difficulty is Difficulty.BEGINNER
    if experience is ExperienceLevel.INTERMEDIATE:
        return difficulty is not Difficulty.ADVANCED
    return True


def filter_candidates(
    catalog: Iterable[Exercise],
    available_equipment: Iterable[EquipmentType],
    experience: ExperienceLevel,
    excluded: Iterable[str] = (),
) -> list[Exercise]:
    equipment = set(available_equipment)
    excluded_ids = set(excluded)
    return [
        ex
        for ex in catalog
        if equipment.intersection(ex.equipment)
        and ex.id not in excluded_ids
        and _allowed_for(experience, ex.difficulty)
    ]


def select_exercises(
    catalog: Iterable[Exercise],
    available_equipment: Iterable[EquipmentType],
    target_muscles: Sequence[MuscleGroup],
    experience: ExperienceLevel,
    max_exercises: int,
    rng: random.Random,
    excluded: Iterable[str] = (),
) -> list[Exercise]:
    candidates = filter_candidates(catalog, available_equipment, experience, excluded)

    selected: list[Exercise] = []
    selected_ids: set[str] = set()

    # One exercise per target muscle, preferring those where it is a primary mover
    for muscle in target_muscles:
        matching = [ex for ex in candidates if ex.targets(muscle)]
        if not matching:
            continue
        primary = [ex for ex in matching if muscle in ex.primary_muscles]
        choice = rng.choice(primary or matching)
        if choice.id not in selected_ids:
            selected.append(choice)
            selected_ids.add(choice.id)

    while len(selected) < max_exercises:
        remaining = [ex for ex in candidates if ex.id not in selected_ids]
        if not remaining:
            break
        choice = rng.choice(remaining)
        selected.append(choice)
        selected_ids.add(choice.id)

    return selected[:max_exercises]


def _draw(rng: random.Random, bounds: IntRange) -> int:
    return rng.randint(bounds.min, bounds.max)


def needs_warmup_sets(exercise: Exercise) -> bool:
    return len(exercise.primary_muscles) > 1 or bool(
        _WARMUP_MUSCLES.intersection(exercise.primary_muscles)
    )


def assign_sets(
    exercise: Exercise, workout_type: WorkoutType, rng: random.Random
) -> WorkoutExercise:
    definition = WORKOUT_TYPE_DEFINITIONS[workout_type]
    set_count = _draw(rng, definition.sets)
    reps = _draw(rng, definition.reps)
    rest = _draw(rng, definition.rest)
    rpe = min(max(_draw(rng, definition.rpe), 1), 10)

    sets = [WorkoutSet(reps=reps, rpe=rpe) for _ in range(set_count)]
    if needs_warmup_sets(exercise):
        sets = [
            WorkoutSet(reps=reps + 5, rpe=4, is_warmup=True),
            WorkoutSet(reps=reps + 2, rpe=6, is_warmup=True),
            *sets,
        ]
    return WorkoutExercise(exercise_id=exercise.id, sets=sets, rest_between_sets=rest)


def warmup_block(exercise_count: int) -> ProtocolBlock:
    return ProtocolBlock(
        name="Dynamic Warm-up",
        duration=min(10, WARMUP_MINUTES + exercise_count // 2),
        instructions=WARMUP_INSTRUCTIONS,
    )


def cooldown_block() -> ProtocolBlock:
    return ProtocolBlock(
        name="Cooldown & Stretching",
        duration=COOLDOWN_MINUTES,
        instructions=COOLDOWN_INSTRUCTIONS,
    )


def estimate_duration(
    exercises: Iterable[WorkoutExercise], warmup: ProtocolBlock, cooldown: ProtocolBlock
) -> int:
    minutes = sum(
        len(ex.sets) * (ex.rest_between_sets / 60 + SET_EXECUTION_SECONDS / 60)
        for ex in exercises
    )
    return math.ceil(warmup.duration + minutes + cooldown.duration)


def generate_workout(
    request: WorkoutRequest,
    catalog: Iterable[Exercise],
    rng: random.Random | None = None,
) -> GeneratedWorkout:
    """
    Build a single session for the request.

    Set weights are left at 0; fill them with
    ``services.workout_service.apply_set_weights``.
    """
    if request.time_available <= 0:
        raise ValueError("time_available must be positive")
    rng = rng or random.Random()

    workout_type = phase_for_week(request.goal, request.week_in_cycle)
    targets = list(request.muscle_group_preferences) or list(DEFAULT_MUSCLE_GROUPS)
    budget = exercise_count(request.time_available, workout_type, request.experience)

    selected = select_exercises(
        catalog,
        request.available_equipment,
        targets,
        request.experience,
        budget,
        rng,
        excluded=request.excluded_exercises,
    )
    if not selected:
        logger.warning(
            "No exercises matched equipment=%s experience=%s",
            [e.value for e in request.available_equipment],
            request.experience.value,
        )

    exercises = [assign_sets(ex, workout_type, rng) for ex in selected]
    warmup = warmup_block(len(selected))
    cooldown = cooldown_block()

    logger.debug(
        "Generated %s workout with %d exercises (budget %d)",
        workout_type.value,
        len(exercises),
        budget,
    )
    return GeneratedWorkout(
        exercises=exercises,
        workout_type=workout_type,
        warmup=warmup,
        cooldown=cooldown,
        estimated_duration=estimate_duration(exercises, warmup, cooldown),
    )


def copy_workout(workout: GeneratedWorkout) -> GeneratedWorkout:
    """Deep copy of exercises and sets; protocol blocks are immutable and shared."""
    return replace(
        workout,
        exercises=[
            replace(ex, sets=[replace(s) for s in ex.sets]) for ex in workout.exercises
        ],
    )
