"""
Service for workout plan creation and rendering.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass

from ..catalog import ExerciseCatalog
from ..config import SETTINGS
from ..enums import ExperienceLevel, FitnessGoal, Gender, MeasurementSystem
from ..exercise_file import get_catalog
from ..generator import GeneratedWorkout, WorkoutRequest, copy_workout, generate_workout
from ..weights import adjust_for_goal, baseline_weight, round_weight, set_weight

DEFAULT_SET_RPE = 7


@dataclass
class UserProfile:
    bodyweight: float
    gender: Gender
    age: int
    experience: ExperienceLevel
    measurement_system: MeasurementSystem
    goal: FitnessGoal

    def __post_init__(self) -> None:
        self.gender = Gender(self.gender)
        self.experience = ExperienceLevel(self.experience)
        self.measurement_system = MeasurementSystem(self.measurement_system)
        self.goal = FitnessGoal(self.goal)

    @property
    def unit(self) -> str:
        return "kg" if self.measurement_system is MeasurementSystem.METRIC else "lbs"


def apply_set_weights(
    workout: GeneratedWorkout, catalog: ExerciseCatalog, profile: UserProfile
) -> GeneratedWorkout:
    """Return a copy of the workout with every set's weight filled in for the profile."""
    weighted = copy_workout(workout)
    for item in weighted.exercises:
        exercise = catalog.get(item.exercise_id)
        if exercise is None:
            logging.warning("Unknown exercise %s, leaving weights unset", item.exercise_id)
            continue

        base = baseline_weight(
            exercise.baseline_strength_ratio,
            profile.bodyweight,
            profile.gender,
            profile.age,
            profile.experience,
            profile.measurement_system,
        )
        adjusted = adjust_for_goal(base, profile.goal)
        for s in item.sets:
            load = set_weight(adjusted, s.reps, s.rpe or DEFAULT_SET_RPE, s.is_warmup)
            s.weight = round_weight(load, profile.measurement_system)
    return weighted


class WorkoutService:
    """Service for handling workout-related operations."""

    def __init__(self, catalog: ExerciseCatalog | None = None):
        self.catalog = catalog if catalog is not None else get_catalog()

    async def generate_plan(
        self, request: WorkoutRequest, profile: UserProfile, seed: int | None = None
    ) -> GeneratedWorkout:
        """Generate a workout and fill in set weights for the profile."""
        if SETTINGS.GENERATION_DELAY_SECONDS:
            await asyncio.sleep(SETTINGS.GENERATION_DELAY_SECONDS)

        if seed is None:
            seed = SETTINGS.DEFAULT_SEED
        rng = random.Random(seed)

        workout = generate_workout(request, self.catalog, rng)
        logging.info(
            "Generated %s workout: %d exercises, ~%d min",
            workout.workout_type.value,
            len(workout.exercises),
            workout.estimated_duration,
        )
        return apply_set_weights(workout, self.catalog, profile)

    def render_plan_message(self, workout: GeneratedWorkout, unit: str = "kg") -> str:
        """Render a workout as a plain-text summary."""
        lines = [
            f"{workout.workout_type.value.title()} workout — ~{workout.estimated_duration} min",
            "",
            f"{workout.warmup.name} ({workout.warmup.duration} min)",
        ]

        for item in workout.exercises:
            exercise = self.catalog.get(item.exercise_id)
            name = exercise.name if exercise else item.exercise_id

            working = item.working_sets
            if not working:
                lines.append(f"• {name}: no working sets")
                continue
            top = working[0]
            line = f"• {name}: {len(working)}x{top.reps} @ {top.weight:g} {unit}"
            if top.rpe:
                line += f" RPE{top.rpe}"
            warmups = len(item.sets) - len(working)
            if warmups:
                line += f" (+{warmups} warm-up)"
            line += f", rest {item.rest_between_sets}s"
            lines.append(line)

        lines.append(f"{workout.cooldown.name} ({workout.cooldown.duration} min)")
        return "\n".join(lines)
