"""
Built-in exercise catalog and helpers for browsing it.

Alternative exercises are stored as ids and resolved against the catalog
they belong to; ids without a matching record are dropped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from .enums import Difficulty, EquipmentType, MuscleGroup

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lower-case the name and replace whitespace runs with dashes."""
    return _WHITESPACE_RE.sub("-", name.lower())


@dataclass(frozen=True)
class Exercise:
    id: str
    name: str
    description: str
    primary_muscles: tuple[MuscleGroup, ...]
    secondary_muscles: tuple[MuscleGroup, ...]
    equipment: tuple[EquipmentType, ...]
    difficulty: Difficulty
    baseline_strength_ratio: float
    alternative_exercises: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()
    unilateral: bool = False

    def targets(self, muscle: MuscleGroup) -> bool:
        return muscle in self.primary_muscles or muscle in self.secondary_muscles

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "primary_muscles": [m.value for m in self.primary_muscles],
            "secondary_muscles": [m.value for m in self.secondary_muscles],
            "equipment": [e.value for e in self.equipment],
            "difficulty": self.difficulty.value,
            "baseline_strength_ratio": self.baseline_strength_ratio,
            "alternative_exercises": list(self.alternative_exercises),
            "instructions": list(self.instructions),
            "tips": list(self.tips),
            "unilateral": self.unilateral,
        }


_SQUAT_INSTRUCTIONS = (
    "Stand with feet shoulder-width apart",
    "Brace your core and keep chest up",
    "Bend knees and hips to lower your body",
    "Keep your weight on your heels",
    "Lower until thighs are parallel to ground (or as low as possible with good form)",
    "Drive through heels to return to standing position",
)

_BENCH_INSTRUCTIONS = (
    "Lie on bench with feet flat on floor",
    "Grip the bar slightly wider than shoulder width",
    "Unrack the bar and position it above chest",
    "Lower the bar to mid-chest level",
    "Press the bar back up to starting position",
)

_DEADLIFT_INSTRUCTIONS = (
    "Stand with feet hip-width apart, barbell over mid-foot",
    "Bend at hips and knees, grip bar just outside legs",
    "Keep chest up, spine neutral",
    "Drive through heels, extending hips and knees",
    "Keep bar close to body throughout the movement",
    "Stand fully upright at the top, shoulders back",
)

_GENERIC_INSTRUCTIONS = (
    "Set up with proper form and body alignment",
    "Brace core for stability throughout movement",
    "Perform the movement with controlled tempo",
    "Focus on muscle contraction during the exercise",
    "Complete the full range of motion if possible",
)

_COMMON_TIPS = (
    "Focus on mind-muscle connection",
    "Maintain proper breathing throughout",
    "Don't sacrifice form for heavier weight",
    "Control the eccentric (lowering) portion",
)


def instructions_for(name: str) -> tuple[str, ...]:
    if "Squat" in name:
        return _SQUAT_INSTRUCTIONS
    if "Bench Press" in name:
        return _BENCH_INSTRUCTIONS
    if "Deadlift" in name:
        return _DEADLIFT_INSTRUCTIONS
    return _GENERIC_INSTRUCTIONS


def tips_for(
    name: str, primary: Sequence[MuscleGroup], equipment: Sequence[EquipmentType]
) -> tuple[str, ...]:
    specific: list[str] = []
    if MuscleGroup.CHEST in primary:
        specific.append("Focus on squeezing your chest at the top of the movement")
    if MuscleGroup.BACK in primary:
        specific.append("Pull with your elbows, not your hands")
    if MuscleGroup.QUADS in primary or MuscleGroup.HAMSTRINGS in primary:
        specific.append("Keep your knees tracking over your toes")
    if EquipmentType.BARBELL in equipment:
        specific.append("Ensure even grip width on both sides of the barbell")
    if EquipmentType.DUMBBELL in equipment and "Press" in name:
        specific.append("Using dumbbells allows for greater range of motion than a barbell")
    return _COMMON_TIPS + tuple(specific)


def make_exercise(
    name: str,
    description: str,
    primary: Iterable[MuscleGroup | str],
    secondary: Iterable[MuscleGroup | str],
    equipment: Iterable[EquipmentType | str],
    difficulty: Difficulty | str,
    baseline_ratio: float,
    alternatives: Iterable[str] = (),
    unilateral: bool = False,
) -> Exercise:
    """Create an exercise record, deriving id, instructions and tips from its name."""
    primary_t = tuple(MuscleGroup(m) for m in primary)
    equipment_t = tuple(EquipmentType(e) for e in equipment)
    return Exercise(
        id=slugify(name),
        name=name,
        description=description,
        primary_muscles=primary_t,
        secondary_muscles=tuple(MuscleGroup(m) for m in secondary),
        equipment=equipment_t,
        difficulty=Difficulty(difficulty),
        baseline_strength_ratio=float(baseline_ratio),
        alternative_exercises=tuple(alternatives),
        instructions=instructions_for(name),
        tips=tips_for(name, primary_t, equipment_t),
        unilateral=unilateral,
    )


def _raw_catalog() -> list[Exercise]:
    return [
        # Compound barbell exercises
        make_exercise(
            "Barbell Back Squat",
            "A compound lower body exercise that targets the quadriceps, hamstrings, and glutes.",
            ["quads", "glutes"],
            ["hamstrings", "core"],
            ["barbell"],
            "intermediate",
            1.5,
            ["front-squat", "goblet-squat", "hack-squat"],
        ),
        make_exercise(
            "Front Squat",
            "A squat variation that emphasizes the quadriceps with the barbell held across "
            "the front deltoids.",
            ["quads"],
            ["glutes", "core", "shoulders"],
            ["barbell"],
            "intermediate",
            1.2,
            ["back-squat", "goblet-squat", "hack-squat"],
        ),
        make_exercise(
            "Barbell Bench Press",
            "A compound upper body pushing exercise that primarily targets the chest.",
            ["chest"],
            ["triceps", "shoulders"],
            ["barbell", "bench"],
            "intermediate",
            1.0,
            ["dumbbell-bench-press", "incline-bench-press", "push-up"],
        ),
        make_exercise(
            "Incline Bench Press",
            "A bench press variation performed on an inclined bench to emphasize the upper chest.",
            ["chest"],
            ["shoulders", "triceps"],
            ["barbell", "bench"],
            "intermediate",
            0.8,
            ["dumbbell-incline-bench-press", "barbell-bench-press"],
        ),
        make_exercise(
            "Barbell Deadlift",
            "A fundamental compound exercise that targets the posterior chain.",
            ["hamstrings", "glutes", "back"],
            ["quads", "core", "traps", "forearms"],
            ["barbell"],
            "intermediate",
            1.75,
            ["romanian-deadlift", "trap-bar-deadlift", "sumo-deadlift"],
        ),
        make_exercise(
            "Romanian Deadlift",
            "A deadlift variation that emphasizes the hamstrings and glutes "
            "with less knee flexion.",
            ["hamstrings", "glutes"],
            ["back", "forearms"],
            ["barbell"],
            "intermediate",
            1.25,
            ["barbell-deadlift", "stiff-leg-deadlift", "good-morning"],
        ),
        make_exercise(
            "Barbell Row",
            "A compound pulling exercise for the back where the torso is bent forward.",
            ["back", "lats"],
            ["biceps", "shoulders", "forearms"],
            ["barbell"],
            "intermediate",
            0.7,
            ["dumbbell-row", "cable-row", "pull-up"],
        ),
        make_exercise(
            "Overhead Press",
            "A vertical pressing movement that targets the shoulders.",
            ["shoulders"],
            ["triceps", "traps", "core"],
            ["barbell"],
            "intermediate",
            0.65,
            ["dumbbell-overhead-press", "push-press", "seated-barbell-press"],
        ),
        # Compound dumbbell exercises
        make_exercise(
            "Dumbbell Bench Press",
            "A bench press variation using dumbbells for more range of motion.",
            ["chest"],
            ["triceps", "shoulders"],
            ["dumbbell", "bench"],
            "beginner",
            0.8,
            ["barbell-bench-press", "push-up", "machine-chest-press"],
        ),
        make_exercise(
            "Dumbbell Row",
            "A unilateral back exercise performed with one arm at a time.",
            ["back", "lats"],
            ["biceps", "shoulders", "forearms"],
            ["dumbbell", "bench"],
            "beginner",
            0.4,  # per arm
            ["barbell-row", "cable-row", "machine-row"],
            unilateral=True,
        ),
        make_exercise(
            "Dumbbell Shoulder Press",
            "An overhead pressing movement using dumbbells for shoulder development.",
            ["shoulders"],
            ["triceps", "traps"],
            ["dumbbell"],
            "beginner",
            0.3,  # per arm
            ["barbell-overhead-press", "machine-shoulder-press"],
        ),
        make_exercise(
            "Goblet Squat",
            "A beginner-friendly squat variation holding a single dumbbell or kettlebell.",
            ["quads", "glutes"],
            ["hamstrings", "core"],
            ["dumbbell", "kettlebell"],
            "beginner",
            0.5,
            ["barbell-back-squat", "front-squat", "bodyweight-squat"],
        ),
        # Bodyweight exercises
        make_exercise(
            "Push-up",
            "A fundamental bodyweight exercise for the upper body.",
            ["chest"],
            ["shoulders", "triceps", "core"],
            ["bodyweight"],
            "beginner",
            0.0,
            ["bench-press", "incline-push-up", "decline-push-up"],
        ),
        make_exercise(
            "Pull-up",
            "A vertical pulling movement using bodyweight.",
            ["back", "lats"],
            ["biceps", "forearms", "shoulders"],
            ["bodyweight", "pull_up_bar"],
            "intermediate",
            0.0,
            ["chin-up", "lat-pulldown", "assisted-pull-up"],
        ),
        make_exercise(
            "Bodyweight Squat",
            "A lower body exercise using only bodyweight for resistance.",
            ["quads", "glutes"],
            ["hamstrings"],
            ["bodyweight"],
            "beginner",
            0.0,
            ["goblet-squat", "back-squat", "split-squat"],
        ),
        make_exercise(
            "Lunge",
            "A unilateral lower body exercise that develops balance and strength.",
            ["quads", "glutes"],
            ["hamstrings", "core"],
            ["bodyweight"],
            "beginner",
            0.0,
            ["split-squat", "walking-lunge", "bulgarian-split-squat"],
            unilateral=True,
        ),
        # Machine exercises
        make_exercise(
            "Lat Pulldown",
            "A machine exercise that mimics the pull-up motion.",
            ["back", "lats"],
            ["biceps", "forearms"],
            ["machine", "cable"],
            "beginner",
            0.7,
            ["pull-up", "seated-row", "straight-arm-pulldown"],
        ),
        make_exercise(
            "Leg Press",
            "A machine-based lower body pushing exercise.",
            ["quads", "glutes"],
            ["hamstrings"],
            ["machine"],
            "beginner",
            2.0,
            ["hack-squat", "barbell-squat", "dumbbell-squat"],
        ),
        make_exercise(
            "Chest Press Machine",
            "A machine-based pushing exercise for the chest.",
            ["chest"],
            ["triceps", "shoulders"],
            ["machine"],
            "beginner",
            0.9,
            ["bench-press", "dumbbell-bench-press", "push-up"],
        ),
        # Isolation exercises
        make_exercise(
            "Bicep Curl",
            "An isolation exercise for the biceps.",
            ["biceps"],
            ["forearms"],
            ["dumbbell", "barbell", "cable"],
            "beginner",
            0.3,
            ["hammer-curl", "preacher-curl", "chin-up"],
        ),
        make_exercise(
            "Tricep Pushdown",
            "An isolation exercise for the triceps using a cable machine.",
            ["triceps"],
            [],
            ["cable"],
            "beginner",
            0.3,
            ["skull-crusher", "tricep-dip", "overhead-tricep-extension"],
        ),
        make_exercise(
            "Leg Extension",
            "An isolation exercise for the quadriceps.",
            ["quads"],
            [],
            ["machine"],
            "beginner",
            0.5,
            ["leg-press", "squat", "lunge"],
        ),
        make_exercise(
            "Leg Curl",
            "An isolation exercise for the hamstrings.",
            ["hamstrings"],
            [],
            ["machine"],
            "beginner",
            0.5,
            ["romanian-deadlift", "glute-ham-raise", "good-morning"],
        ),
        make_exercise(
            "Lateral Raise",
            "An isolation exercise for the lateral deltoids.",
            ["shoulders"],
            [],
            ["dumbbell", "cable"],
            "beginner",
            0.1,
            ["front-raise", "upright-row", "overhead-press"],
        ),
        make_exercise(
            "Calf Raise",
            "An isolation exercise for the calves.",
            ["calves"],
            [],
            ["machine", "dumbbell", "bodyweight"],
            "beginner",
            0.8,
            ["seated-calf-raise", "donkey-calf-raise"],
        ),
    ]


def resolve_alternatives(catalog: Sequence[Exercise]) -> list[Exercise]:
    """
    Keep only alternative ids that exist in the same catalog.

    Dangling references are dropped without raising.
    """
    index = {exercise.id: exercise for exercise in catalog}
    resolved: list[Exercise] = []
    for exercise in catalog:
        valid = tuple(alt for alt in exercise.alternative_exercises if alt in index)
        if len(valid) != len(exercise.alternative_exercises):
            logger.debug(
                "Dropped %d unknown alternatives for %s",
                len(exercise.alternative_exercises) - len(valid),
                exercise.id,
            )
        resolved.append(replace(exercise, alternative_exercises=valid))
    return resolved


def build_catalog() -> list[Exercise]:
    """Return the built-in exercise list with alternatives resolved."""
    return resolve_alternatives(_raw_catalog())


@dataclass
class ExerciseCatalog:
    """Read-only view over a list of exercises with an id index."""

    exercises: list[Exercise]
    _index: dict[str, Exercise] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = {exercise.id: exercise for exercise in self.exercises}

    def __len__(self) -> int:
        return len(self.exercises)

    def __iter__(self):
        return iter(self.exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._index

    def get(self, exercise_id: str) -> Exercise | None:
        return self._index.get(exercise_id)

    def alternatives_for(self, exercise_id: str) -> list[Exercise]:
        exercise = self._index.get(exercise_id)
        if exercise is None:
            return []
        return [self._index[a] for a in exercise.alternative_exercises if a in self._index]

    def search(
        self,
        query: str | None = None,
        muscle_group: MuscleGroup | str | None = None,
        equipment: EquipmentType | str | None = None,
        difficulty: Difficulty | str | None = None,
    ) -> list[Exercise]:
        """Filter by name substring, targeted muscle, equipment and difficulty."""
        needle = (query or "").strip().lower()
        muscle = MuscleGroup(muscle_group) if muscle_group else None
        equip = EquipmentType(equipment) if equipment else None
        level = Difficulty(difficulty) if difficulty else None

        results = []
        for exercise in self.exercises:
            if needle and needle not in exercise.name.lower():
                continue
            if muscle and not exercise.targets(muscle):
                continue
            if equip and equip not in exercise.equipment:
                continue
            if level and exercise.difficulty != level:
                continue
            results.append(exercise)
        return results

    def muscle_groups(self) -> list[MuscleGroup]:
        groups = {m for ex in self.exercises for m in ex.primary_muscles + ex.secondary_muscles}
        return sorted(groups, key=lambda m: m.value)

    def equipment_types(self) -> list[EquipmentType]:
        types = {e for ex in self.exercises for e in ex.equipment}
        return sorted(types, key=lambda e: e.value)
